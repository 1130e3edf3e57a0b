"""Async action-driven directory walker.

Walks a directory tree depth-first, one entry at a time, calling the
configured action for each entry's kind. Directory actions may return
``SKIP`` to keep the walker out of that directory.
"""

import asyncio
import dataclasses
import inspect
import logging
import os
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, Union

from ..config import Action, StatMode, WalkControl, WalkOptions
from .entry import AncestorStack, Entry, EntryKind, WalkContext


logger = logging.getLogger(__name__)

PathLike = Union[str, 'os.PathLike[str]']


def _scan_directory_sync(path: str) -> List[Entry]:
    """List a directory in stream order, classifying each entry.

    Runs in a worker thread; classification may need a stat call on
    filesystems without d_type support.
    """
    with os.scandir(path) as iterator:
        return [Entry.from_dir_entry(dir_entry) for dir_entry in iterator]


def _basename(path: str) -> str:
    return os.path.basename(os.path.normpath(path))


async def _invoke(action: Action, path: str, context: WalkContext) -> Any:
    """Call a sync or async action and wait for its result."""
    result = action(path, context)
    if inspect.isawaitable(result):
        result = await result
    return result


class _Frame(NamedTuple):
    """An open directory listing and the entries not yet dispatched."""
    path: str
    entries: Iterator[Entry]


class _Walker:
    """State for a single walk() invocation.

    Holds the ancestor name list shared by every context and the
    kind -> action dispatch table.
    """

    def __init__(self, options: WalkOptions):
        self.options = options
        self.stat_mode = options.stat_mode
        self._names: List[str] = []
        self.stack = AncestorStack(self._names)
        self.actions: Dict[EntryKind, Optional[Action]] = {
            EntryKind.DIRECTORY: options.dir_action,
            EntryKind.FILE: options.file_action,
            EntryKind.SYMLINK: options.link_action,
            EntryKind.OTHER: options.other_action,
        }

    def action_for(self, kind: EntryKind) -> Optional[Action]:
        """Look up the action for a kind.

        Symbolic links without their own action are handed to the file
        action; the entry still reports SYMLINK as its kind.
        """
        action = self.actions[kind]
        if action is None and kind is EntryKind.SYMLINK:
            action = self.actions[EntryKind.FILE]
        return action

    async def run(self, root: str) -> None:
        if self.options.include_top_level:
            name = '' if os.path.normpath(root) == os.curdir else _basename(root)
            if not await self.visit(root, Entry(name, EntryKind.DIRECTORY)):
                return
        await self.walk_directory(root)

    async def fetch_metadata(self, path: str) -> os.stat_result:
        if self.stat_mode is StatMode.LSTAT:
            return await asyncio.to_thread(os.lstat, path)
        return await asyncio.to_thread(os.stat, path)

    async def visit(self, path: str, entry: Entry) -> bool:
        """Dispatch one entry.

        Returns True when the entry is a directory the walker should
        descend into.
        """
        context = WalkContext(entry, self.stack, self.options.own)
        if self.stat_mode is not StatMode.NONE:
            context.metadata = await self.fetch_metadata(path)

        action = self.action_for(entry.kind)
        result = await _invoke(action, path, context) if action else None

        if entry.kind is not EntryKind.DIRECTORY:
            return False
        if result is WalkControl.SKIP:
            logger.debug("Skipping %s", path)
            return False
        return True

    async def open_directory(self, frames: List[_Frame], path: str) -> None:
        self._names.append(_basename(path))
        entries = await asyncio.to_thread(_scan_directory_sync, path)
        frames.append(_Frame(path, iter(entries)))

    async def walk_directory(self, path: str) -> None:
        """Walk everything below ``path`` depth-first.

        Open listings are kept on an explicit frame list, so tree depth
        is not limited by the interpreter's recursion limit.
        """
        depth = len(self._names)
        frames: List[_Frame] = []
        try:
            await self.open_directory(frames, path)
            while frames:
                frame = frames[-1]
                entry = next(frame.entries, None)
                if entry is None:
                    frames.pop()
                    self._names.pop()
                    continue
                # os.path.join keeps a leading './' on paths under '.'
                entry_path = os.path.join(frame.path, entry.name)
                if await self.visit(entry_path, entry):
                    await self.open_directory(frames, entry_path)
        finally:
            del self._names[depth:]


async def walk(
    root: PathLike,
    options: Optional[WalkOptions] = None,
    **overrides: Any
) -> None:
    """Walk a directory tree, calling actions for each entry.

    Entries are visited strictly one at a time in directory-stream order,
    depth-first: each action (and any descent it allows) completes before
    the next sibling is read. Actions receive ``(path, context)`` where
    ``path`` is the entry's path joined onto ``root`` as given.

    Each directory is listed in full, in a worker thread, before its
    first entry is dispatched, and the listing is not refreshed while
    its entries are visited. Memory held per open directory is
    proportional to its number of entries, and an entry removed by an
    earlier sibling's action is still dispatched (a stat mode will then
    raise FileNotFoundError for it). Depth is not limited by the
    interpreter's recursion limit.

    Args:
        root: Directory to walk
        options: Walk configuration (actions, stat mode, own, ...)
        **overrides: WalkOptions fields; build the options when ``options``
            is None, otherwise replace fields of ``options``

    Raises:
        NotADirectoryError: If root is not a directory
        FileNotFoundError: If root (or a racing entry) does not exist
        ValueError: If the options are invalid
        Exception: Anything raised by stat/lstat or by an action

    Example:
        >>> own = {'total': 0}
        >>> def add(path, ctx):
        ...     ctx.own['total'] += ctx.metadata.st_size
        >>> await walk('src', file_action=add, stat='lstat', own=own)
    """
    if options is None:
        options = WalkOptions(**overrides)
    elif overrides:
        options = dataclasses.replace(options, **overrides)

    errors = options.validate()
    if errors:
        raise ValueError(f"Invalid configuration: {', '.join(errors)}")

    root = os.fspath(root)
    logger.debug(
        "Walking %s (stat=%s, include_top_level=%s)",
        root, options.stat_mode.value, options.include_top_level
    )
    await _Walker(options).run(root)
    logger.debug("Finished walking %s", root)
