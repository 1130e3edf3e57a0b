"""High-level async API for action-walk.

This module provides simple coroutines for common questions about a
directory tree. Each one is a thin set of actions over ``walk``.
"""

import asyncio
import os
from typing import Collection, Dict, Iterable, List, Optional

from ..config import SKIP, StatMode, WalkOptions
from .entry import EntryKind, WalkContext
from .walker import PathLike, walk


def _add_size(path: str, context: WalkContext) -> None:
    context.own['total'] += context.metadata.st_size


async def calculate_size_async(
    root: PathLike,
    stat: str = 'lstat',
    skip_dirs: Collection[str] = (),
    include_top_level: bool = False
) -> int:
    """Total the sizes reported for every entry under root.

    Args:
        root: Directory to walk
        stat: 'lstat' counts links as themselves, 'stat' counts their targets
        skip_dirs: Directory names whose subtrees (and themselves) are not counted
        include_top_level: Also count root's own size

    Returns:
        Total size in bytes

    Example:
        >>> total = await calculate_size_async('.', skip_dirs={'node_modules'})
    """
    skip = set(skip_dirs)

    def dir_action(path: str, context: WalkContext):
        if context.entry.name in skip:
            return SKIP
        context.own['total'] += context.metadata.st_size

    own = {'total': 0}
    await walk(root, WalkOptions(
        dir_action=dir_action,
        file_action=_add_size,
        link_action=_add_size,
        other_action=_add_size,
        stat=StatMode.coerce(stat),
        include_top_level=include_top_level,
        own=own,
    ))
    return own['total']


async def count_entries_async(
    root: PathLike,
    include_top_level: bool = False
) -> Dict[EntryKind, int]:
    """Count visited entries by kind.

    Returns:
        Mapping with a count for every EntryKind (zero when absent)
    """
    counts = {kind: 0 for kind in EntryKind}

    def count(path: str, context: WalkContext) -> None:
        context.own[context.entry.kind] += 1

    await walk(
        root,
        dir_action=count,
        file_action=count,
        link_action=count,
        other_action=count,
        include_top_level=include_top_level,
        own=counts,
    )
    return counts


async def collect_paths_async(
    root: PathLike,
    kinds: Optional[Iterable[EntryKind]] = None,
    include_top_level: bool = False
) -> List[str]:
    """Collect entry paths in visit order.

    Args:
        root: Directory to walk
        kinds: Only collect entries of these kinds (default: all)
        include_top_level: Include root itself as the first path

    Returns:
        List of paths as built by the walker
    """
    wanted = set(kinds) if kinds is not None else set(EntryKind)
    paths: List[str] = []

    def collect(path: str, context: WalkContext) -> None:
        if context.entry.kind in wanted:
            context.own.append(path)

    await walk(
        root,
        dir_action=collect,
        file_action=collect,
        link_action=collect,
        other_action=collect,
        include_top_level=include_top_level,
        own=paths,
    )
    return paths


async def directory_totals_async(
    root: PathLike,
    skip_dirs: Collection[str] = ()
) -> Dict[str, int]:
    """Compute a du-style lstat total for root and every directory under it.

    Each directory is totalled by a nested walk started from its own
    directory action, which then returns SKIP so the outer walk does not
    count the subtree a second time.

    Returns:
        Mapping of directory path to its own size plus everything below it
    """
    skip = set(skip_dirs)
    totals: Dict[str, int] = {}

    async def dir_action(path: str, context: WalkContext):
        if context.entry.name in skip:
            return SKIP
        subtree = {'total': 0}
        await walk(path, WalkOptions(
            dir_action=dir_action,
            file_action=_add_size,
            link_action=_add_size,
            other_action=_add_size,
            stat=StatMode.LSTAT,
            own=subtree,
        ))
        totals[path] = subtree['total'] + context.metadata.st_size
        context.own['total'] += totals[path]
        return SKIP

    root = os.fspath(root)
    own = {'total': 0}
    await walk(root, WalkOptions(
        dir_action=dir_action,
        file_action=_add_size,
        link_action=_add_size,
        other_action=_add_size,
        stat=StatMode.LSTAT,
        own=own,
    ))
    root_stat = await asyncio.to_thread(os.lstat, root)
    totals[root] = own['total'] + root_stat.st_size
    return totals
