"""Entry, stack and context types handed to walk actions.

An ``Entry`` describes one item of a directory listing. The ``WalkContext``
bundles it with the live ancestor stack, the caller's ``own`` value and
the optional stat result.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar, overload
from collections.abc import Sequence


T = TypeVar('T')


class EntryKind(Enum):
    """Filesystem entry classification, never following links."""
    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"     # devices, sockets, fifos, ...

    @classmethod
    def of(cls, dir_entry: os.DirEntry) -> 'EntryKind':
        """Classify a DirEntry from os.scandir.

        Uses the cached d_type information where the platform provides it.
        """
        if dir_entry.is_dir(follow_symlinks=False):
            return cls.DIRECTORY
        if dir_entry.is_file(follow_symlinks=False):
            return cls.FILE
        if dir_entry.is_symlink():
            return cls.SYMLINK
        return cls.OTHER


@dataclass(frozen=True)
class Entry:
    """One directory entry produced during traversal."""

    name: str
    kind: EntryKind

    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK

    def is_other(self) -> bool:
        return self.kind is EntryKind.OTHER

    @classmethod
    def from_dir_entry(cls, dir_entry: os.DirEntry) -> 'Entry':
        return cls(dir_entry.name, EntryKind.of(dir_entry))


class AncestorStack(Sequence):
    """Read-only live view of the walker's ancestor names.

    The view reflects the walker's state at the moment it is read, so it
    is only meaningful while an action is running. Keep ``snapshot()``
    instead of the view itself when the names are needed later.
    """

    __slots__ = ('_names',)

    def __init__(self, names: List[str]):
        self._names = names

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[str, ...]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._names[index])
        return self._names[index]

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __eq__(self, other) -> bool:
        if isinstance(other, AncestorStack):
            return self._names == other._names
        if isinstance(other, (list, tuple)):
            return list(self._names) == list(other)
        return NotImplemented

    __hash__ = None

    def snapshot(self) -> Tuple[str, ...]:
        """Immutable copy of the current ancestor names."""
        return tuple(self._names)

    def __repr__(self) -> str:
        return f"AncestorStack({self._names!r})"


@dataclass
class WalkContext(Generic[T]):
    """Per-entry context passed to every action.

    Attributes:
        entry: The entry being visited
        stack: Live view of ancestor directory names
        own: The caller's accumulator from WalkOptions.own
        metadata: stat/lstat result, or None when stat mode is off
    """

    entry: Entry
    stack: AncestorStack
    own: Optional[T] = None
    metadata: Optional[os.stat_result] = None

    @property
    def stat(self) -> Optional[os.stat_result]:
        """Alias of ``metadata`` under the stat-family name."""
        return self.metadata
