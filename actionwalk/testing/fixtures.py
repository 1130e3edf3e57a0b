"""Test fixtures for action-walk consumers.

``TreeBuilder`` lays out small directory trees (files, directories,
symbolic links, fifos) and ``enumerate_tree`` computes the values a walk
over them should produce by listing the tree directly, without going
through the walker.
"""

import os
import stat as stat_module
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Collection, Dict, Mapping, Optional, Union


@dataclass(frozen=True)
class Link:
    """Marker for a symbolic link in a TreeBuilder layout."""
    target: str
    target_is_directory: bool = False


@dataclass(frozen=True)
class Fifo:
    """Marker for a named pipe in a TreeBuilder layout."""


class TreeBuilder:
    """Builds directory trees for tests.

    Example:
        builder = TreeBuilder(tmp_path / "root")
        builder.build({
            "a.txt": "x" * 10,
            "sub": {"b.txt": "y" * 20},
            "link": Link("a.txt"),
        })
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)

    def dir(self, relpath: str) -> Path:
        path = self.root / relpath
        path.mkdir(parents=True, exist_ok=True)
        return path

    def file(self, relpath: str, content: Union[str, bytes] = b"") -> Path:
        path = self.root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            content = content.encode()
        path.write_bytes(content)
        return path

    def symlink(self, relpath: str, target: str, target_is_directory: bool = False) -> Path:
        path = self.root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        os.symlink(target, path, target_is_directory=target_is_directory)
        return path

    def fifo(self, relpath: str) -> Path:
        path = self.root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        os.mkfifo(path)
        return path

    def build(self, layout: Mapping[str, Any], prefix: str = "") -> 'TreeBuilder':
        """Create a nested layout.

        Values: str/bytes -> file content, dict -> subdirectory,
        Link -> symbolic link, Fifo -> named pipe.
        """
        for name, value in layout.items():
            relpath = os.path.join(prefix, name) if prefix else name
            if isinstance(value, Mapping):
                self.dir(relpath)
                self.build(value, relpath)
            elif isinstance(value, Link):
                self.symlink(relpath, value.target, value.target_is_directory)
            elif isinstance(value, Fifo):
                self.fifo(relpath)
            else:
                self.file(relpath, value)
        return self


@dataclass
class LinkInfo:
    target: str
    link_size: int
    target_size: Optional[int]    # None for a broken link


@dataclass
class ExpectedTree:
    """What a full walk over a tree should see.

    Paths are built the way the walker builds them, joined onto the root
    string as given. ``directories`` includes the root itself; the walker
    only visits it with include_top_level.
    """

    root: str
    directories: Dict[str, int] = field(default_factory=dict)
    files: Dict[str, int] = field(default_factory=dict)
    links: Dict[str, LinkInfo] = field(default_factory=dict)
    others: Dict[str, int] = field(default_factory=dict)

    def all_paths(self, include_root: bool = False) -> set:
        paths = set(self.directories) | set(self.files) | set(self.links) | set(self.others)
        if not include_root:
            paths.discard(self.root)
        return paths

    def lstat_total(self, include_root: bool = False) -> int:
        total = (sum(self.directories.values()) + sum(self.files.values())
                 + sum(link.link_size for link in self.links.values())
                 + sum(self.others.values()))
        if not include_root:
            total -= self.directories[self.root]
        return total

    def link_delta(self) -> int:
        """Sum of (target size - link size) over all links."""
        return sum(link.target_size - link.link_size
                   for link in self.links.values()
                   if link.target_size is not None)

    def cumulative(self) -> Dict[str, int]:
        """du -ab style totals: each directory's lstat size plus its contents."""
        sizes: Dict[str, int] = {}
        sizes.update(self.directories)
        sizes.update(self.files)
        sizes.update(self.others)
        sizes.update({path: link.link_size for path, link in self.links.items()})
        del sizes[self.root]

        totals = dict(self.directories)
        for path, size in sizes.items():
            parent = os.path.dirname(path)
            while parent in totals:
                totals[parent] += size
                if parent == self.root:
                    break
                parent = os.path.dirname(parent)
        return totals


def enumerate_tree(root: Union[str, Path], exclusions: Collection[str] = ()) -> ExpectedTree:
    """List a tree directly with os.scandir/os.lstat.

    Args:
        root: Tree root
        exclusions: Directory names that are neither recorded nor entered

    Returns:
        ExpectedTree describing every entry below root
    """
    root = os.fspath(root)
    expected = ExpectedTree(root=root)
    expected.directories[root] = os.lstat(root).st_size

    def scan(directory: str) -> None:
        with os.scandir(directory) as iterator:
            dir_entries = list(iterator)
        for dir_entry in dir_entries:
            path = os.path.join(directory, dir_entry.name)
            info = os.lstat(path)
            mode = info.st_mode
            if stat_module.S_ISDIR(mode):
                if dir_entry.name in exclusions:
                    continue
                expected.directories[path] = info.st_size
                scan(path)
            elif stat_module.S_ISREG(mode):
                expected.files[path] = info.st_size
            elif stat_module.S_ISLNK(mode):
                try:
                    target_size = os.stat(path).st_size
                except OSError:
                    target_size = None
                expected.links[path] = LinkInfo(os.readlink(path), info.st_size, target_size)
            else:
                expected.others[path] = info.st_size

    scan(root)
    return expected
