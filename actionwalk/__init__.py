"""action-walk - Async, action-driven directory tree walker.

Walk a directory tree depth-first and have your own functions called for
every directory, file, symbolic link and other entry:

    from actionwalk import walk, SKIP

    def dir_action(path, ctx):
        if ctx.entry.name == 'node_modules':
            return SKIP
        ctx.own['total'] += ctx.metadata.st_size

    await walk('.', dir_action=dir_action, file_action=..., stat=True,
               own={'total': 0})

Everything lives in ``actionwalk.aio``; the most used names are
re-exported here.
"""

__version__ = "1.0.0"

from . import aio
from .config import CONTINUE, SKIP, StatMode, WalkControl, WalkOptions
from .aio import AncestorStack, Entry, EntryKind, WalkContext, walk

__all__ = [
    "__version__",
    "aio",
    "walk",
    "WalkOptions",
    "WalkContext",
    "Entry",
    "EntryKind",
    "AncestorStack",
    "StatMode",
    "WalkControl",
    "SKIP",
    "CONTINUE",
]
