"""Command-line interface for action-walk.

Lists every entry under a directory with its size and prints the total:

    action-walk [-t|--include-top-level] [--stat {stat,lstat}] [-v] directory
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .aio import WalkContext, walk


USAGE = "usage: action-walk [--include-top-level] directory"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="action-walk",
        description="Walk a directory tree printing each entry's name and size",
    )
    parser.add_argument("directory", nargs="?", help="Directory to walk")
    parser.add_argument(
        "-t", "--include-top-level",
        action="store_true",
        help="Also report the directory itself"
    )
    parser.add_argument(
        "--stat",
        choices=["stat", "lstat"],
        default="lstat",
        help="Report link targets (stat) or the links themselves (lstat, default)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def dir_action(path: str, context: WalkContext) -> None:
    size = context.metadata.st_size
    print(f"{context.entry.name}/", size)
    context.own["total"] += size


def file_action(path: str, context: WalkContext) -> None:
    size = context.metadata.st_size
    if context.entry.is_symlink():
        print(context.entry.name, "->", size)
    else:
        print(context.entry.name, size)
    context.own["total"] += size


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.directory is None:
        print(USAGE)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    own = {"total": 0}
    try:
        asyncio.run(walk(
            args.directory,
            dir_action=dir_action,
            file_action=file_action,
            stat=args.stat,
            include_top_level=args.include_top_level,
            own=own,
        ))
    except OSError as e:
        print(f"action-walk: {e}", file=sys.stderr)
        return 1

    print(f"total: {own['total']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
