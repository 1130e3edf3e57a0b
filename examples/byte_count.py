#!/usr/bin/env python3
"""
Byte counting example for action-walk.

Walks a directory tree, skipping dependency and VCS directories, and
totals the number of bytes reported by stat for everything else.

This example demonstrates:
- Returning SKIP from a directory action to prune a subtree
- Accumulating results in the shared ``own`` value
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from actionwalk import SKIP, walk


def dir_action(path, context):
    own = context.own
    if context.entry.name in own['skip_dirs']:
        return SKIP
    own['total'] += context.metadata.st_size


def file_action(path, context):
    context.own['total'] += context.metadata.st_size


async def main():
    root = sys.argv[1] if len(sys.argv) > 1 else '.'
    own = {'total': 0, 'skip_dirs': ['node_modules', '.git', '__pycache__']}

    await walk(root, dir_action=dir_action, file_action=file_action, own=own, stat=True)

    excluded = ', '.join(own['skip_dirs'])
    print(f'total bytes in "{root}" (excluding {excluded}): {own["total"]:,}')


if __name__ == "__main__":
    asyncio.run(main())
