#!/usr/bin/env python3
"""
Repository cleaning example for action-walk.

Deletes bytecode/test caches (__pycache__, .pytest_cache) and build
output (dist, build) from the project tree. Without arguments it only
reports what it would delete.

Usage:
    python examples/clean_repo.py            # dry run
    python examples/clean_repo.py cache      # delete caches
    python examples/clean_repo.py dist       # delete build output
    python examples/clean_repo.py all        # delete both

Deletions run in worker threads started from the directory action,
which returns SKIP right away so the walk keeps going while they run.
The walker does not wait for that work; this script keeps the tasks in
``own`` and waits for them once the walk is done.
"""

import asyncio
import re
import shutil
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from actionwalk import SKIP, walk


PROJECT_NAME = "action-walk"
NEVER_ENTER = {'.git', '.venv', 'venv', '.tox'}
CACHE_DIRS = {'__pycache__', '.pytest_cache'}
DIST_DIRS = {'dist', 'build'}


def dir_action(path, context):
    name = context.entry.name
    own = context.own

    if name in NEVER_ENTER:
        return SKIP

    if name in CACHE_DIRS:
        if own['delete_cache']:
            schedule_delete(path, own)
        else:
            print(f"[DRY RUN: deleting {path}]")
        return SKIP

    # build output only counts at the top of the project
    if name in DIST_DIRS and len(context.stack) == 1:
        if own['delete_dist']:
            schedule_delete(path, own)
        else:
            print(f"[DRY RUN: deleting {path}]")
        return SKIP

    # anything else gets walked


def schedule_delete(path, own):
    task = asyncio.create_task(delete_directory_tree(path))
    own['pending'].add(task)
    task.add_done_callback(own['pending'].discard)


async def delete_directory_tree(path):
    """Delete a directory tree in a worker thread, reporting the outcome."""
    try:
        await asyncio.to_thread(shutil.rmtree, path)
    except FileNotFoundError:
        print(f"? {path} does not exist")
    except OSError as e:
        print(f"? ERROR deleting {path}: {e}")
    else:
        print(f"[deleted {path}]")


def is_project_root():
    setup_py = Path('setup.py')
    if not setup_py.exists():
        print("? cannot read setup.py; aborting")
        return False
    match = re.search(r'name\s*=\s*["\']([^"\']+)["\']', setup_py.read_text())
    if not match or match.group(1) != PROJECT_NAME:
        print("? this script must be run from the project root")
        return False
    return True


async def main(args):
    own = {
        'delete_cache': False,
        'delete_dist': False,
        'pending': set(),
    }
    for arg in args:
        if arg == 'cache':
            own['delete_cache'] = True
        elif arg == 'dist':
            own['delete_dist'] = True
        elif arg == 'all':
            own['delete_cache'] = True
            own['delete_dist'] = True

    if not own['delete_cache'] and not own['delete_dist']:
        print("! neither cache nor dist was specified; executing dry run")

    await walk('.', dir_action=dir_action, own=own)

    if own['pending']:
        await asyncio.gather(*own['pending'])
    print("done")


if __name__ == "__main__":
    # because this deletes directories make sure it runs where intended
    if not is_project_root():
        sys.exit(1)
    asyncio.run(main(sys.argv[1:]))
