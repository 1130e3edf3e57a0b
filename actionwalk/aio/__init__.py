"""Asynchronous implementation of action-walk.

This package contains the async walker and everything built on it. All
filesystem I/O runs in worker threads so the event loop stays free while
actions run one at a time.
"""

# Configuration (re-exported from the package root)
from ..config import (
    CONTINUE,
    SKIP,
    StatMode,
    WalkControl,
    WalkOptions,
)

# Entry and context types
from .entry import (
    AncestorStack,
    Entry,
    EntryKind,
    WalkContext,
)

# The walker
from .walker import walk

# Error handling
from .error_policies import (
    ActionErrorPolicy,
    ContinueOnErrorsPolicy,
    FailFastPolicy,
    SkipOnErrorsPolicy,
    ThresholdPolicy,
)
from .error_handling import guard_action, guard_options

# High-level API
from .api import (
    calculate_size_async,
    collect_paths_async,
    count_entries_async,
    directory_totals_async,
)

__all__ = [
    # Configuration
    'WalkOptions',
    'StatMode',
    'WalkControl',
    'SKIP',
    'CONTINUE',
    # Entries
    'Entry',
    'EntryKind',
    'AncestorStack',
    'WalkContext',
    # Walker
    'walk',
    # Error handling
    'ActionErrorPolicy',
    'FailFastPolicy',
    'ContinueOnErrorsPolicy',
    'SkipOnErrorsPolicy',
    'ThresholdPolicy',
    'guard_action',
    'guard_options',
    # High-level API
    'calculate_size_async',
    'count_entries_async',
    'collect_paths_async',
    'directory_totals_async',
]
