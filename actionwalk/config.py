"""Configuration system for action-walk.

This module defines how callers describe a walk: which action runs for
each kind of directory entry, whether per-entry metadata is fetched,
whether the root itself is visited, and the caller-owned accumulator
threaded through every action.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, TypeVar, Union


T = TypeVar('T')

# (path, context) -> result, where result may be awaitable
Action = Callable[[str, Any], Any]


class StatMode(Enum):
    """Which stat-family call supplies per-entry metadata."""
    NONE = "none"       # No metadata fetched
    STAT = "stat"       # os.stat, follows symbolic links
    LSTAT = "lstat"     # os.lstat, reports on the link itself

    @classmethod
    def coerce(cls, value: Union[bool, str, 'StatMode', None]) -> 'StatMode':
        """Normalize the accepted spellings of a stat setting.

        Args:
            value: False/None, True, "stat", "lstat" or a StatMode

        Returns:
            The matching StatMode

        Raises:
            ValueError: If the value is not a recognized setting
        """
        if isinstance(value, cls):
            return value
        if value is None or value is False:
            return cls.NONE
        if value is True:
            return cls.STAT
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise ValueError(f"Unknown stat mode: {value!r}")


class WalkControl(Enum):
    """Result a directory action returns to steer descent.

    Only SKIP changes anything; returning CONTINUE, None or any other
    value means the walk descends into the directory.
    """
    CONTINUE = "continue"
    SKIP = "skip"


SKIP = WalkControl.SKIP
CONTINUE = WalkControl.CONTINUE


@dataclass
class WalkOptions(Generic[T]):
    """Complete configuration for a walk.

    All actions are optional and may be plain functions or coroutine
    functions taking ``(path, context)``. A missing ``link_action`` sends
    symbolic links to ``file_action``.
    """

    # Per-kind actions
    dir_action: Optional[Action] = None
    file_action: Optional[Action] = None
    link_action: Optional[Action] = None
    other_action: Optional[Action] = None

    # Metadata: False/None, True, "stat", "lstat" or a StatMode
    stat: Union[bool, str, StatMode, None] = StatMode.NONE

    # Visit the root as a directory entry before listing it
    include_top_level: bool = False

    # Caller-owned accumulator, shared by reference with every action
    own: Optional[T] = None

    def __post_init__(self):
        self.stat = StatMode.coerce(self.stat)

    @property
    def stat_mode(self) -> StatMode:
        return StatMode.coerce(self.stat)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        for name in ('dir_action', 'file_action', 'link_action', 'other_action'):
            action = getattr(self, name)
            if action is not None and not callable(action):
                errors.append(f"{name} must be callable, got {type(action).__name__}")
        return errors
