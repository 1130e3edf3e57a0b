"""
Error handling policies for walk actions.

The walker itself fails fast: any exception from listing a directory,
fetching metadata or running an action ends the walk. Policies let a
caller decide, per action, whether a failing action should instead be
recorded and the walk allowed to continue.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..config import WalkControl


logger = logging.getLogger(__name__)


class ActionErrorPolicy(ABC):
    """
    Base class for action error policies.

    Subclasses implement different strategies for handling exceptions
    raised by a guarded action.
    """

    @abstractmethod
    async def handle(self, error: Exception, action_name: str, path: str, context: Any) -> Any:
        """
        Handle an exception raised by an action.

        Args:
            error: The exception that was raised
            action_name: Name of the failed action (e.g., 'file_action')
            path: Path of the entry being visited
            context: The WalkContext the action received

        Returns:
            The value to hand back to the walker in place of the action's
            result, or re-raises to stop the walk.
        """
        pass

    @staticmethod
    def _record(error: Exception, action_name: str, path: str) -> Dict[str, Any]:
        return {
            'path': path,
            'action': action_name,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }


class FailFastPolicy(ActionErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping the walk.

    This is the walker's own behavior, so guarding with it changes nothing.
    """

    async def handle(self, error: Exception, action_name: str, path: str, context: Any) -> Any:
        """Re-raise the error immediately."""
        raise error


class ContinueOnErrorsPolicy(ActionErrorPolicy):
    """
    Policy that records errors and lets the walk continue.

    A failing directory action returns None, so the walker still
    descends into that directory.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, log a warning for every error
        """
        self.errors: List[Dict[str, Any]] = []
        self.failed_paths: List[str] = []
        self.verbose = verbose

    async def handle(self, error: Exception, action_name: str, path: str, context: Any) -> Any:
        self.errors.append(self._record(error, action_name, path))
        self.failed_paths.append(path)

        if self.verbose:
            if isinstance(error, PermissionError):
                logger.warning("Skipping inaccessible path '%s': %s", path, error)
            else:
                logger.warning("Error in %s for '%s': %s", action_name, path, error)

        return self.default_result(action_name)

    def default_result(self, action_name: str) -> Optional[WalkControl]:
        return None

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'permission_errors': sum(1 for e in self.errors if e['error_type'] == 'PermissionError'),
            'os_errors': sum(1 for e in self.errors if isinstance(e['error'], OSError)),
            'failed_paths': len(self.failed_paths),
            'errors': self.errors,
        }


class SkipOnErrorsPolicy(ContinueOnErrorsPolicy):
    """
    Like ContinueOnErrorsPolicy, but a failing directory action prunes
    that directory's subtree.
    """

    def default_result(self, action_name: str) -> Optional[WalkControl]:
        if action_name == 'dir_action':
            return WalkControl.SKIP
        return None


class ThresholdPolicy(ActionErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    Useful when a few failures are expected but many indicate a
    systemic problem that should halt the walk.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, log a warning for each tolerated error
        """
        self.max_errors = max_errors
        self.error_count = 0
        self.verbose = verbose
        self.errors: List[Exception] = []

    async def handle(self, error: Exception, action_name: str, path: str, context: Any) -> Any:
        """Handle error if under threshold, otherwise raise."""
        self.error_count += 1
        self.errors.append(error)

        if self.error_count > self.max_errors:
            raise RuntimeError(f"Error threshold exceeded ({self.max_errors} errors)") from error

        if self.verbose:
            logger.warning(
                "[%d/%d] Error in %s for '%s': %s",
                self.error_count, self.max_errors, action_name, path, error
            )
        return None
