"""
Error handling wrappers for walk actions.

``guard_action`` wraps a single action so that its exceptions are passed
to an ActionErrorPolicy; ``guard_options`` applies the same wrapper to
every action configured on a WalkOptions.
"""

import dataclasses
import functools
import inspect
from typing import Any, Optional

from ..config import Action, WalkOptions
from .error_policies import ActionErrorPolicy, FailFastPolicy


_ACTION_FIELDS = ('dir_action', 'file_action', 'link_action', 'other_action')


def guard_action(
    action: Action,
    policy: Optional[ActionErrorPolicy] = None,
    name: Optional[str] = None
) -> Action:
    """
    Wrap an action so exceptions are delegated to a policy.

    The wrapper is a coroutine function; it awaits the action's result
    when the action is async, so failures inside the awaited work reach
    the policy too.

    Args:
        action: The sync or async action to wrap
        policy: Error handling policy (defaults to FailFastPolicy)
        name: Name reported to the policy (defaults to the function name)

    Returns:
        A coroutine function with the action's signature
    """
    policy = policy or FailFastPolicy()
    action_name = name or getattr(action, '__name__', repr(action))

    @functools.wraps(action)
    async def wrapper(path: str, context: Any) -> Any:
        try:
            result = action(path, context)
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as e:
            return await policy.handle(e, action_name, path, context)

    wrapper.policy = policy
    return wrapper


def guard_options(options: WalkOptions, policy: ActionErrorPolicy) -> WalkOptions:
    """
    Return a copy of options with every configured action guarded.

    Each action is reported to the policy under its field name
    ('dir_action', 'file_action', ...). Unset actions stay unset, so the
    link-to-file fallback still applies.
    """
    guarded = {
        field: guard_action(getattr(options, field), policy, name=field)
        for field in _ACTION_FIELDS
        if getattr(options, field) is not None
    }
    return dataclasses.replace(options, **guarded)
