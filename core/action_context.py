"""
Action context: the view handed to every action function.
"""

import inspect
from typing import Any, Awaitable, Callable


async def _resolved(value: Any) -> Any:
    return value


async def _rejected(error: BaseException) -> Any:
    raise error


class ActionContext:
    """
    View over a Context exposing action execution, dispatch and store access.

    Plugins add members to instances through ``plug_action_context``.
    """

    def __init__(self, context):
        """
        Initialize action context.

        Args:
            context: Owning Context
        """
        self._context = context

    def execute_action(self, action: Callable[..., Any], payload: Any = None) -> Awaitable[Any]:
        """
        Execute an action function.

        The action is called exactly once as ``action(self, payload)``. An
        awaitable result is returned as the very same object, so its outcome
        (including the identity of a raised error) reaches the caller
        untouched. Plain return values and synchronous errors are turned into
        an awaitable that resolves to the value or raises the same error.

        Args:
            action: Callable taking ``(action_context, payload)``
            payload: Action payload

        Returns:
            Awaitable completion of the action
        """
        try:
            result = action(self, payload)
        except Exception as exc:
            return _rejected(exc)

        if inspect.isawaitable(result):
            return result
        return _resolved(result)

    def dispatch(self, action_name: str, payload: Any = None) -> None:
        """Dispatch an action to the stores of the owning context."""
        self._context.dispatcher.dispatch(action_name, payload)

    def get_store(self, store):
        return self._context.dispatcher.get_store(store)

    def __repr__(self):
        return f"<ActionContext of {self._context!r}>"
