"""
Component context: the view passed to the rendered component tree.
"""

from collections.abc import Mapping
from typing import Dict, Any, Awaitable, Callable, Optional


class ComponentContext:
    """
    View over a Context for components.

    Actions started from here still receive the ActionContext, so components
    cannot hand their own capabilities to action code.
    """

    def __init__(self, context):
        self._context = context

    def execute_action(self, action: Callable[..., Any], payload: Any = None) -> Awaitable[Any]:
        return self._context.get_action_context().execute_action(action, payload)

    def create_element(self, props: Optional[Mapping] = None) -> Dict[str, Any]:
        """Build root component props bound to this view."""
        return self._context.create_element(props)

    def get_store(self, store):
        return self._context.dispatcher.get_store(store)

    def __repr__(self):
        return f"<ComponentContext of {self._context!r}>"
