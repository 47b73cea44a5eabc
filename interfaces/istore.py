"""
Abstract interface for stores managed by a dispatcher.
"""

from abc import ABC
from typing import Dict, Any


class IStore(ABC):
    """
    Base class for stores.

    Subclasses set ``store_name`` and map action names to handler method
    names in ``handlers``. ``dehydrate``/``rehydrate`` are optional; a store
    that keeps no transferable state can leave them out.
    """

    store_name: str = ""
    handlers: Dict[str, Any] = {}

    def __init__(self, store_context):
        """
        Initialize store.

        Args:
            store_context: StoreContext of the owning context
        """
        self.context = store_context
