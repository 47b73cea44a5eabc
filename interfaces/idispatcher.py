"""
Abstract interface for dispatcher components.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Union, Type


class IDispatcher(ABC):
    """Abstract interface for the per-context action dispatcher."""

    @abstractmethod
    def dispatch(self, action_name: str, payload: Any = None) -> None:
        """
        Route an action to every store that handles it.

        Args:
            action_name: Name of the dispatched action
            payload: Action payload
        """
        pass

    @abstractmethod
    def get_store(self, store: Union[str, Type]) -> Any:
        """
        Get the store instance owned by this dispatcher.

        Args:
            store: Store name or store class

        Returns:
            Store instance

        Raises:
            StoreNotFoundError: If the store is not registered
        """
        pass

    @abstractmethod
    def dehydrate(self) -> Dict[str, Any]:
        """
        Get the serializable state of the dispatcher.

        Returns:
            JSON-compatible dictionary
        """
        pass

    @abstractmethod
    def rehydrate(self, state: Dict[str, Any]) -> None:
        """
        Restore dispatcher state from a dehydrated dictionary.

        Args:
            state: Output of a previous ``dehydrate()`` call
        """
        pass
