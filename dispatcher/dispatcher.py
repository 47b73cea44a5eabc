"""
Dispatcher and dispatcher factory.

The factory is configured once per application with the store classes; each
context calls it to get a dispatcher of its own, so store instances are never
shared between contexts.
"""

import logging
from typing import Dict, Any, Iterable, Optional, Type, Union

from core.exceptions import ConfigurationError, StoreNotFoundError
from interfaces import IDispatcher

logger = logging.getLogger(__name__)


def get_store_name(store: Union[str, Type]) -> str:
    """
    Resolve the registry name of a store.

    Args:
        store: Store name or store class

    Returns:
        The ``store_name`` attribute, falling back to the class name
    """
    if isinstance(store, str):
        return store
    return getattr(store, 'store_name', None) or getattr(store, '__name__', '')


class Dispatcher(IDispatcher):
    """Routes actions to the stores registered for one context."""

    def __init__(self, stores: Dict[str, Type], context=None):
        """
        Initialize dispatcher.

        Args:
            stores: Ordered mapping of store name to store class
            context: Owning Context, used to hand its StoreContext to stores
        """
        self._stores: Dict[str, Type] = dict(stores)
        self._instances: Dict[str, Any] = {}
        self._context = context
        self._current_action: Optional[str] = None

    def _store_context(self):
        if self._context is None:
            return None
        return self._context.get_store_context()

    def has_store(self, store: Union[str, Type]) -> bool:
        return get_store_name(store) in self._stores

    def get_store(self, store: Union[str, Type]) -> Any:
        name = get_store_name(store)
        if name not in self._stores:
            raise StoreNotFoundError(name)

        if name not in self._instances:
            self._instances[name] = self._stores[name](self._store_context())
            logger.debug(f"Instantiated store: {name}")
        return self._instances[name]

    def dispatch(self, action_name: str, payload: Any = None) -> None:
        if not action_name:
            raise ValueError("Action name is required for dispatch")
        if self._current_action is not None:
            raise RuntimeError(
                f"Cannot dispatch '{action_name}' while '{self._current_action}' is being dispatched"
            )

        self._current_action = action_name
        try:
            for name, store_class in self._stores.items():
                handler = getattr(store_class, 'handlers', {}).get(action_name)
                if handler is None:
                    continue
                store = self.get_store(name)
                if isinstance(handler, str):
                    getattr(store, handler)(payload)
                else:
                    handler(store, payload)
        finally:
            self._current_action = None

    def dehydrate(self) -> Dict[str, Any]:
        stores = {}
        for name, store in self._instances.items():
            dehydrate = getattr(store, 'dehydrate', None)
            if callable(dehydrate):
                stores[name] = dehydrate()
        return {'stores': stores}

    def rehydrate(self, state: Dict[str, Any]) -> None:
        for name, store_state in (state or {}).get('stores', {}).items():
            if name not in self._stores:
                logger.debug(f"Skipping state for unregistered store: {name}")
                continue
            store = self.get_store(name)
            rehydrate = getattr(store, 'rehydrate', None)
            if callable(rehydrate):
                rehydrate(store_state)


class DispatcherFactory:
    """Holds the store registrations of an application and builds dispatchers."""

    def __init__(self, stores: Optional[Iterable[Type]] = None):
        """
        Initialize dispatcher factory.

        Args:
            stores: Store classes to register, in order
        """
        self._stores: Dict[str, Type] = {}
        for store_class in stores or []:
            self.register_store(store_class)

    def register_store(self, store_class: Type) -> None:
        """
        Register a store class.

        Args:
            store_class: Store class exposing ``store_name`` and ``handlers``

        Raises:
            ConfigurationError: If the store has no name or the name is taken
                by a different class
        """
        name = get_store_name(store_class)
        if not name:
            raise ConfigurationError(f"Store {store_class!r} has no store_name")

        registered = self._stores.get(name)
        if registered is store_class:
            return
        if registered is not None:
            raise ConfigurationError(f"Store name '{name}' is already registered by {registered!r}")

        self._stores[name] = store_class
        logger.info(f"Registered store: {name}")

    def get_stores(self) -> Dict[str, Type]:
        return dict(self._stores)

    def __call__(self, context=None) -> Dispatcher:
        return Dispatcher(self._stores, context)
