"""
Dependency injection container for managing collaborator lifecycles.
"""

import logging
from typing import Dict, Any, Callable, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class DIContainer:
    """
    Dependency injection container for collaborator management.

    Every ``resolve`` call runs the registered factory with the resolve
    arguments, so each context gets a dispatcher of its own.
    """

    def __init__(self):
        """Initialize the DI container."""
        self._factories: Dict[Type, Callable[..., Any]] = {}

    def register_factory(self, interface: Type[T], factory: Callable[..., T]) -> None:
        """
        Register a factory producing a new implementation per resolve.

        Args:
            interface: Abstract interface type
            factory: Callable returning an implementation
        """
        if not callable(factory):
            raise TypeError(f"Factory for {interface.__name__} must be callable")
        self._factories[interface] = factory
        logger.debug(f"Registered factory for {interface.__name__}")

    def resolve(self, interface: Type[T], *args, **kwargs) -> T:
        """
        Resolve a service implementation.

        Args:
            interface: Interface type to resolve
            *args: Positional arguments forwarded to the factory
            **kwargs: Keyword arguments forwarded to the factory

        Returns:
            Service implementation instance

        Raises:
            ValueError: If service not registered
        """
        return self.get_factory(interface)(*args, **kwargs)

    def get_factory(self, interface: Type[T]) -> Callable[..., T]:
        """
        Get the registered factory for an interface.

        Raises:
            ValueError: If no factory is registered
        """
        if interface not in self._factories:
            raise ValueError(f"Service not registered: {interface.__name__}")
        return self._factories[interface]
