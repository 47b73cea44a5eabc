"""
Application: process-wide factory for contexts and coordinator of
dehydrate/rehydrate.
"""

import copy
import logging
from collections.abc import Mapping
from typing import Dict, Any, Callable, Iterable, List, Optional, Type, Union

from core.context import Context
from core.exceptions import ConfigurationError, RehydrationError
from di import DIContainer
from dispatcher import DispatcherFactory
from interfaces import IDispatcher
from plugins.registry import PluginRegistry, get_plugin_hook, get_plugin_name, is_shared_plugin
from utils.helpers import deserialize_snapshot

logger = logging.getLogger(__name__)

RehydrateCallback = Callable[[Optional[Exception], Optional[Context]], Any]


class Application:
    """
    Application holding the root component factory, plugins and stores.

    Plugins and stores may only be registered before the first context is
    created. Each context receives its own dispatcher and its own plugin
    instances.
    """

    def __init__(self, app_component: Optional[Callable[..., Any]] = None,
                 plugins: Optional[Iterable[Any]] = None,
                 stores: Optional[Iterable[Type]] = None,
                 dispatcher: Optional[Callable[..., IDispatcher]] = None,
                 **options):
        """
        Initialize application.

        Args:
            app_component: Root component factory taking one props mapping.
                ``appComponent`` is accepted as an alias.
            plugins: Application plugins, in order
            stores: Store classes, in order
            dispatcher: Custom dispatcher factory called with each context;
                defaults to a ``DispatcherFactory`` holding ``stores``

        Raises:
            ConfigurationError: If the root component is missing or not
                callable, or a plugin is invalid
        """
        if app_component is None:
            app_component = options.pop('appComponent', None)
        for key in options:
            logger.warning(f"Ignoring unknown application option: '{key}'")

        if not callable(app_component):
            raise ConfigurationError("Application requires a callable app_component")

        self._app_component = app_component
        self._plugins = PluginRegistry()
        self._contexts_created = 0

        dispatcher_factory = dispatcher or DispatcherFactory()
        self._container = DIContainer()
        self._container.register_factory(IDispatcher, dispatcher_factory)

        for store_class in stores or []:
            self.register_store(store_class)
        for plugin in plugins or []:
            self.plug(plugin)

    def _ensure_configurable(self, what: str) -> None:
        if self._contexts_created:
            raise ConfigurationError(f"Cannot {what} after a context has been created")

    def get_component(self) -> Callable[..., Any]:
        return self._app_component

    def register_store(self, store_class: Type) -> None:
        """
        Register a store class with the application's dispatcher factory.

        Raises:
            ConfigurationError: If contexts were already created or the
                dispatcher factory does not accept stores
        """
        self._ensure_configurable("register a store")
        factory = self._container.get_factory(IDispatcher)
        register_store = getattr(factory, 'register_store', None)
        if register_store is None:
            raise ConfigurationError("Custom dispatcher factory does not support store registration")
        register_store(store_class)

    def plug(self, plugin: Any) -> None:
        """
        Register an application plugin.

        A plugin defining ``plug_context(options, context, app)`` has that
        hook called for every new context and the returned plugin is plugged
        into it. A plugin class is instantiated once per context. Any other
        plugin object is deep-copied for each context, unless it sets a truthy
        ``shared`` attribute or key, in which case the same object is plugged
        into every context.

        Args:
            plugin: Named plugin, plugin class or mapping

        Raises:
            ConfigurationError: If the plugin has no name or contexts exist
            DuplicatePluginError: If the name is already registered
        """
        self._ensure_configurable("plug a plugin")
        self._plugins.add(plugin)
        logger.info(f"Registered application plugin: {get_plugin_name(plugin)}")

    def get_plugin(self, name: str) -> Optional[Any]:
        return self._plugins.get(name)

    def list_plugins(self) -> List[str]:
        return self._plugins.list_plugins()

    def _context_plugin(self, plugin: Any, options: Dict[str, Any], context: Context) -> Optional[Any]:
        if isinstance(plugin, type):
            return plugin()
        plug_context = get_plugin_hook(plugin, 'plug_context')
        if plug_context is not None:
            return plug_context(options, context, self)
        if is_shared_plugin(plugin):
            return plugin
        return copy.deepcopy(plugin)

    def create_context(self, options: Optional[Dict[str, Any]] = None) -> Context:
        """
        Create a new context.

        Args:
            options: Context options, forwarded to ``plug_context`` hooks

        Returns:
            Fresh context with its own dispatcher and plugin instances
        """
        options = dict(options or {})
        context = Context(
            dispatcher_factory=lambda ctx: self._container.resolve(IDispatcher, ctx),
            app=self,
            options=options
        )
        self._contexts_created += 1

        for plugin in self._plugins:
            context_plugin = self._context_plugin(plugin, options, context)
            if context_plugin is not None:
                context.plug(context_plugin)

        logger.debug(f"Created context #{self._contexts_created}")
        return context

    def create_element(self, context: Context, props: Optional[Mapping] = None) -> Any:
        """Render the root component with props bound to ``context``."""
        return self._app_component(context.create_element(props))

    def dehydrate(self, context: Context) -> Dict[str, Any]:
        """
        Dehydrate a context into a JSON-compatible snapshot.

        Args:
            context: Context to dehydrate

        Returns:
            Snapshot dictionary
        """
        return context.dehydrate()

    def rehydrate(self, snapshot: Union[str, bytes, Mapping], callback: RehydrateCallback,
                  options: Optional[Dict[str, Any]] = None) -> None:
        """
        Rebuild a context from a snapshot.

        ``callback(error, context)`` is invoked exactly once. Failures never
        raise from this method: they reach the callback as a
        ``RehydrationError`` with the original exception as its cause.
        Exceptions raised by the callback itself propagate to the caller.

        Args:
            snapshot: Snapshot mapping, or its JSON text or bytes
            callback: Completion callback taking ``(error, context)``
            options: Context options for the new context
        """
        try:
            state = deserialize_snapshot(snapshot)
            if not isinstance(state.get('dispatcher'), Mapping):
                raise RehydrationError("Snapshot is missing the 'dispatcher' section")
            plugin_states = state.get('plugins')
            if plugin_states is not None and not isinstance(plugin_states, Mapping):
                raise RehydrationError("Snapshot 'plugins' section must be a mapping")

            context = self.create_context(options)
            context.rehydrate(state)
        except Exception as exc:
            if isinstance(exc, RehydrationError):
                error = exc
            else:
                error = RehydrationError(f"Failed to rehydrate context: {exc}")
                error.__cause__ = exc
            logger.error(f"Rehydration failed: {error}")
            callback(error, None)
            return

        callback(None, context)
