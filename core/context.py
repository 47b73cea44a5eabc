"""
Per-request context coordinating a dispatcher, a plugin registry and the
action, component and store views.

One Context belongs to one request or render cycle and is used from a single
logical thread of control. Snapshots produced by ``dehydrate`` have the form::

    {"dispatcher": {...}, "plugins": {"<plugin name>": {...}}}
"""

import copy
import logging
from collections.abc import Mapping
from typing import Dict, Any, Callable, List, Optional

from core.action_context import ActionContext
from core.component_context import ComponentContext
from core.exceptions import RehydrationError
from core.store_context import StoreContext
from dispatcher import DispatcherFactory
from interfaces import IDispatcher
from plugins.registry import PluginRegistry, VIEW_HOOKS, apply_plugin, get_plugin_name

logger = logging.getLogger(__name__)

SNAPSHOT_KEYS = ('dispatcher', 'plugins')


class Context:
    """Per-lifecycle context owning its dispatcher, plugins and views."""

    def __init__(self, dispatcher_factory: Optional[Callable[..., IDispatcher]] = None,
                 app=None, options: Optional[Dict[str, Any]] = None):
        """
        Initialize context.

        Args:
            dispatcher_factory: Callable building a dispatcher for this
                context; called with the context. Defaults to a dispatcher
                without stores.
            app: Owning Application, if any
            options: Context options given to ``Application.create_context``
        """
        self.app = app
        self.options: Dict[str, Any] = dict(options or {})
        self._plugins = PluginRegistry()
        self._views: Dict[str, Any] = {}
        # Snapshot keys this version does not interpret, kept for dehydrate
        self._reserved_state: Dict[str, Any] = {}

        factory = dispatcher_factory or DispatcherFactory()
        self.dispatcher: IDispatcher = factory(self)

    # -- Views ----------------------------

    def _get_view(self, kind: str, view_class):
        view = self._views.get(kind)
        if view is None:
            view = view_class(self)
            # Memoize first so hooks asking for the same view get this one
            self._views[kind] = view
            self._plugins.apply(VIEW_HOOKS[kind], view, self)
        return view

    def get_action_context(self) -> ActionContext:
        return self._get_view('action', ActionContext)

    def get_component_context(self) -> ComponentContext:
        return self._get_view('component', ComponentContext)

    def get_store_context(self) -> StoreContext:
        return self._get_view('store', StoreContext)

    def create_element(self, props: Optional[Mapping] = None) -> Dict[str, Any]:
        """
        Build the props for the root component.

        Args:
            props: Extra props; a ``context`` key in them is replaced

        Returns:
            New props dictionary with ``context`` bound to the component view
        """
        if props is None:
            props = {}
        if not isinstance(props, Mapping):
            raise TypeError(f"Props must be a mapping, got {type(props).__name__}")
        return {**props, 'context': self.get_component_context()}

    # -- Plugins ----------------------------

    def plug(self, plugin: Any) -> None:
        """
        Register a plugin on this context.

        Views built before this call are extended right away, so the order of
        ``plug`` and view access does not matter.

        Args:
            plugin: Plugin object or mapping with a ``name``

        Raises:
            ConfigurationError: If the plugin has no name
            DuplicatePluginError: If the name is already plugged
        """
        self._plugins.add(plugin)
        for kind, view in self._views.items():
            apply_plugin(plugin, VIEW_HOOKS[kind], view, self)
        logger.debug(f"Plugged '{get_plugin_name(plugin)}' into context")

    def get_plugin(self, name: str) -> Optional[Any]:
        return self._plugins.get(name)

    def list_plugins(self) -> List[str]:
        return self._plugins.list_plugins()

    # -- Serialization ----------------------------

    def dehydrate(self) -> Dict[str, Any]:
        """
        Produce a JSON-compatible snapshot of this context.

        Returns:
            Snapshot with ``dispatcher`` and ``plugins`` sections, plus any
            reserved keys carried over from a rehydrated snapshot
        """
        snapshot = copy.deepcopy(self._reserved_state)
        snapshot['dispatcher'] = self.dispatcher.dehydrate()
        snapshot['plugins'] = self._plugins.dehydrate()
        return snapshot

    def rehydrate(self, snapshot: Mapping) -> None:
        """
        Restore plugin and dispatcher state from a snapshot.

        Plugins are restored before stores. Reserved keys are kept only when
        both steps succeed. Only plugins already plugged into this context are
        restored; snapshot entries for other plugins are ignored.

        Args:
            snapshot: Output of a previous ``dehydrate()`` call

        Raises:
            RehydrationError: If the snapshot or one of its sections is not a
                mapping
        """
        if not isinstance(snapshot, Mapping):
            raise RehydrationError(f"Snapshot must be a mapping, got {type(snapshot).__name__}")

        dispatcher_state = snapshot.get('dispatcher')
        plugin_states = snapshot.get('plugins')
        if dispatcher_state is None:
            dispatcher_state = {}
        if plugin_states is None:
            plugin_states = {}
        if not isinstance(dispatcher_state, Mapping):
            raise RehydrationError("Snapshot 'dispatcher' section must be a mapping")
        if not isinstance(plugin_states, Mapping):
            raise RehydrationError("Snapshot 'plugins' section must be a mapping")

        reserved_state = {
            key: copy.deepcopy(value)
            for key, value in snapshot.items()
            if key not in SNAPSHOT_KEYS
        }
        # Plugins first: stores may read plugin capabilities while restoring
        self._plugins.rehydrate(plugin_states)
        self.dispatcher.rehydrate(dispatcher_state)
        self._reserved_state = reserved_state

    def __repr__(self):
        return f"<Context plugins={self.list_plugins()}>"
