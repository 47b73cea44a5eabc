"""
Plugin registry holding the named plugins of a context or an application.
"""

import logging
from collections.abc import Mapping
from typing import Dict, Any, Iterator, List, Optional

from core.exceptions import ConfigurationError, DuplicatePluginError

logger = logging.getLogger(__name__)

# Hook names a context plugin may define, keyed by the view they extend.
VIEW_HOOKS = {
    'action': 'plug_action_context',
    'component': 'plug_component_context',
    'store': 'plug_store_context',
}


def get_plugin_name(plugin: Any) -> Optional[str]:
    """
    Get the name of a plugin.

    Plugins are either objects exposing a ``name`` attribute or mappings
    with a ``"name"`` key.

    Args:
        plugin: Plugin object or mapping

    Returns:
        Plugin name or None if absent
    """
    if isinstance(plugin, Mapping):
        return plugin.get('name')
    return getattr(plugin, 'name', None)


def get_plugin_hook(plugin: Any, hook_name: str) -> Optional[Any]:
    """
    Get a callable hook from a plugin.

    Args:
        plugin: Plugin object or mapping
        hook_name: Hook to look up, e.g. ``'dehydrate'``

    Returns:
        The hook or None if the plugin does not define a callable one
    """
    if isinstance(plugin, Mapping):
        hook = plugin.get(hook_name)
    else:
        hook = getattr(plugin, hook_name, None)
    return hook if callable(hook) else None


def is_shared_plugin(plugin: Any) -> bool:
    """Whether a plugin opted in to being plugged into every context as-is."""
    if isinstance(plugin, Mapping):
        return bool(plugin.get('shared'))
    return bool(getattr(plugin, 'shared', False))


class PluginRegistry:
    """Ordered registry of plugins keyed by their unique name."""

    def __init__(self):
        """Initialize an empty plugin registry."""
        self._plugins: Dict[str, Any] = {}

    def add(self, plugin: Any) -> None:
        """
        Register a plugin.

        Args:
            plugin: Plugin object or mapping with a ``name``

        Raises:
            ConfigurationError: If the plugin has no name
            DuplicatePluginError: If a plugin with this name is registered
        """
        name = get_plugin_name(plugin)
        if not name:
            raise ConfigurationError(f"Plugin {plugin!r} must define a name")
        if not isinstance(name, str):
            raise ConfigurationError(f"Plugin name must be a string, got {type(name).__name__}")
        if name in self._plugins:
            raise DuplicatePluginError(name)

        self._plugins[name] = plugin
        logger.debug(f"Registered plugin: {name}")

    def get(self, name: str) -> Optional[Any]:
        """
        Get a plugin by name.

        Args:
            name: Plugin name

        Returns:
            Plugin or None
        """
        return self._plugins.get(name)

    def list_plugins(self) -> List[str]:
        """
        List registered plugin names in registration order.

        Returns:
            List of plugin names
        """
        return list(self._plugins.keys())

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._plugins.values()))

    def __len__(self) -> int:
        return len(self._plugins)

    def __contains__(self, name: str) -> bool:
        return name in self._plugins

    def apply(self, hook_name: str, view: Any, context: Any) -> None:
        """
        Run one contribution hook of every plugin against a view.

        Plugins run in registration order, so when two plugins set the same
        member the one registered last wins.

        Args:
            hook_name: Hook to call, one of ``VIEW_HOOKS`` values
            view: View being extended
            context: Owning Context
        """
        for plugin in self:
            apply_plugin(plugin, hook_name, view, context)

    def dehydrate(self) -> Dict[str, Any]:
        """
        Collect the state of every plugin defining a dehydrate hook.

        Returns:
            Mapping of plugin name to dehydrated state
        """
        states = {}
        for name, plugin in self._plugins.items():
            dehydrate = get_plugin_hook(plugin, 'dehydrate')
            if dehydrate is not None:
                states[name] = dehydrate()
        return states

    def rehydrate(self, states: Mapping) -> None:
        """
        Hand stored state back to the registered plugins.

        Entries without a matching plugin are skipped; plugins without an
        entry keep their current state.

        Args:
            states: Mapping of plugin name to dehydrated state
        """
        for name in states:
            if name not in self._plugins:
                logger.debug(f"Skipping state for unregistered plugin: {name}")

        for name, plugin in self._plugins.items():
            if name not in states:
                continue
            rehydrate = get_plugin_hook(plugin, 'rehydrate')
            if rehydrate is not None:
                rehydrate(states[name])


def apply_plugin(plugin: Any, hook_name: str, view: Any, context: Any) -> None:
    """Run a single plugin's contribution hook against a view, if defined."""
    hook = get_plugin_hook(plugin, hook_name)
    if hook is not None:
        hook(view, context)
