"""
Plugin system for extending context views and carrying plugin state.
"""

from .registry import PluginRegistry, VIEW_HOOKS, get_plugin_name, get_plugin_hook, is_shared_plugin

__all__ = ['PluginRegistry', 'VIEW_HOOKS', 'get_plugin_name', 'get_plugin_hook', 'is_shared_plugin']
