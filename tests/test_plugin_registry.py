"""
Tests for the plugin registry.
"""

from unittest.mock import Mock

import pytest

from core.exceptions import ConfigurationError, DuplicatePluginError
from plugins import PluginRegistry, get_plugin_hook, get_plugin_name


class TestPluginLookup:
    """Test name and hook access for objects and mappings."""

    def test_name_from_object_and_mapping(self):
        plugin = Mock()
        plugin.name = "Obj"

        assert get_plugin_name(plugin) == "Obj"
        assert get_plugin_name({"name": "Map"}) == "Map"
        assert get_plugin_name({}) is None

    def test_non_callable_hook_is_ignored(self):
        assert get_plugin_hook({"name": "X", "dehydrate": "nope"}, "dehydrate") is None


class TestPluginRegistry:
    """Test plugin registration and application."""

    @pytest.fixture
    def registry(self):
        return PluginRegistry()

    @pytest.mark.parametrize("plugin", [{}, {"name": None}, {"name": ""}, object(), 42])
    def test_add_requires_name(self, registry, plugin):
        with pytest.raises(ConfigurationError):
            registry.add(plugin)

    def test_add_requires_string_name(self, registry):
        with pytest.raises(ConfigurationError):
            registry.add({"name": 7})

    def test_duplicate_name_rejected(self, registry):
        registry.add({"name": "A"})

        with pytest.raises(DuplicatePluginError) as exc_info:
            registry.add({"name": "A"})

        assert exc_info.value.plugin_name == "A"
        assert len(registry) == 1

    def test_registration_order(self, registry):
        for name in ["C", "A", "B"]:
            registry.add({"name": name})

        assert registry.list_plugins() == ["C", "A", "B"]
        assert [plugin["name"] for plugin in registry] == ["C", "A", "B"]
        assert "A" in registry
        assert registry.get("Missing") is None

    def test_apply_runs_hooks_in_order(self, registry):
        calls = []
        registry.add({"name": "A", "plug_action_context": lambda view, ctx: calls.append(("A", view, ctx))})
        registry.add({"name": "B"})
        registry.add({"name": "C", "plug_action_context": lambda view, ctx: calls.append(("C", view, ctx))})

        registry.apply("plug_action_context", "view", "context")

        assert calls == [("A", "view", "context"), ("C", "view", "context")]

    def test_dehydrate_skips_plugins_without_hook(self, registry):
        registry.add({"name": "A", "dehydrate": lambda: {"a": 1}})
        registry.add({"name": "B"})

        assert registry.dehydrate() == {"A": {"a": 1}}

    def test_rehydrate(self, registry):
        rehydrate_a = Mock()
        rehydrate_b = Mock()
        registry.add({"name": "A", "rehydrate": rehydrate_a})
        registry.add({"name": "B", "rehydrate": rehydrate_b})

        registry.rehydrate({"A": {"a": 1}, "Unknown": {}})

        rehydrate_a.assert_called_once_with({"a": 1})
        rehydrate_b.assert_not_called()
