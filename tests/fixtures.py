"""
Plugins, stores and components shared by the test suite.
"""

from interfaces import IStore


class DimensionsPlugin:
    """Context plugin exposing ``get_dimensions`` on every view."""

    name = "DimensionsPlugin"

    def __init__(self, dimensions=None):
        self.dimensions = dimensions

    def get_dimensions(self):
        return self.dimensions

    def plug_action_context(self, action_context, context):
        action_context.get_dimensions = self.get_dimensions

    def plug_component_context(self, component_context, context):
        component_context.get_dimensions = self.get_dimensions

    def plug_store_context(self, store_context, context):
        store_context.get_dimensions = self.get_dimensions

    def dehydrate(self):
        return {"dimensions": self.dimensions}

    def rehydrate(self, state):
        self.dimensions = state["dimensions"]


def dimensions_plugin(dimensions=None):
    """Create a DimensionsPlugin, optionally preconfigured."""
    return DimensionsPlugin(dimensions)


class DimensionsAppPlugin:
    """Application plugin building a DimensionsPlugin per context."""

    name = "DimensionsPlugin"

    def __init__(self, default_dimensions=None):
        self.default_dimensions = default_dimensions

    def plug_context(self, options, context, app):
        return DimensionsPlugin(options.get("dimensions", self.default_dimensions))


class CounterStore(IStore):
    """Store counting INCREMENT actions."""

    store_name = "CounterStore"
    handlers = {"INCREMENT": "on_increment", "RESET": "on_reset"}

    def __init__(self, store_context):
        super().__init__(store_context)
        self.count = 0

    def on_increment(self, payload):
        self.count += (payload or {}).get("by", 1)

    def on_reset(self, payload):
        self.count = 0

    def dehydrate(self):
        return {"count": self.count}

    def rehydrate(self, state):
        self.count = state["count"]


class LogStore(IStore):
    """Store recording every INCREMENT payload, without dehydrate support."""

    store_name = "LogStore"
    handlers = {"INCREMENT": lambda store, payload: store.entries.append(payload)}

    def __init__(self, store_context):
        super().__init__(store_context)
        self.entries = []


class SizedStore(IStore):
    """Store recording the plugin dimensions seen while rehydrating."""

    store_name = "SizedStore"
    handlers = {}

    def __init__(self, store_context):
        super().__init__(store_context)
        self.items = []
        self.dimensions_at_rehydrate = None

    def dehydrate(self):
        return {"items": self.items}

    def rehydrate(self, state):
        self.items = state["items"]
        self.dimensions_at_rehydrate = self.context.get_dimensions()


def mock_factory(props):
    """Root component returning its props unchanged."""
    return props
