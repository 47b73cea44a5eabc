"""
Exception hierarchy for the context runtime.

Errors raised by action functions are deliberately absent: they travel
through ``execute_action`` untouched.
"""


class ContextError(Exception):
    """Base exception for all context runtime errors."""
    pass


class ConfigurationError(ContextError):
    """Raised when the application or a context is wired incorrectly."""
    pass


class DuplicatePluginError(ConfigurationError):
    """Raised when a plugin name is registered twice on the same registry."""
    def __init__(self, plugin_name: str):
        super().__init__(f"Plugin '{plugin_name}' is already registered")
        self.plugin_name = plugin_name


class RehydrationError(ContextError):
    """Raised when a snapshot cannot be turned back into a context."""
    pass


class StoreNotFoundError(ContextError, KeyError):
    """Raised when a store is looked up that was never registered."""
    def __init__(self, store_name: str):
        super().__init__(f"Store '{store_name}' is not registered")
        self.store_name = store_name

    def __str__(self):
        return self.args[0]
