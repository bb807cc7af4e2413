class TextPluginError(Exception):
    """Base error for plugin registration and lookup."""
    def __init__(self, message: str, *, name: str | None = None):
        super().__init__(message)
        self.name = name

class PluginSetupError(TextPluginError):
    """Raised when a plugin or function spec cannot be set up."""

class DuplicateFunctionError(PluginSetupError):
    """Raised when two function specs share a name."""

class UnknownOperationError(TextPluginError, KeyError):
    """Raised when a host asks for an operation that was never registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
