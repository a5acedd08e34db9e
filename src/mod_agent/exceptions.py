class ModAgentError(Exception):
    """Base exception for mod agent service."""


class ConfigurationError(ModAgentError):
    """Raised when configuration values are missing or invalid."""


class PrefixStoreLoadError(ModAgentError):
    """Raised when the persisted prefix document cannot be read back."""


class ResponseSinkError(ModAgentError):
    """Raised by a response sink that could not deliver a message."""


class AgentNotInitializedError(ModAgentError):
    """Raised when the app is used before initialization."""
