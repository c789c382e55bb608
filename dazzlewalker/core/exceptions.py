"""Exceptions raised by DazzleWalker."""


class WalkerError(Exception):
    """Base exception for walker errors."""
    pass


class DefinitionNotFound(WalkerError):
    """Raised when no definition matches an item's type chain.

    This is a recoverable condition: ``get_children()`` and ``count()``
    swallow it and report an empty walker. It only reaches callers that
    ask for a definition directly.
    """
    pass


class ReadOnlyChildrenError(WalkerError, TypeError):
    """Raised on any attempt to mutate a walker's children."""

    def __init__(self, message: str = "Walker children are read-only."):
        super().__init__(message)


class CacheCorruptionError(WalkerError, RuntimeError):
    """Raised when a cached type chain is not a sequence of strings."""
    pass


class ConflictingGroupsError(WalkerError, ValueError):
    """Raised when serialization groups cannot be honoured together."""
    pass


class InvalidConfigurationError(WalkerError, ValueError):
    """Raised when a WalkerConfig fails validation."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__(f"Invalid configuration: {'; '.join(self.errors)}")
