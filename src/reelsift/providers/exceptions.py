"""ReelSift exceptions."""


class ReelSiftError(Exception):
    """Base exception for user-facing ReelSift errors."""


class ProviderNotFoundError(ReelSiftError):
    """Raised when no provider matches a name or URL."""


class InvalidIDError(ReelSiftError):
    """Raised when an identifier normalizes to an empty string."""


class InvalidURLError(ReelSiftError):
    """Raised when no identifier can be parsed from a URL."""


class IncompleteMetadataError(ReelSiftError):
    """Raised when a fetched record fails the validity predicate."""


class InfoNotFoundError(ReelSiftError):
    """Raised when a provider lacks the capability an operation requires."""


class ConfigurationError(ReelSiftError):
    """Raised when provider or store configuration is invalid."""


class StoreError(ReelSiftError):
    """Raised when the record store backend fails."""


class ProviderInvariantError(RuntimeError):
    """Raised when an internal lookup for a provider known to exist fails.

    Not part of the ``ReelSiftError`` hierarchy: this signals a bug, such as a
    stored record naming a provider that is no longer registered.
    """
