"""Custom exception hierarchy for nocobuilds."""


class NocoBuildsError(Exception):
    """Base exception for all nocobuilds errors."""


class InvalidEntityError(NocoBuildsError):
    """Raised when an entity is constructed with values that break its invariants."""


class EntityNotFoundError(NocoBuildsError):
    """Raised when a referenced entity does not exist."""


class DuplicateEntityError(NocoBuildsError):
    """Raised when an entity id is already present in a store."""


class PayloadError(NocoBuildsError):
    """Raised when an API payload cannot be decoded into an entity."""


class ConfigurationError(NocoBuildsError):
    """Raised when configuration is invalid or missing."""
