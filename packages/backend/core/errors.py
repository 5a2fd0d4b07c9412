from typing import Any


class StoryServiceError(Exception):
    """Base class for every error raised by the stories backend."""


class ValidationError(StoryServiceError):
    """A story payload is missing a field or carries one of the wrong type."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class PersistenceError(StoryServiceError):
    """The database is unreachable or rejected the operation."""


class ConfigurationError(StoryServiceError):
    """The database connection could not be established at startup."""
