"""Custom exception hierarchy for bibmerge."""

from typing import Any


class BibmergeError(Exception):
    """Base exception for all bibmerge errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(BibmergeError):
    """Input validation failed."""

    pass


class ResolutionError(BibmergeError):
    """Failed to resolve a book."""

    pass


class CatalogError(ResolutionError):
    """
    A catalog answered with an error.

    The upstream error payload is kept unmodified on ``payload``.
    """

    def __init__(
        self,
        message: str,
        source: str,
        payload: Any = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.payload = payload
        self.status_code = status_code


class CatalogUnavailableError(CatalogError):
    """A catalog could not be reached at all."""

    pass


class CoverTransportError(ResolutionError):
    """The cover service failed with anything other than a 404."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code


class DatabaseError(BibmergeError):
    """Database operation failed."""

    pass
