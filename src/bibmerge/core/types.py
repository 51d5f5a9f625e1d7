"""Core enums and type definitions."""

from enum import StrEnum


class SourceName(StrEnum):
    """Catalogs a canonical book record can be sourced from."""

    GOOGLE_BOOKS = "google_books"
    OPEN_LIBRARY = "open_library"


class CoverProbeStatus(StrEnum):
    """Outcome of a cover redirect probe."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    TRANSPORT_ERROR = "transport_error"


class CoverSize(StrEnum):
    """Size tokens understood by the covers service."""

    SMALL = "S"
    MEDIUM = "M"
