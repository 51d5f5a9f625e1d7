"""Core types, models, and utilities."""

from .exceptions import (
    BibmergeError,
    CatalogError,
    CatalogUnavailableError,
    CoverTransportError,
    DatabaseError,
    ResolutionError,
    ValidationError,
)
from .models import (
    AuthorName,
    CanonicalBook,
    CoverProbeResult,
    GoogleBooksResponse,
    IndustryIdentifier,
    OpenLibraryEdition,
    TextBlock,
    Volume,
    VolumeInfo,
)
from .normalization import (
    clean_isbn,
    normalize_author_name,
    normalize_text,
    sort_title,
    split_author_name,
)
from .types import CoverProbeStatus, CoverSize, SourceName

__all__ = [
    # Types
    "CoverProbeStatus",
    "CoverSize",
    "SourceName",
    # Models
    "AuthorName",
    "CanonicalBook",
    "CoverProbeResult",
    "GoogleBooksResponse",
    "IndustryIdentifier",
    "OpenLibraryEdition",
    "TextBlock",
    "Volume",
    "VolumeInfo",
    # Normalization
    "clean_isbn",
    "normalize_author_name",
    "normalize_text",
    "sort_title",
    "split_author_name",
    # Exceptions
    "BibmergeError",
    "CatalogError",
    "CatalogUnavailableError",
    "CoverTransportError",
    "DatabaseError",
    "ResolutionError",
    "ValidationError",
]
