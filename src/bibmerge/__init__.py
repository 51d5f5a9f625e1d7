"""Bibmerge - Book metadata lookup reconciled across Google Books and Open Library."""

from bibmerge.client import BibmergeClient, lookup_book
from bibmerge.core.exceptions import (
    BibmergeError,
    CatalogError,
    CoverTransportError,
    ValidationError,
)
from bibmerge.core.models import AuthorName, CanonicalBook, CoverProbeResult
from bibmerge.core.types import CoverProbeStatus, SourceName
from bibmerge.reconciliation.reconciler import Reconciler

__version__ = "0.1.0"
__all__ = [
    # Client
    "BibmergeClient",
    "lookup_book",
    # Types
    "CoverProbeStatus",
    "SourceName",
    # Models
    "AuthorName",
    "CanonicalBook",
    "CoverProbeResult",
    # Reconciliation
    "Reconciler",
    # Errors
    "BibmergeError",
    "CatalogError",
    "CoverTransportError",
    "ValidationError",
    # Version
    "__version__",
]
