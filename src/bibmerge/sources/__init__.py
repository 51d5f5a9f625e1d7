"""HTTP sources: the two catalogs and the covers service."""

from bibmerge.sources.base import AbstractCatalog, AbstractSource, SourceConfig
from bibmerge.sources.covers import CoverResolver
from bibmerge.sources.google_books import GoogleBooksCatalog
from bibmerge.sources.openlibrary import OpenLibraryCatalog

__all__ = [
    "AbstractCatalog",
    "AbstractSource",
    "CoverResolver",
    "GoogleBooksCatalog",
    "OpenLibraryCatalog",
    "SourceConfig",
]
