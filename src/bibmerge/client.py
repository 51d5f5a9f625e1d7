"""Main library client for standalone usage."""

from __future__ import annotations

import asyncio
import logging
import time

from bibmerge.config import BibmergeSettings
from bibmerge.core.exceptions import ValidationError
from bibmerge.core.models import CanonicalBook
from bibmerge.core.normalization import clean_isbn
from bibmerge.reconciliation.reconciler import Reconciler
from bibmerge.sources.base import SourceConfig
from bibmerge.sources.covers import CoverResolver
from bibmerge.sources.google_books import GoogleBooksCatalog
from bibmerge.sources.openlibrary import OpenLibraryCatalog

logger = logging.getLogger(__name__)


class BibmergeClient:
    """
    Main client for the bibmerge library.

    Looks a book up in Google Books and Open Library, reconciles the two
    answers and backfills a missing cover from the Open Library covers
    service.

    Usage:
        async with BibmergeClient() as client:
            book = await client.lookup("978-0-7432-7356-5")

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(self, settings: BibmergeSettings | None = None) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
        """
        self._settings = settings or BibmergeSettings()
        self._google_books: GoogleBooksCatalog | None = None
        self._openlibrary: OpenLibraryCatalog | None = None
        self._covers: CoverResolver | None = None
        self._reconciler: Reconciler | None = None

    async def __aenter__(self) -> BibmergeClient:
        """Initialize resources on context entry."""
        self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    def _initialize(self) -> None:
        """Create the catalogs and the reconciler from settings."""
        settings = self._settings

        def source_config(base_url: str, api_key: str | None = None) -> SourceConfig:
            return SourceConfig(
                base_url=base_url,
                api_key=api_key,
                timeout=settings.request_timeout,
                user_agent=settings.user_agent,
            )

        self._google_books = GoogleBooksCatalog(
            source_config(settings.google_books_url, settings.google_books_api_key)
        )
        self._openlibrary = OpenLibraryCatalog(source_config(settings.openlibrary_url))
        self._covers = CoverResolver(source_config(settings.covers_url))
        self._reconciler = Reconciler(self._covers)

    async def close(self) -> None:
        """Close all resources."""
        for source in (self._google_books, self._openlibrary, self._covers):
            if source is not None:
                await source.close()

        self._google_books = None
        self._openlibrary = None
        self._covers = None
        self._reconciler = None

    def _ensure_initialized(self) -> None:
        """Ensure client is initialized."""
        if self._reconciler is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with BibmergeClient() as client:'"
            )

    async def lookup(self, isbn: str) -> CanonicalBook:
        """
        Look up a book by ISBN.

        Args:
            isbn: ISBN-10 or ISBN-13, hyphens and spaces allowed

        Returns:
            The reconciled book record

        Raises:
            ValidationError: The ISBN is empty or not 10 or 13 characters long
            CatalogError: Either catalog failed
            CoverTransportError: The cover probe failed
        """
        self._ensure_initialized()

        try:
            value = clean_isbn(isbn)
        except ValueError as e:
            raise ValidationError(f"Invalid ISBN: {isbn}", {"isbn": isbn}) from e

        start = time.monotonic()

        # Both catalogs are required; either failing aborts the lookup
        primary, secondary = await asyncio.gather(
            self._google_books.fetch(value),
            self._openlibrary.fetch(value),
        )

        book = await self._reconciler.reconcile(primary, secondary)

        duration = time.monotonic() - start
        logger.info(
            f"Book lookup completed in {duration:.2f}s: {value} (source: {book.source})"
        )
        return book


async def lookup_book(
    isbn: str,
    *,
    settings: BibmergeSettings | None = None,
) -> CanonicalBook:
    """
    Look up a book (convenience function).

    For multiple lookups, use BibmergeClient to reuse connections.
    """
    async with BibmergeClient(settings) as client:
        return await client.lookup(isbn)
