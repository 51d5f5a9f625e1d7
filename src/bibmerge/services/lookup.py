"""Lookup service for orchestrating the lookup → store flow."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bibmerge.core.models import CanonicalBook
from bibmerge.db.repositories.author import AuthorRepository

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from bibmerge.client import BibmergeClient
    from bibmerge.db.models.author import AuthorModel

logger = logging.getLogger(__name__)


class BookLookupService:
    """
    Service for looking books up and keeping their authors on record.

    Orchestrates:
    1. Reconcile the book from both catalogs
    2. Get or create the book's author
    """

    def __init__(
        self,
        session: AsyncSession,
        client: BibmergeClient,
    ) -> None:
        """
        Initialize the lookup service.

        Args:
            session: Database session for persistence
            client: Initialized bibmerge client
        """
        self._session = session
        self._client = client
        self._authors = AuthorRepository(session)

    async def lookup_and_store(
        self,
        isbn: str,
    ) -> tuple[CanonicalBook, AuthorModel | None]:
        """
        Look up a book and store its author.

        Args:
            isbn: ISBN-10 or ISBN-13

        Returns:
            The reconciled book and its stored author, if it has one
        """
        book = await self._client.lookup(isbn)

        if book.author is None:
            logger.debug(f"No author to store for ISBN {isbn}")
            return book, None

        author, created = await self._authors.get_or_create(
            first_name=book.author.first_name,
            last_name=book.author.last_name,
        )
        if created:
            logger.info(f"Stored author: {author.first_name} {author.last_name}")
        else:
            logger.debug(f"Author already stored: {author.first_name} {author.last_name}")

        return book, author
