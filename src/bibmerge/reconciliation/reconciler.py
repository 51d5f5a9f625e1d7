"""Field-level reconciliation of the two catalogs into one canonical record."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bibmerge.core.exceptions import CoverTransportError
from bibmerge.core.models import (
    AuthorName,
    CanonicalBook,
    GoogleBooksResponse,
    OpenLibraryEdition,
    VolumeInfo,
)
from bibmerge.core.normalization import sort_title, split_author_name
from bibmerge.core.types import CoverProbeStatus, SourceName

if TYPE_CHECKING:
    from bibmerge.sources.covers import CoverResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrimaryFound:
    """The primary catalog returned at least one volume."""

    response: GoogleBooksResponse


@dataclass(frozen=True)
class PrimaryEmpty:
    """The primary catalog returned nothing usable."""


PrimarySelection = PrimaryFound | PrimaryEmpty


def select_primary(primary: GoogleBooksResponse | None) -> PrimarySelection:
    """Decide whether the primary catalog is authoritative."""
    if primary is not None and primary.has_items:
        return PrimaryFound(primary)
    return PrimaryEmpty()


@dataclass
class _Draft:
    """Mutable accumulator for a book while fields are being filled."""

    source: SourceName
    title: str = ""
    subtitle: str = ""
    description: str | None = None
    page_count: int | None = None
    isbn10: str | None = None
    isbn13: str | None = None
    thumbnail_url: str | None = None
    author: AuthorName | None = None

    def build(self) -> CanonicalBook:
        return CanonicalBook(
            title=self.title,
            subtitle=self.subtitle,
            description=self.description,
            page_count=self.page_count,
            isbn10=self.isbn10,
            isbn13=self.isbn13,
            thumbnail_url=self.thumbnail_url,
            author=self.author,
            source=self.source,
        )


class Reconciler:
    """
    Merges a primary (Google Books) and a secondary (Open Library) response.

    Order of precedence:
    1. Google Books supplies title, subtitle, description, page count,
       thumbnail, author and ISBNs when it returned any volume
    2. Otherwise Open Library supplies title, subtitle, description and
       page count
    3. Open Library backfills ISBNs that are still unset
    4. The covers service backfills the thumbnail when no catalog had one
    """

    def __init__(self, cover_resolver: CoverResolver) -> None:
        self._cover_resolver = cover_resolver

    def merge(
        self,
        primary: GoogleBooksResponse | None,
        secondary: OpenLibraryEdition,
    ) -> CanonicalBook:
        """Merge both catalog responses. Pure: makes no network calls."""
        return self._merge(primary, secondary).build()

    async def reconcile(
        self,
        primary: GoogleBooksResponse | None,
        secondary: OpenLibraryEdition,
    ) -> CanonicalBook:
        """
        Merge both catalog responses and backfill a missing cover.

        Raises:
            CoverTransportError: The cover probe failed with anything but a 404
        """
        draft = self._merge(primary, secondary)

        if draft.thumbnail_url is None:
            draft.thumbnail_url = await self._probe_cover(draft.isbn13)

        return draft.build()

    def _merge(
        self,
        primary: GoogleBooksResponse | None,
        secondary: OpenLibraryEdition,
    ) -> _Draft:
        selection = select_primary(primary)

        if isinstance(selection, PrimaryFound):
            draft = self._from_primary(selection.response)
        else:
            draft = self._from_secondary(secondary)

        self._backfill_isbns(draft, secondary)
        return draft

    def _from_primary(self, response: GoogleBooksResponse) -> _Draft:
        draft = _Draft(source=SourceName.GOOGLE_BOOKS)
        volume_info = response.items[0].volume_info or VolumeInfo()

        draft.title = sort_title(volume_info.title) or ""
        draft.subtitle = volume_info.subtitle or ""
        draft.description = volume_info.description
        draft.page_count = volume_info.page_count
        draft.thumbnail_url = self._first_thumbnail(response)

        # Later identifiers of the same type overwrite earlier ones
        for identifier in volume_info.industry_identifiers:
            kind = identifier.type.lower()
            if kind == "isbn_10":
                draft.isbn10 = identifier.identifier
            elif kind == "isbn_13":
                draft.isbn13 = identifier.identifier

        if volume_info.authors:
            draft.author = split_author_name(volume_info.authors[0])

        return draft

    @staticmethod
    def _first_thumbnail(response: GoogleBooksResponse) -> str | None:
        """First thumbnail across all volumes, in response order."""
        for item in response.items:
            if item.volume_info and item.volume_info.image_links:
                thumbnail = item.volume_info.image_links.get("thumbnail")
                if thumbnail:
                    return thumbnail
        return None

    def _from_secondary(self, edition: OpenLibraryEdition) -> _Draft:
        return _Draft(
            source=SourceName.OPEN_LIBRARY,
            title=edition.title or "",
            subtitle=edition.subtitle or "",
            description=edition.description_text,
            page_count=edition.number_of_pages,
        )

    @staticmethod
    def _backfill_isbns(draft: _Draft, edition: OpenLibraryEdition) -> None:
        if draft.isbn13 is None and edition.isbn_13:
            draft.isbn13 = edition.isbn_13[0]
        if draft.isbn10 is None and edition.isbn_10:
            draft.isbn10 = edition.isbn_10[0]

    async def _probe_cover(self, isbn13: str | None) -> str | None:
        if not isbn13:
            logger.debug("No ISBN-13 known, skipping cover probe")
            return None

        result = await self._cover_resolver.resolve(isbn13)

        if result.status == CoverProbeStatus.FOUND:
            return result.image_url
        if result.status == CoverProbeStatus.NOT_FOUND:
            return None

        raise CoverTransportError(
            message=f"Cover lookup failed for ISBN {isbn13}: {result.error_message}",
            status_code=result.status_code,
        )
