"""Domain models for catalog responses and canonical book records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .types import CoverProbeStatus, SourceName


# ============================================================================
# Primary catalog (Google Books)
# ============================================================================


class IndustryIdentifier(BaseModel):
    """A typed identifier attached to a Google Books volume."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Identifier kind, e.g. ISBN_13")
    identifier: str = Field(..., description="Identifier value")


class VolumeInfo(BaseModel):
    """Descriptive block of a Google Books volume."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    subtitle: str | None = None
    description: str | None = None
    page_count: int | None = Field(default=None, alias="pageCount")
    industry_identifiers: list[IndustryIdentifier] = Field(
        default_factory=list, alias="industryIdentifiers"
    )
    authors: list[str] = Field(default_factory=list)
    image_links: dict[str, str] | None = Field(default=None, alias="imageLinks")


class Volume(BaseModel):
    """A single item of a Google Books volumes listing."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    volume_info: VolumeInfo | None = Field(default=None, alias="volumeInfo")


class GoogleBooksResponse(BaseModel):
    """Response of the Google Books volumes search."""

    model_config = ConfigDict(populate_by_name=True)

    total_items: int = Field(default=0, alias="totalItems")
    items: list[Volume] = Field(default_factory=list)

    @property
    def has_items(self) -> bool:
        return self.total_items > 0 and len(self.items) > 0


# ============================================================================
# Secondary catalog (Open Library)
# ============================================================================


class TextBlock(BaseModel):
    """Open Library typed text value, e.g. ``{"type": "/type/text", "value": ...}``."""

    type: str | None = None
    value: str | None = None


class OpenLibraryEdition(BaseModel):
    """Open Library edition record as returned by ``/isbn/{isbn}.json``."""

    key: str | None = None
    title: str | None = None
    subtitle: str | None = None
    description: TextBlock | str | None = None
    number_of_pages: int | None = None
    isbn_13: list[str] | None = None
    isbn_10: list[str] | None = None

    @property
    def description_text(self) -> str | None:
        """Description text whether stored plain or as a typed value."""
        if isinstance(self.description, TextBlock):
            return self.description.value or None
        return self.description or None


# ============================================================================
# Cover probe
# ============================================================================


class CoverProbeResult(BaseModel):
    """Result of a cover redirect probe."""

    model_config = ConfigDict(frozen=True)

    status: CoverProbeStatus
    image_url: str | None = None
    status_code: int | None = None
    error_message: str | None = None

    @property
    def found(self) -> bool:
        return self.status == CoverProbeStatus.FOUND

    @classmethod
    def hit(cls, image_url: str, status_code: int = 302) -> CoverProbeResult:
        return cls(status=CoverProbeStatus.FOUND, image_url=image_url, status_code=status_code)

    @classmethod
    def miss(cls, status_code: int | None = 404) -> CoverProbeResult:
        return cls(status=CoverProbeStatus.NOT_FOUND, status_code=status_code)

    @classmethod
    def failure(cls, error_message: str, status_code: int | None = None) -> CoverProbeResult:
        return cls(
            status=CoverProbeStatus.TRANSPORT_ERROR,
            status_code=status_code,
            error_message=error_message,
        )


# ============================================================================
# Canonical record
# ============================================================================


class AuthorName(BaseModel):
    """Author name split into first and last name."""

    model_config = ConfigDict(frozen=True)

    first_name: str = Field(..., description="First token of the full name")
    last_name: str = Field(default="", description="Second token of the full name")


class CanonicalBook(BaseModel):
    """Book record reconciled from both catalogs."""

    title: str = Field(default="", description="Title in library sort order")
    subtitle: str = Field(default="", description="Subtitle")
    description: str | None = Field(default=None, description="Description text")
    page_count: int | None = Field(default=None, description="Number of pages")
    isbn10: str | None = Field(default=None, description="10-digit ISBN")
    isbn13: str | None = Field(default=None, description="13-digit ISBN")
    thumbnail_url: str | None = Field(default=None, description="Cover image URL")
    author: AuthorName | None = Field(default=None, description="First listed author")
    source: SourceName = Field(..., description="Catalog that supplied the descriptive fields")
