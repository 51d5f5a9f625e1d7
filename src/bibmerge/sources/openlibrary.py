"""Open Library catalog (secondary source)."""

from __future__ import annotations

from typing import Any, ClassVar

from bibmerge.core.models import OpenLibraryEdition
from bibmerge.core.types import SourceName
from bibmerge.sources.base import AbstractCatalog, SourceConfig


class OpenLibraryCatalog(AbstractCatalog[OpenLibraryEdition]):
    """
    Open Library edition lookup (free, no API key required).

    API Documentation: https://openlibrary.org/dev/docs/api/books

    There is no empty result here: an unknown ISBN is an HTTP 404 and
    surfaces as a CatalogError.
    """

    SOURCE_NAME: ClassVar[str] = SourceName.OPEN_LIBRARY.value
    BASE_URL: ClassVar[str] = "https://openlibrary.org"

    def __init__(self, config: SourceConfig | None = None) -> None:
        super().__init__(config)

    async def fetch(self, isbn: str) -> OpenLibraryEdition:
        """Fetch the Open Library edition for an ISBN."""
        # /isbn/{isbn}.json redirects to the canonical /books/{olid}.json
        response = await self._make_request("GET", f"/isbn/{isbn}.json")
        self._raise_for_error(response)

        return OpenLibraryEdition.model_validate(response.json())

    def _error_payload(self, body: Any) -> Any:
        # The whole body is the error object, e.g. {"error": "notfound", "key": ...}
        return body
