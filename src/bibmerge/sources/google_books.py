"""Google Books catalog (primary source)."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from bibmerge.core.models import GoogleBooksResponse
from bibmerge.core.types import SourceName
from bibmerge.sources.base import AbstractCatalog, SourceConfig

logger = logging.getLogger(__name__)


class GoogleBooksCatalog(AbstractCatalog[GoogleBooksResponse]):
    """
    Google Books API catalog.

    API Documentation: https://developers.google.com/books/docs/v1/using

    Works without API key but rate limits apply.
    With API key, higher quotas are available.
    """

    SOURCE_NAME: ClassVar[str] = SourceName.GOOGLE_BOOKS.value
    BASE_URL: ClassVar[str] = "https://www.googleapis.com/books/v1"

    def __init__(self, config: SourceConfig | None = None) -> None:
        super().__init__(config)
        # API key is optional for Google Books
        self._api_key = self.config.api_key

    async def fetch(self, isbn: str) -> GoogleBooksResponse | None:
        """Search Google Books volumes by ISBN."""
        params: dict[str, Any] = {"q": f"isbn:{isbn}"}
        if self._api_key:
            params["key"] = self._api_key

        response = await self._make_request("GET", "/volumes", params=params)
        self._raise_for_error(response)

        result = GoogleBooksResponse.model_validate(response.json())
        if not result.items:
            logger.debug(f"Google Books has no volumes for ISBN {isbn}")
            return None

        return result

    def _error_payload(self, body: Any) -> Any:
        # Google wraps failures as {"error": {"code", "message", "errors"}}
        if isinstance(body, dict) and "error" in body:
            return body["error"]
        return body
