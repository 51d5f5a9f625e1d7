"""Abstract HTTP sources with client management and error translation."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, ClassVar, Generic, TypeVar

import httpx
from pydantic import BaseModel

from bibmerge.core.exceptions import CatalogError, CatalogUnavailableError

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class SourceConfig(BaseModel):
    """Configuration for an HTTP source."""

    api_key: str | None = None
    base_url: str | None = None
    timeout: float = 30.0
    user_agent: str = "bibmerge/0.1"


class AbstractSource(ABC):
    """
    Base class for everything bibmerge talks to over HTTP.

    Provides:
    - HTTP client management with connection pooling
    - Translation of transport failures into domain errors
    - Request timing and debug logging
    """

    # Class-level configuration (to be overridden by subclasses)
    SOURCE_NAME: ClassVar[str]
    BASE_URL: ClassVar[str]
    FOLLOW_REDIRECTS: ClassVar[bool] = True

    def __init__(self, config: SourceConfig | None = None) -> None:
        self.config = config or SourceConfig()
        self._client: httpx.AsyncClient | None = None

    @property
    def source_name(self) -> str:
        return self.SOURCE_NAME

    @property
    def base_url(self) -> str:
        return self.config.base_url or self.BASE_URL

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.config.timeout),
                headers=self._get_default_headers(),
                follow_redirects=self.FOLLOW_REDIRECTS,
            )

        try:
            yield self._client
        except httpx.HTTPError as e:
            raise self._transport_error(e) from e

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests."""
        return {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }

    def _transport_error(self, error: httpx.HTTPError) -> Exception:
        """Build the exception raised when the source cannot be reached."""
        return CatalogUnavailableError(
            message=f"HTTP error: {error}",
            source=self.source_name,
        )

    async def _make_request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make a single HTTP request. No retries."""
        start = time.monotonic()

        async with self._get_client() as client:
            response = await client.request(method, url, **kwargs)

        duration_ms = (time.monotonic() - start) * 1000
        logger.debug(
            f"{self.source_name} {method} {response.request.url} -> "
            f"{response.status_code} ({duration_ms:.0f}ms)"
        )
        return response

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AbstractSource":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class AbstractCatalog(AbstractSource, Generic[ResponseT]):
    """Base class for catalogs that answer ISBN lookups with a JSON document."""

    @abstractmethod
    async def fetch(self, isbn: str) -> ResponseT | None:
        """
        Fetch the catalog's record for an ISBN.

        Args:
            isbn: Normalized ISBN-10 or ISBN-13

        Returns:
            The parsed catalog response, or None when the catalog reports
            an empty result

        Raises:
            CatalogError: The catalog answered with an error payload
            CatalogUnavailableError: The catalog could not be reached
        """
        ...

    @abstractmethod
    def _error_payload(self, body: Any) -> Any:
        """Extract the upstream error object from a decoded error body."""
        ...

    def _raise_for_error(self, response: httpx.Response) -> None:
        """Raise CatalogError carrying the upstream payload on non-2xx responses."""
        if response.is_success:
            return

        try:
            payload = self._error_payload(response.json())
        except ValueError:
            payload = {"code": response.status_code, "message": response.text}

        logger.warning(
            f"{self.source_name} returned {response.status_code} for {response.request.url}"
        )
        raise CatalogError(
            message=f"{self.source_name} error (HTTP {response.status_code})",
            source=self.source_name,
            payload=payload,
            status_code=response.status_code,
        )
