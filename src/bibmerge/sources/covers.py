"""Open Library covers redirect probe."""

from __future__ import annotations

import logging
from typing import ClassVar

import httpx

from bibmerge.core.exceptions import CoverTransportError
from bibmerge.core.models import CoverProbeResult
from bibmerge.core.types import CoverSize
from bibmerge.sources.base import AbstractSource

logger = logging.getLogger(__name__)


def cover_path(isbn: str, size: CoverSize) -> str:
    """Path of a cover image on the covers service."""
    return f"/b/isbn/{isbn}-{size.value}.jpg"


class CoverResolver(AbstractSource):
    """
    Discovers cover image URLs without downloading image bytes.

    The covers service answers ``?default=false`` requests with a 302 to the
    concrete image when one exists and a 404 otherwise. The probe asks for the
    small image and upgrades the redirect target to the medium one, so a single
    round trip both proves existence and yields a usable URL.
    """

    SOURCE_NAME: ClassVar[str] = "open_library_covers"
    BASE_URL: ClassVar[str] = "https://covers.openlibrary.org"
    FOLLOW_REDIRECTS: ClassVar[bool] = False

    PROBE_SIZE: ClassVar[CoverSize] = CoverSize.SMALL
    RESULT_SIZE: ClassVar[CoverSize] = CoverSize.MEDIUM

    def _get_default_headers(self) -> dict[str, str]:
        return {"User-Agent": self.config.user_agent}

    def _transport_error(self, error: httpx.HTTPError) -> Exception:
        return CoverTransportError(message=f"HTTP error: {error}")

    async def resolve(self, isbn13: str) -> CoverProbeResult:
        """
        Probe the covers service for an ISBN.

        Args:
            isbn13: ISBN-13 of the book

        Returns:
            CoverProbeResult: found with the medium image URL, not_found, or
            transport_error for any other outcome
        """
        try:
            response = await self._make_request(
                "GET",
                cover_path(isbn13, self.PROBE_SIZE),
                params={"default": "false"},
                follow_redirects=False,
            )
        except CoverTransportError as e:
            logger.warning(f"Cover probe failed for ISBN {isbn13}: {e.message}")
            return CoverProbeResult.failure(e.message)

        status = response.status_code

        if status == 302:
            location = response.headers.get("Location")
            if not location:
                return CoverProbeResult.failure(
                    "Redirect without Location header", status_code=status
                )
            image_url = str(response.url.join(location))
            return CoverProbeResult.hit(self._resize(image_url), status_code=status)

        if status == 404:
            logger.debug(f"No cover for ISBN {isbn13}")
            return CoverProbeResult.miss(status_code=status)

        if response.is_success:
            # Nothing to extract without a redirect
            return CoverProbeResult.miss(status_code=status)

        logger.warning(f"Cover probe for ISBN {isbn13} returned HTTP {status}")
        return CoverProbeResult.failure(f"Unexpected HTTP {status}", status_code=status)

    def _resize(self, image_url: str) -> str:
        """Swap the size token of an image URL, e.g. ``-S.`` -> ``-M.``."""
        return image_url.replace(f"-{self.PROBE_SIZE.value}.", f"-{self.RESULT_SIZE.value}.")
