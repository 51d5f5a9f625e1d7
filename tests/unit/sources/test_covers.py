"""Tests for the cover redirect probe."""

from __future__ import annotations

import httpx
import pytest
import respx
from httpx import Response

from bibmerge.core.types import CoverProbeStatus, CoverSize
from bibmerge.sources.covers import CoverResolver, cover_path

PROBE_URL = "https://covers.openlibrary.org/b/isbn/123-S.jpg"


@pytest.fixture
def resolver() -> CoverResolver:
    """Create a cover resolver."""
    return CoverResolver()


class TestCoverPath:
    """Tests for cover path construction."""

    def test_small(self):
        assert cover_path("9780441013593", CoverSize.SMALL) == "/b/isbn/9780441013593-S.jpg"

    def test_medium(self):
        assert cover_path("9780441013593", CoverSize.MEDIUM) == "/b/isbn/9780441013593-M.jpg"


class TestCoverResolver:
    """Tests for probe outcome classification."""

    @respx.mock
    async def test_redirect_is_found(self, resolver: CoverResolver):
        """A 302 should yield the medium-size URL of the redirect target."""
        route = respx.get(PROBE_URL).mock(
            return_value=Response(
                302, headers={"Location": "https://archive.org/download/x/isbn/123-S.jpg"}
            )
        )

        result = await resolver.resolve("123")

        assert result.status == CoverProbeStatus.FOUND
        assert result.found is True
        assert result.image_url == "https://archive.org/download/x/isbn/123-M.jpg"
        assert route.calls.last.request.url.params["default"] == "false"
        assert route.call_count == 1

    @respx.mock
    async def test_redirect_not_followed(self, resolver: CoverResolver):
        """The redirect target itself should never be requested."""
        respx.get(PROBE_URL).mock(
            return_value=Response(302, headers={"Location": "https://images.test/isbn/123-S.jpg"})
        )
        target = respx.get("https://images.test/isbn/123-S.jpg").mock(
            return_value=Response(200, content=b"jpeg")
        )

        result = await resolver.resolve("123")

        assert result.image_url == "https://images.test/isbn/123-M.jpg"
        assert target.called is False

    @respx.mock
    async def test_relative_location(self, resolver: CoverResolver):
        """A relative Location should be resolved against the covers host."""
        respx.get(PROBE_URL).mock(
            return_value=Response(302, headers={"Location": "/w/id/99-S.jpg"})
        )

        result = await resolver.resolve("123")

        assert result.image_url == "https://covers.openlibrary.org/w/id/99-M.jpg"

    @respx.mock
    async def test_not_found(self, resolver: CoverResolver):
        """A 404 means there is no cover, not an error."""
        respx.get(PROBE_URL).mock(return_value=Response(404))

        result = await resolver.resolve("123")

        assert result.status == CoverProbeStatus.NOT_FOUND
        assert result.image_url is None

    @respx.mock
    async def test_success_without_redirect(self, resolver: CoverResolver):
        """A 2xx carries no URL to extract and counts as not found."""
        respx.get(PROBE_URL).mock(return_value=Response(200, content=b"jpeg"))

        result = await resolver.resolve("123")

        assert result.status == CoverProbeStatus.NOT_FOUND

    @respx.mock
    async def test_server_error(self, resolver: CoverResolver):
        """A 500 is a transport error."""
        respx.get(PROBE_URL).mock(return_value=Response(500))

        result = await resolver.resolve("123")

        assert result.status == CoverProbeStatus.TRANSPORT_ERROR
        assert result.status_code == 500

    @respx.mock
    async def test_other_redirect_status(self, resolver: CoverResolver):
        """Only 302 signals a cover; a 301 is an error."""
        respx.get(PROBE_URL).mock(
            return_value=Response(301, headers={"Location": "https://images.test/123-S.jpg"})
        )

        result = await resolver.resolve("123")

        assert result.status == CoverProbeStatus.TRANSPORT_ERROR

    @respx.mock
    async def test_redirect_without_location(self, resolver: CoverResolver):
        """A 302 without Location is a transport error."""
        respx.get(PROBE_URL).mock(return_value=Response(302))

        result = await resolver.resolve("123")

        assert result.status == CoverProbeStatus.TRANSPORT_ERROR

    @respx.mock
    async def test_connection_error(self, resolver: CoverResolver):
        """Transport failures become a transport_error result."""
        respx.get(PROBE_URL).mock(side_effect=httpx.ConnectError("refused"))

        result = await resolver.resolve("123")

        assert result.status == CoverProbeStatus.TRANSPORT_ERROR
        assert result.error_message is not None
