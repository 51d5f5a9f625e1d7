"""Shared test fixtures for all tests."""

from __future__ import annotations

from typing import Any

import pytest

from bibmerge.config import BibmergeSettings
from bibmerge.core.models import GoogleBooksResponse, OpenLibraryEdition


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def test_settings() -> BibmergeSettings:
    """Create test settings pointing at the public hosts (mocked by respx)."""
    return BibmergeSettings(
        _env_file=None,
        google_books_url="https://www.googleapis.com/books/v1",
        google_books_api_key=None,
        openlibrary_url="https://openlibrary.org",
        covers_url="https://covers.openlibrary.org",
        request_timeout=5.0,
        database_url="sqlite+aiosqlite:///:memory:",
        debug=False,
    )


# ============================================================================
# Google Books Fixtures
# ============================================================================


@pytest.fixture
def gatsby_volumes_data() -> dict[str, Any]:
    """Google Books response with one volume that has everything."""
    return {
        "kind": "books#volumes",
        "totalItems": 1,
        "items": [
            {
                "kind": "books#volume",
                "id": "iXn5U2IzVH0C",
                "volumeInfo": {
                    "title": "The Great Gatsby",
                    "subtitle": "",
                    "authors": ["F. Scott Fitzgerald"],
                    "description": "A portrait of the Jazz Age.",
                    "industryIdentifiers": [
                        {"type": "ISBN_13", "identifier": "9780743273565"},
                    ],
                    "pageCount": 180,
                    "imageLinks": {"thumbnail": "http://x/thumb.jpg"},
                },
            }
        ],
    }


@pytest.fixture
def empty_volumes_data() -> dict[str, Any]:
    """Google Books response with no results."""
    return {
        "kind": "books#volumes",
        "totalItems": 0,
    }


@pytest.fixture
def gatsby_volumes(gatsby_volumes_data: dict[str, Any]) -> GoogleBooksResponse:
    """Parsed Google Books response for The Great Gatsby."""
    return GoogleBooksResponse.model_validate(gatsby_volumes_data)


# ============================================================================
# Open Library Fixtures
# ============================================================================


@pytest.fixture
def dune_edition_data() -> dict[str, Any]:
    """Open Library edition for Dune without description or covers."""
    return {
        "key": "/books/OL7353617M",
        "title": "Dune",
        "number_of_pages": 412,
        "isbn_13": ["9780441013593"],
        "isbn_10": ["0441013597"],
    }


@pytest.fixture
def dune_edition(dune_edition_data: dict[str, Any]) -> OpenLibraryEdition:
    """Parsed Open Library edition for Dune."""
    return OpenLibraryEdition.model_validate(dune_edition_data)


@pytest.fixture
def gatsby_edition() -> OpenLibraryEdition:
    """Open Library edition for The Great Gatsby with a typed description."""
    return OpenLibraryEdition.model_validate(
        {
            "key": "/books/OL22570129M",
            "title": "The Great Gatsby",
            "subtitle": "Open Library subtitle",
            "description": {"type": "/type/text", "value": "Open Library description"},
            "number_of_pages": 216,
            "isbn_13": ["9780743273565"],
            "isbn_10": ["0743273567"],
        }
    )
