"""Application configuration using Pydantic Settings."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BibmergeSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="BIBMERGE_",
    )

    # Catalogs
    google_books_url: str = Field(
        default="https://www.googleapis.com/books/v1",
        description="Google Books API base URL (primary catalog)",
    )
    google_books_api_key: str | None = Field(
        default=None,
        description="Google Books API key (optional, increases rate limits)",
    )
    openlibrary_url: str = Field(
        default="https://openlibrary.org",
        description="Open Library base URL (secondary catalog)",
    )
    covers_url: str = Field(
        default="https://covers.openlibrary.org",
        description="Open Library covers service base URL",
    )

    # HTTP
    request_timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="Timeout in seconds for each outbound request",
    )
    user_agent: str = Field(
        default="bibmerge/0.1",
        description="User-Agent header sent to the catalogs",
    )

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./bibmerge.db",
        description="SQLAlchemy async URL for author storage",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> BibmergeSettings:
    """Get cached settings instance."""
    return BibmergeSettings()


def configure_logging(settings: BibmergeSettings | None = None) -> None:
    """Configure root logging for applications embedding bibmerge."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
