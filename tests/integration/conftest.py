"""Integration test fixtures for the author database."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from bibmerge.core.normalization import normalize_author_name
from bibmerge.db.base import Base
from bibmerge.db.models.author import AuthorModel


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture(scope="function")
async def db_engine():
    """
    Create a fresh in-memory SQLite engine for each test.

    StaticPool keeps the single connection (and thus the database) alive
    for the whole test.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture(scope="function")
async def db_session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    """Create session factory from engine."""
    return async_sessionmaker(
        db_engine,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(db_session_factory) -> AsyncIterator[AsyncSession]:
    """Get a database session for one test."""
    async with db_session_factory() as session:
        yield session


# ============================================================================
# Sample Data Fixtures
# ============================================================================


def _create_sample_author(first_name: str = "Frank", last_name: str = "Herbert") -> AuthorModel:
    """Create a sample author model (not persisted)."""
    return AuthorModel(
        first_name=first_name,
        last_name=last_name,
        name_normalized=normalize_author_name(first_name, last_name),
    )


@pytest.fixture
async def sample_author(db_session: AsyncSession) -> AuthorModel:
    """Create a sample author in the database."""
    author = _create_sample_author()
    db_session.add(author)
    await db_session.commit()
    return author


@pytest.fixture
async def multiple_authors(db_session: AsyncSession) -> list[AuthorModel]:
    """Create several authors for listing tests."""
    authors = [
        _create_sample_author("Ursula", "Le"),
        _create_sample_author("Octavia", "Butler"),
        _create_sample_author("Iain", "Banks"),
    ]
    db_session.add_all(authors)
    await db_session.commit()
    return authors
