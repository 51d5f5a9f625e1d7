"""Database layer."""

from .base import Base, TimestampMixin, create_engine, create_session_factory
from .models import AuthorModel
from .repositories import AuthorRepository, BaseRepository
from .session import DatabaseManager

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    "create_engine",
    "create_session_factory",
    # Models
    "AuthorModel",
    # Repositories
    "AuthorRepository",
    "BaseRepository",
    # Session
    "DatabaseManager",
]
