"""Repository implementations."""

from .author import AuthorRepository
from .base import BaseRepository

__all__ = ["AuthorRepository", "BaseRepository"]
