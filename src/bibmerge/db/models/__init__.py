"""Database models."""

from .author import AuthorModel

__all__ = ["AuthorModel"]
