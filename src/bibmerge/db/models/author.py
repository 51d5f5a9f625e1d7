"""Author database model."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from bibmerge.db.base import Base, TimestampMixin


class AuthorModel(Base, TimestampMixin):
    """
    Author as split from a catalog's first listed author.

    ``name_normalized`` holds the accent-folded "first last" key used to
    avoid storing the same author twice.
    """

    __tablename__ = "authors"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    name_normalized: Mapped[str] = mapped_column(
        String(511),
        nullable=False,
        index=True,
        comment="Lowercased, accent-folded name for matching",
    )

    def __repr__(self) -> str:
        return f"<AuthorModel(id={self.id}, name='{self.first_name} {self.last_name}')>"
