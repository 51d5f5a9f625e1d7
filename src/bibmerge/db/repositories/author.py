"""Author repository with specialized queries."""

from sqlalchemy import select

from bibmerge.core.normalization import normalize_author_name
from bibmerge.db.models.author import AuthorModel
from bibmerge.db.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[AuthorModel]):
    """Repository for Author entities with specialized queries."""

    model = AuthorModel

    async def get_by_name_normalized(self, name_normalized: str) -> AuthorModel | None:
        """Find an author by normalized name."""
        stmt = select(AuthorModel).where(AuthorModel.name_normalized == name_normalized)
        result = await self._session.execute(stmt)
        return result.scalars().first()

    async def rename(self, author: AuthorModel, first_name: str, last_name: str) -> AuthorModel:
        """Change an author's name, keeping the matching key in step."""
        author.first_name = first_name
        author.last_name = last_name
        author.name_normalized = normalize_author_name(first_name, last_name)
        return await self.update(author)

    async def get_or_create(
        self,
        first_name: str,
        last_name: str,
    ) -> tuple[AuthorModel, bool]:
        """
        Get an existing author or create a new one.

        Returns tuple of (author, created) where created is True if new.
        """
        name_normalized = normalize_author_name(first_name, last_name)

        # First try to find by normalized name
        existing = await self.get_by_name_normalized(name_normalized)
        if existing:
            return existing, False

        author = AuthorModel(
            first_name=first_name,
            last_name=last_name,
            name_normalized=name_normalized,
        )
        await self.create(author)
        return author, True
