"""PostgreSQL implementation of Forum repository."""

from typing import Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Forum
from forum.domain.repository import ForumRepository
from forum.domain.value import Slug
from forum.persistence.mappers import forum_to_dict, row_to_forum
from forum.persistence.tables import forums_table


class PostgresForumRepository(ForumRepository):
    """PostgreSQL implementation of ForumRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_slug(self, slug: str) -> Optional[Forum]:
        """Find a forum by slug (case-insensitive)."""
        stmt = select(forums_table).where(
            func.lower(forums_table.c.slug) == slug.lower()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_forum(dict(row)) if row else None

    async def save(self, forum: Forum) -> Forum:
        """Save a forum (create or update)."""
        forum_dict = forum_to_dict(forum)
        existing = await self.find_by_slug(forum.slug.root)

        if existing:
            stmt = (
                update(forums_table)
                .where(forums_table.c.id == existing.id)
                .values(**{k: v for k, v in forum_dict.items() if k != "id"})
                .returning(forums_table)
            )
        else:
            stmt = insert(forums_table).values(**forum_dict).returning(forums_table)

        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_forum(dict(row))

    async def increment_posts(self, slug: Slug, count: int) -> None:
        """Atomically add to the forum's post counter."""
        stmt = (
            update(forums_table)
            .where(func.lower(forums_table.c.slug) == slug.key)
            .values(posts=forums_table.c.posts + count)
        )
        await self.session.execute(stmt)
        await self.session.flush()
