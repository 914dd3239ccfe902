"""PostgreSQL implementation of Thread repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Thread
from forum.domain.repository import ThreadRepository
from forum.domain.value import Slug, ThreadId
from forum.persistence.mappers import row_to_thread, thread_to_dict
from forum.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        stmt = select(threads_table).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def find_by_slug(self, slug: str) -> Optional[Thread]:
        """Find a thread by slug (case-insensitive)."""
        stmt = select(threads_table).where(
            func.lower(threads_table.c.slug) == slug.lower()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def find_by_forum(
        self,
        forum: Slug,
        limit: Optional[int] = None,
        since: Optional[datetime] = None,
        desc: bool = False,
    ) -> List[Thread]:
        """Find the threads of a forum ordered by creation time."""
        stmt = select(threads_table).where(
            func.lower(threads_table.c.forum) == forum.key
        )

        if since is not None:
            if desc:
                stmt = stmt.where(threads_table.c.created_at <= since)
            else:
                stmt = stmt.where(threads_table.c.created_at >= since)

        if desc:
            stmt = stmt.order_by(
                threads_table.c.created_at.desc(), threads_table.c.id.desc()
            )
        else:
            stmt = stmt.order_by(threads_table.c.created_at, threads_table.c.id)

        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_thread(row._asdict()) for row in result.fetchall()]

    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update)."""
        thread_dict = thread_to_dict(thread)
        existing = await self.find_by_id(thread.id) if thread.id else None

        if existing:
            stmt = (
                update(threads_table)
                .where(threads_table.c.id == thread.id)
                .values(**{k: v for k, v in thread_dict.items() if k != "id"})
                .returning(threads_table)
            )
        else:
            stmt = insert(threads_table).values(**thread_dict).returning(threads_table)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_thread(row._asdict())

    async def lock(self, thread_id: ThreadId) -> Optional[Thread]:
        """Load a thread with SELECT ... FOR UPDATE."""
        stmt = (
            select(threads_table)
            .where(threads_table.c.id == thread_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def set_votes(self, thread_id: ThreadId, votes: int) -> Optional[Thread]:
        """Store a new vote tally for a thread."""
        stmt = (
            update(threads_table)
            .where(threads_table.c.id == thread_id)
            .values(votes=votes)
            .returning(threads_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_thread(row._asdict()) if row else None
