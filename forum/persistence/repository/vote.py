"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Vote
from forum.domain.repository import VoteRepository
from forum.domain.value import Nickname, ThreadId
from forum.persistence.mappers import row_to_vote, vote_to_dict
from forum.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote, or replace the voice of the existing one.

        Relies on the unique (nickname, thread_id) constraint so the insert
        and the update are one statement.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            index_elements=[votes_table.c.nickname, votes_table.c.thread_id],
            set_={"voice": stmt.excluded.voice},
        ).returning(votes_table)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict())

    async def find_by_nickname_and_thread(
        self, nickname: Nickname, thread_id: ThreadId
    ) -> Optional[Vote]:
        """Find a user's vote on a thread."""
        stmt = select(votes_table).where(
            and_(
                func.lower(votes_table.c.nickname) == nickname.key,
                votes_table.c.thread_id == thread_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_thread(self, thread_id: ThreadId) -> List[Vote]:
        """Find all votes cast on a thread."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.thread_id == thread_id)
            .order_by(votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def sum_by_thread(self, thread_id: ThreadId) -> int:
        """Sum the voices cast on a thread."""
        stmt = select(func.coalesce(func.sum(votes_table.c.voice), 0)).where(
            votes_table.c.thread_id == thread_id
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
