"""PostgreSQL implementation of User repository."""

from typing import Collection, Dict, List, Optional

from sqlalchemy import func, insert, select, union, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import Slug
from forum.persistence.mappers import row_to_user, user_to_dict
from forum.persistence.tables import posts_table, threads_table, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_nickname(self, nickname: str) -> Optional[User]:
        """Find a user by nickname (case-insensitive)."""
        stmt = select(users_table).where(
            func.lower(users_table.c.nickname) == nickname.lower()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_nicknames(self, nicknames: Collection[str]) -> Dict[str, User]:
        """Find several users at once, keyed by lower-cased nickname."""
        if not nicknames:
            return {}

        keys = {nickname.lower() for nickname in nicknames}
        stmt = select(users_table).where(
            func.lower(users_table.c.nickname).in_(keys)
        )
        result = await self.session.execute(stmt)
        users = [row_to_user(dict(row)) for row in result.mappings().all()]
        return {user.nickname.key: user for user in users}

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        user_dict = user_to_dict(user)
        existing = await self.find_by_nickname(user.nickname.root)

        if existing:
            stmt = (
                update(users_table)
                .where(users_table.c.id == existing.id)
                .values(**{k: v for k, v in user_dict.items() if k != "id"})
                .returning(users_table)
            )
        else:
            stmt = insert(users_table).values(**user_dict).returning(users_table)

        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_user(dict(row))

    async def find_by_forum(
        self,
        forum: Slug,
        limit: Optional[int] = None,
        since: Optional[str] = None,
        desc: bool = False,
    ) -> List[User]:
        """Find thread and post authors of a forum, paginated by nickname."""
        participants = union(
            select(func.lower(threads_table.c.author).label("nickname")).where(
                func.lower(threads_table.c.forum) == forum.key
            ),
            select(func.lower(posts_table.c.author).label("nickname")).where(
                func.lower(posts_table.c.forum) == forum.key
            ),
        ).subquery()

        # Byte order on the folded nickname, whatever the database locale
        sort_key = func.lower(users_table.c.nickname).collate("C")

        stmt = select(users_table).where(
            func.lower(users_table.c.nickname).in_(
                select(participants.c.nickname)
            )
        )

        if since is not None:
            cursor = func.lower(since).collate("C")
            if desc:
                stmt = stmt.where(sort_key < cursor)
            else:
                stmt = stmt.where(sort_key > cursor)

        stmt = stmt.order_by(sort_key.desc() if desc else sort_key)

        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]
