"""PostgreSQL implementation of Post repository."""

from typing import Collection, Dict, List, Optional

from sqlalchemy import and_, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

import logfire

from forum.domain.error import StructuralViolationError
from forum.domain.model import Post
from forum.domain.repository import PostRepository
from forum.domain.value import PostId, ThreadId
from forum.persistence.mappers import post_to_dict, row_to_post
from forum.persistence.tables import posts_id_seq, posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    Tree orderings rely on PostgreSQL array comparison, which is element-wise
    with a shorter prefix sorting first.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_ids(self, post_ids: Collection[PostId]) -> Dict[PostId, Post]:
        """Find several posts at once."""
        if not post_ids:
            return {}

        stmt = select(posts_table).where(posts_table.c.id.in_(list(post_ids)))
        result = await self.session.execute(stmt)
        posts = [row_to_post(row._asdict()) for row in result.fetchall()]
        return {post.id: post for post in posts}

    async def reserve_ids(self, count: int) -> List[PostId]:
        """Draw ids from the posts sequence, one round trip for the batch."""
        if count <= 0:
            return []

        stmt = select(posts_id_seq.next_value()).select_from(
            func.generate_series(1, count)
        )
        result = await self.session.execute(stmt)
        return sorted(PostId(value) for value in result.scalars().all())

    async def insert_batch(self, posts: List[Post]) -> List[Post]:
        """Insert posts with a single multi-row INSERT ... RETURNING."""
        if not posts:
            return []

        stmt = (
            insert(posts_table)
            .values([post_to_dict(post) for post in posts])
            .returning(posts_table)
        )
        try:
            result = await self.session.execute(stmt)
            rows = result.fetchall()
            await self.session.flush()
        except IntegrityError as e:
            logfire.warn(
                "Post batch rejected by the database",
                thread_id=posts[0].thread_id,
                count=len(posts),
                error=str(e.orig),
            )
            raise StructuralViolationError(
                "Post batch violates a database constraint"
            ) from e

        stored = {PostId(row.id): row_to_post(row._asdict()) for row in rows}
        return [stored[post.id] for post in posts if post.id in stored]

    async def find_flat(
        self,
        thread_id: ThreadId,
        limit: Optional[int] = None,
        since: Optional[PostId] = None,
        desc: bool = False,
    ) -> List[Post]:
        """Find posts of a thread ordered by id."""
        stmt = select(posts_table).where(posts_table.c.thread_id == thread_id)

        if since is not None:
            if desc:
                stmt = stmt.where(posts_table.c.id < since)
            else:
                stmt = stmt.where(posts_table.c.id > since)

        stmt = stmt.order_by(posts_table.c.id.desc() if desc else posts_table.c.id)

        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_tree(
        self,
        thread_id: ThreadId,
        limit: Optional[int] = None,
        since: Optional[PostId] = None,
        desc: bool = False,
    ) -> List[Post]:
        """Find posts of a thread in depth-first order."""
        stmt = select(posts_table).where(posts_table.c.thread_id == thread_id)

        if since is not None:
            # NULL for an unknown cursor, which filters out every row
            cursor_path = (
                select(posts_table.c.path)
                .where(posts_table.c.id == since)
                .scalar_subquery()
            )
            if desc:
                stmt = stmt.where(posts_table.c.path < cursor_path)
            else:
                stmt = stmt.where(posts_table.c.path > cursor_path)

        if desc:
            stmt = stmt.order_by(posts_table.c.path.desc(), posts_table.c.id.desc())
        else:
            stmt = stmt.order_by(posts_table.c.path, posts_table.c.id)

        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_parent_tree(
        self,
        thread_id: ThreadId,
        limit: Optional[int] = None,
        since: Optional[PostId] = None,
        desc: bool = False,
    ) -> List[Post]:
        """Find whole branches of a thread, paginated by top-level post."""
        branch_id = posts_table.c.path[1]

        roots = select(posts_table.c.id).where(
            and_(
                posts_table.c.thread_id == thread_id,
                posts_table.c.parent_id.is_(None),
            )
        )

        if since is not None:
            cursor_branch = (
                select(branch_id).where(posts_table.c.id == since).scalar_subquery()
            )
            if desc:
                roots = roots.where(posts_table.c.id < cursor_branch)
            else:
                roots = roots.where(posts_table.c.id > cursor_branch)

        roots = roots.order_by(posts_table.c.id.desc() if desc else posts_table.c.id)

        if limit is not None:
            roots = roots.limit(limit)

        stmt = (
            select(posts_table)
            .where(
                and_(
                    posts_table.c.thread_id == thread_id,
                    branch_id.in_(roots),
                )
            )
            .order_by(
                branch_id.desc() if desc else branch_id,
                posts_table.c.path,
                posts_table.c.id,
            )
        )

        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]
