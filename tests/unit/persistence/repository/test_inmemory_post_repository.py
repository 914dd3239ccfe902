"""Unit tests for InMemoryPostRepository."""

from datetime import datetime, timezone

import pytest

from forum.domain.error import StructuralViolationError
from forum.domain.model import Post
from forum.domain.value import Nickname, PostId, PostPath, Slug, ThreadId
from forum.persistence.repository.inmemory import InMemoryPostRepository


def _post(post_id: int, path: tuple[int, ...], thread_id: int = 1) -> Post:
    return Post(
        id=PostId(post_id),
        thread_id=ThreadId(thread_id),
        forum=Slug("pirates"),
        author=Nickname("jack"),
        message=f"post {post_id}",
        parent_id=PostId(path[-2]) if len(path) > 1 else None,
        path=PostPath(path),
        created_at=datetime.now(timezone.utc),
    )


class TestInMemoryPostRepository:
    """Tests for the in-memory post store."""

    @pytest.mark.asyncio
    async def test_reserve_ids_continue_across_calls(self):
        repo = InMemoryPostRepository()

        first = await repo.reserve_ids(2)
        second = await repo.reserve_ids(3)

        assert first == [1, 2]
        assert second == [3, 4, 5]

    @pytest.mark.asyncio
    async def test_insert_batch_rejects_dangling_parent(self):
        repo = InMemoryPostRepository()

        with pytest.raises(StructuralViolationError):
            await repo.insert_batch([_post(2, (1, 2))])

        assert await repo.find_by_ids([PostId(2)]) == {}

    @pytest.mark.asyncio
    async def test_insert_batch_rejects_duplicate_ids(self):
        repo = InMemoryPostRepository()
        await repo.insert_batch([_post(1, (1,))])

        with pytest.raises(StructuralViolationError):
            await repo.insert_batch([_post(1, (1,))])

    @pytest.mark.asyncio
    async def test_find_tree_orders_numerically(self):
        """Path elements compare as numbers, so 9 sorts before 10."""
        repo = InMemoryPostRepository()
        await repo.insert_batch(
            [_post(1, (1,)), _post(9, (1, 9)), _post(10, (1, 10)), _post(2, (2,))]
        )

        posts = await repo.find_tree(ThreadId(1))

        assert [p.id for p in posts] == [1, 9, 10, 2]
        assert (await repo.find_by_id(PostId(9))).path.root == (1, 9)
