"""Unit tests for GetThreadPostsUseCase."""

import pytest

from forum.application.usecase.post import (
    CreatePostsRequest,
    CreatePostsUseCase,
    GetThreadPostsRequest,
    GetThreadPostsUseCase,
    NewPost,
)
from forum.domain.error import NotFoundError
from forum.domain.repository import ForumRepository, ThreadRepository, UserRepository
from tests.conftest import seed_forum, seed_thread, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed_abc(env) -> list[int]:
    """Thread 1 with root A, reply B to A and root C; returns their ids."""
    await seed_user(await env.get(UserRepository), "u1")
    await seed_forum(await env.get(ForumRepository), "pirates", "u1")
    await seed_thread(await env.get(ThreadRepository), 1, "pirates", "u1")

    create = await env.get(CreatePostsUseCase)
    a = (await create.execute(
        CreatePostsRequest(slug_or_id="1", posts=[NewPost(author="u1", message="A")])
    )).posts[0]
    b = (await create.execute(
        CreatePostsRequest(
            slug_or_id="1", posts=[NewPost(author="u1", message="B", parent=a.id)]
        )
    )).posts[0]
    c = (await create.execute(
        CreatePostsRequest(slug_or_id="1", posts=[NewPost(author="u1", message="C")])
    )).posts[0]
    return [a.id, b.id, c.id]


class TestGetThreadPostsUseCase:
    """Tests for GetThreadPostsUseCase."""

    @pytest.mark.asyncio
    async def test_tree_and_parent_tree(self, unit_env):
        """Tree lists A, B, C; parent_tree with limit 1 lists A's branch only."""
        # Arrange
        use_case = await unit_env.get(GetThreadPostsUseCase)
        a, b, c = await _seed_abc(unit_env)

        # Act
        tree = await use_case.execute(GetThreadPostsRequest(slug_or_id="1", sort="tree"))
        parent_tree = await use_case.execute(
            GetThreadPostsRequest(slug_or_id="1", sort="parent_tree", limit=1)
        )

        # Assert
        assert [p.id for p in tree.posts] == [a, b, c]
        assert [p.id for p in parent_tree.posts] == [a, b]

    @pytest.mark.asyncio
    async def test_unknown_sort_falls_back_to_flat(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetThreadPostsUseCase)
        a, b, c = await _seed_abc(unit_env)

        # Act
        unknown = await use_case.execute(
            GetThreadPostsRequest(slug_or_id="1", sort="sideways", desc=True)
        )
        missing = await use_case.execute(GetThreadPostsRequest(slug_or_id="1"))

        # Assert
        assert [p.id for p in unknown.posts] == [c, b, a]
        assert [p.id for p in missing.posts] == [a, b, c]

    @pytest.mark.asyncio
    async def test_flat_since_is_exclusive(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetThreadPostsUseCase)
        a, b, c = await _seed_abc(unit_env)

        # Act
        response = await use_case.execute(
            GetThreadPostsRequest(slug_or_id="1", sort="flat", since=a, limit=1)
        )

        # Assert
        assert [p.id for p in response.posts] == [b]

    @pytest.mark.asyncio
    async def test_unknown_thread_raises_not_found(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetThreadPostsUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetThreadPostsRequest(slug_or_id="nowhere"))
