"""Unit tests for thread use cases."""

from datetime import datetime, timezone

import pytest

from forum.application.usecase.thread import (
    GetThreadRequest,
    GetThreadUseCase,
    ListForumThreadsRequest,
    ListForumThreadsUseCase,
)
from forum.domain.error import NotFoundError
from forum.domain.repository import ForumRepository, ThreadRepository, UserRepository
from tests.conftest import seed_forum, seed_thread, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(env):
    await seed_user(await env.get(UserRepository), "jack")
    await seed_forum(await env.get(ForumRepository), "pirates", "jack")
    thread_repo = await env.get(ThreadRepository)
    await seed_thread(
        thread_repo,
        1,
        "pirates",
        "jack",
        slug="plank",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    await seed_thread(
        thread_repo,
        2,
        "pirates",
        "jack",
        created_at=datetime(2024, 1, 2, tzinfo=timezone.utc),
    )


class TestGetThreadUseCase:
    """Tests for GetThreadUseCase."""

    @pytest.mark.asyncio
    async def test_resolves_slug_and_id(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetThreadUseCase)
        await _seed(unit_env)

        # Act
        by_slug = await use_case.execute(GetThreadRequest(slug_or_id="Plank"))
        by_id = await use_case.execute(GetThreadRequest(slug_or_id="2"))

        # Assert
        assert by_slug.id == 1
        assert by_slug.slug == "plank"
        assert by_id.id == 2
        assert by_id.slug is None

    @pytest.mark.asyncio
    async def test_unknown_thread_raises_not_found(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetThreadUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetThreadRequest(slug_or_id="plank"))


class TestListForumThreadsUseCase:
    """Tests for ListForumThreadsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_newest_first(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListForumThreadsUseCase)
        await _seed(unit_env)

        # Act
        response = await use_case.execute(
            ListForumThreadsRequest(forum_slug="pirates", desc=True)
        )

        # Assert
        assert [t.id for t in response.threads] == [2, 1]
