"""Unit tests for the list forum users use case."""

import pytest
from pydantic import ValidationError

from forum.application.usecase.forum import (
    ListForumUsersRequest,
    ListForumUsersUseCase,
)
from forum.domain.error import NotFoundError
from forum.domain.repository import ForumRepository, ThreadRepository, UserRepository
from tests.conftest import seed_forum, seed_thread, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(env):
    user_repo = await env.get(UserRepository)
    await seed_user(user_repo, "jack", user_id=1)
    await seed_user(user_repo, "Anne", user_id=2)
    await seed_forum(await env.get(ForumRepository), "pirates", "jack")
    thread_repo = await env.get(ThreadRepository)
    await seed_thread(thread_repo, 1, "pirates", "jack")
    await seed_thread(thread_repo, 2, "pirates", "Anne")


class TestListForumUsersUseCase:
    """Tests for ListForumUsersUseCase."""

    @pytest.mark.asyncio
    async def test_returns_user_profiles(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListForumUsersUseCase)
        await _seed(unit_env)

        # Act
        response = await use_case.execute(ListForumUsersRequest(forum_slug="pirates"))

        # Assert
        assert [u.nickname for u in response.users] == ["Anne", "jack"]
        assert response.users[1].fullname == "jack Fullname"
        assert response.users[1].email == "jack@example.org"
        assert response.users[1].about is None

    @pytest.mark.asyncio
    async def test_passes_paging_through(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListForumUsersUseCase)
        await _seed(unit_env)

        # Act
        response = await use_case.execute(
            ListForumUsersRequest(forum_slug="pirates", since="zzz", desc=True, limit=1)
        )

        # Assert
        assert [u.nickname for u in response.users] == ["jack"]

    @pytest.mark.asyncio
    async def test_unknown_forum_raises_not_found(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListForumUsersUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(ListForumUsersRequest(forum_slug="nowhere"))

    def test_negative_limit_is_rejected(self):
        # Act & Assert
        with pytest.raises(ValidationError):
            ListForumUsersRequest(forum_slug="pirates", limit=-1)
