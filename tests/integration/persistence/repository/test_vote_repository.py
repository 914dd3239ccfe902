"""Integration tests for PostgresVoteRepository and thread locking."""

from uuid import uuid4

import pytest

from forum.domain.model import Vote
from forum.domain.repository import (
    ForumRepository,
    ThreadRepository,
    UserRepository,
    VoteRepository,
)
from forum.domain.service import VoteService
from forum.domain.value import Voice
from tests.conftest import seed_forum, seed_thread, seed_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence, assumes a migrated database
integration_env = create_env_fixture(unmock={"persistence"})


def _unique_id() -> int:
    return uuid4().int % 10**12


async def _seed_thread(env):
    suffix = uuid4().hex[:8]
    nickname = f"v{suffix}"
    user = await seed_user(
        await env.get(UserRepository), nickname, user_id=_unique_id()
    )
    await seed_forum(
        await env.get(ForumRepository), f"vf-{suffix}", nickname, forum_id=_unique_id()
    )
    thread = await seed_thread(
        await env.get(ThreadRepository), _unique_id(), f"vf-{suffix}", nickname
    )
    return thread, user


class TestVoteRepositoryIntegration:
    """Integration tests for PostgresVoteRepository."""

    @pytest.mark.asyncio
    async def test_upsert_replaces_existing_vote(self, integration_env):
        """ON CONFLICT keeps one row per voter and thread."""
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        thread, user = await _seed_thread(integration_env)

        # Act
        await vote_repo.upsert(
            Vote(nickname=user.nickname, thread_id=thread.id, voice=Voice.UP)
        )
        stored = await vote_repo.upsert(
            Vote(nickname=user.nickname, thread_id=thread.id, voice=Voice.DOWN)
        )

        # Assert
        votes = await vote_repo.find_by_thread(thread.id)
        assert len(votes) == 1
        assert stored.voice == Voice.DOWN
        assert await vote_repo.sum_by_thread(thread.id) == -1

    @pytest.mark.asyncio
    async def test_vote_service_updates_thread_row(self, integration_env):
        # Arrange
        vote_service = await integration_env.get(VoteService)
        thread_repo = await integration_env.get(ThreadRepository)
        thread, user = await _seed_thread(integration_env)

        # Act
        await vote_service.vote(thread, user.nickname.root, Voice.UP)
        updated = await vote_service.vote(thread, user.nickname.root, Voice.DOWN)

        # Assert
        assert updated.votes == -1
        stored = await thread_repo.find_by_id(thread.id)
        assert stored.votes == -1

    @pytest.mark.asyncio
    async def test_sum_of_thread_without_votes_is_zero(self, integration_env):
        # Arrange
        vote_repo = await integration_env.get(VoteRepository)
        thread, _ = await _seed_thread(integration_env)

        # Act & Assert
        assert await vote_repo.sum_by_thread(thread.id) == 0
