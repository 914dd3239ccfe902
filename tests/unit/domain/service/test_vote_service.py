"""Unit tests for VoteService."""

import pytest

from forum.domain.error import NotFoundError
from forum.domain.repository import (
    ForumRepository,
    ThreadRepository,
    UserRepository,
    VoteRepository,
)
from forum.domain.service import VoteService
from forum.domain.value import Nickname, Voice
from tests.conftest import seed_forum, seed_thread, seed_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _seed_thread(env):
    """Create voters jack and anne and a thread to vote on."""
    await seed_user(await env.get(UserRepository), "jack", user_id=1)
    await seed_user(await env.get(UserRepository), "anne", user_id=2)
    await seed_forum(await env.get(ForumRepository), "pirates", "jack")
    return await seed_thread(await env.get(ThreadRepository), 1, "pirates", "jack")


class TestVote:
    """Tests for vote."""

    @pytest.mark.asyncio
    async def test_first_vote_sets_tally(self, unit_env):
        """A first upvote moves the tally from 0 to 1."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        thread = await _seed_thread(unit_env)

        # Act
        updated = await vote_service.vote(thread, "jack", Voice.UP)

        # Assert
        assert updated.votes == 1
        assert updated.id == thread.id

    @pytest.mark.asyncio
    async def test_changing_vote_replaces_it(self, unit_env):
        """Voting +1 then -1 leaves one vote and moves the tally by -2."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        thread = await _seed_thread(unit_env)
        after_up = await vote_service.vote(thread, "jack", Voice.UP)

        # Act
        after_down = await vote_service.vote(thread, "jack", Voice.DOWN)

        # Assert
        assert after_down.votes - after_up.votes == -2
        votes = await vote_repo.find_by_thread(thread.id)
        assert len(votes) == 1
        assert votes[0].voice == Voice.DOWN

    @pytest.mark.asyncio
    async def test_repeating_same_vote_is_idempotent(self, unit_env):
        """Casting the same voice twice keeps the tally unchanged."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        thread = await _seed_thread(unit_env)
        await vote_service.vote(thread, "jack", Voice.UP)

        # Act
        updated = await vote_service.vote(thread, "jack", Voice.UP)

        # Assert
        assert updated.votes == 1

    @pytest.mark.asyncio
    async def test_tally_sums_all_voters(self, unit_env):
        """The tally is the sum of every voter's voice."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await _seed_thread(unit_env)

        # Act
        await vote_service.vote(thread, "jack", Voice.UP)
        await vote_service.vote(thread, "anne", Voice.DOWN)
        await vote_service.vote(thread, "anne", Voice.UP)

        # Assert
        stored = await thread_repo.find_by_id(thread.id)
        assert stored.votes == 2

    @pytest.mark.asyncio
    async def test_voter_nickname_is_case_insensitive(self, unit_env):
        """Votes under different casings belong to the same user."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        thread = await _seed_thread(unit_env)

        # Act
        await vote_service.vote(thread, "Jack", Voice.UP)
        updated = await vote_service.vote(thread, "JACK", Voice.DOWN)

        # Assert
        assert updated.votes == -1
        vote = await vote_repo.find_by_nickname_and_thread(Nickname("jack"), thread.id)
        assert vote is not None
        assert vote.voice == Voice.DOWN

    @pytest.mark.asyncio
    async def test_unknown_voter_raises_not_found(self, unit_env):
        """A vote by a user that does not exist is rejected."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        thread = await _seed_thread(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.vote(thread, "ghost", Voice.UP)

        assert await vote_repo.sum_by_thread(thread.id) == 0
