"""In-memory vote repository for testing."""

from typing import Optional

from forum.domain.model.vote import Vote
from forum.domain.repository.vote import VoteRepository
from forum.domain.value import Nickname, ThreadId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[tuple[str, ThreadId], Vote] = {}

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote, or replace the voice of the existing one."""
        self._votes[(vote.nickname.key, vote.thread_id)] = vote
        return vote

    async def find_by_nickname_and_thread(
        self, nickname: Nickname, thread_id: ThreadId
    ) -> Optional[Vote]:
        """Find a user's vote on a thread."""
        return self._votes.get((nickname.key, thread_id))

    async def find_by_thread(self, thread_id: ThreadId) -> list[Vote]:
        """Find all votes cast on a thread."""
        return [v for v in self._votes.values() if v.thread_id == thread_id]

    async def sum_by_thread(self, thread_id: ThreadId) -> int:
        """Sum the voices cast on a thread."""
        return sum(int(v.voice) for v in await self.find_by_thread(thread_id))
