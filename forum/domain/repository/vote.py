"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.vote import Vote
from forum.domain.value import Nickname, ThreadId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Votes are unique per (nickname, thread).
    """

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote, or replace the voice of the existing one.

        Must be a single atomic statement so concurrent voters never see a
        failed insert followed by an update.

        Args:
            vote: The vote to store

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def find_by_nickname_and_thread(
        self, nickname: Nickname, thread_id: ThreadId
    ) -> Optional[Vote]:
        """Find a user's vote on a thread.

        Args:
            nickname: Voter nickname
            thread_id: Thread identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_thread(self, thread_id: ThreadId) -> List[Vote]:
        """Find all votes cast on a thread.

        Args:
            thread_id: Thread identifier

        Returns:
            Votes on the thread
        """
        pass

    @abstractmethod
    async def sum_by_thread(self, thread_id: ThreadId) -> int:
        """Sum the voices cast on a thread.

        Args:
            thread_id: Thread identifier

        Returns:
            The tally, 0 when nobody voted
        """
        pass
