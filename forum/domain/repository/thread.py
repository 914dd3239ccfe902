"""Thread repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from forum.domain.model.thread import Thread
from forum.domain.value import Slug, ThreadId


class ThreadRepository(ABC):
    """Repository for Thread entity."""

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Thread]:
        """Find a thread by slug (case-insensitive).

        Args:
            slug: Thread slug

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_forum(
        self,
        forum: Slug,
        limit: Optional[int] = None,
        since: Optional[datetime] = None,
        desc: bool = False,
    ) -> List[Thread]:
        """Find the threads of a forum ordered by creation time.

        Args:
            forum: Forum slug
            limit: Maximum number of threads (None for all)
            since: Inclusive creation-time bound, lower when ascending and
                upper when descending
            desc: Newest first when True

        Returns:
            Threads of the forum
        """
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Save a thread (create or update).

        Args:
            thread: The thread to save

        Returns:
            The saved thread
        """
        pass

    @abstractmethod
    async def lock(self, thread_id: ThreadId) -> Optional[Thread]:
        """Load a thread and hold a write lock on it until the transaction ends.

        Args:
            thread_id: The thread's identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def set_votes(self, thread_id: ThreadId, votes: int) -> Optional[Thread]:
        """Store a new vote tally for a thread.

        Args:
            thread_id: The thread's identifier
            votes: The recomputed tally

        Returns:
            The updated thread, None if it does not exist
        """
        pass
