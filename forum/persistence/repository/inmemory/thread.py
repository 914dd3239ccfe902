"""In-memory thread repository for testing."""

from datetime import datetime
from typing import Optional

from forum.domain.model.thread import Thread
from forum.domain.repository.thread import ThreadRepository
from forum.domain.value import Slug, ThreadId


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing.

    lock() has nothing to hold in a single process and just loads the thread.
    """

    def __init__(self) -> None:
        self._threads: dict[ThreadId, Thread] = {}

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        return self._threads.get(thread_id)

    async def find_by_slug(self, slug: str) -> Optional[Thread]:
        """Find a thread by slug (case-insensitive)."""
        for thread in self._threads.values():
            if thread.slug is not None and thread.slug.key == slug.lower():
                return thread
        return None

    async def find_by_forum(
        self,
        forum: Slug,
        limit: Optional[int] = None,
        since: Optional[datetime] = None,
        desc: bool = False,
    ) -> list[Thread]:
        """Find the threads of a forum ordered by creation time."""
        threads = [t for t in self._threads.values() if t.forum.key == forum.key]

        if since is not None:
            if desc:
                threads = [t for t in threads if t.created_at <= since]
            else:
                threads = [t for t in threads if t.created_at >= since]

        threads.sort(key=lambda t: (t.created_at, t.id), reverse=desc)
        return threads[:limit] if limit is not None else threads

    def forum_authors(self, forum: Slug) -> set[str]:
        """Lower-cased nicknames of the thread authors of a forum."""
        return {
            t.author.key for t in self._threads.values() if t.forum.key == forum.key
        }

    async def save(self, thread: Thread) -> Thread:
        """Save or update a thread."""
        self._threads[thread.id] = thread
        return thread

    async def lock(self, thread_id: ThreadId) -> Optional[Thread]:
        """Load a thread."""
        return self._threads.get(thread_id)

    async def set_votes(self, thread_id: ThreadId, votes: int) -> Optional[Thread]:
        """Store a new vote tally for a thread."""
        thread = self._threads.get(thread_id)
        if thread is None:
            return None
        updated = thread.model_copy(update={"votes": votes})
        self._threads[thread_id] = updated
        return updated
