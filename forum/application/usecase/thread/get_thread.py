"""Get thread use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from forum.domain.model import Thread
from forum.domain.service import ThreadService


class ThreadResponse(BaseModel):
    """Thread details."""

    id: int
    slug: Optional[str] = None
    forum: str
    author: str
    title: str
    message: str
    votes: int
    created_at: datetime

    @classmethod
    def from_thread(cls, thread: Thread) -> "ThreadResponse":
        """Build the response from a domain thread."""
        return cls(
            id=thread.id,
            slug=thread.slug.root if thread.slug else None,
            forum=thread.forum.root,
            author=thread.author.root,
            title=thread.title,
            message=thread.message,
            votes=thread.votes,
            created_at=thread.created_at,
        )


class GetThreadRequest(BaseModel):
    """Get thread request."""

    slug_or_id: str


class GetThreadUseCase:
    """Use case for resolving a thread from its id or slug."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetThreadRequest) -> ThreadResponse:
        """Execute get thread flow.

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread = await self.thread_service.resolve(request.slug_or_id)
        return ThreadResponse.from_thread(thread)
