"""List forum threads use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from forum.domain.service import ThreadService

from .get_thread import ThreadResponse


class ListForumThreadsRequest(BaseModel):
    """List forum threads request."""

    forum_slug: str
    limit: Optional[int] = Field(default=None, ge=0)
    since: Optional[datetime] = None  # Inclusive creation-time bound
    desc: bool = False


class ListForumThreadsResponse(BaseModel):
    """List forum threads response."""

    threads: list[ThreadResponse]


class ListForumThreadsUseCase:
    """Use case for listing the threads of a forum."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize list forum threads use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(
        self, request: ListForumThreadsRequest
    ) -> ListForumThreadsResponse:
        """Execute list forum threads flow.

        Raises:
            NotFoundError: If the forum does not exist
        """
        threads = await self.thread_service.list_forum_threads(
            request.forum_slug,
            limit=request.limit,
            since=request.since,
            desc=request.desc,
        )
        return ListForumThreadsResponse(
            threads=[ThreadResponse.from_thread(thread) for thread in threads]
        )
