"""Vote use case."""

from pydantic import BaseModel

from forum.application.usecase.thread import ThreadResponse
from forum.domain.service import ThreadService, VoteService
from forum.domain.value import Voice


class VoteRequest(BaseModel):
    """Vote request."""

    slug_or_id: str
    nickname: str
    voice: Voice  # 1 or -1


class VoteUseCase:
    """Use case for voting on a thread.

    A second vote by the same user replaces the first one.
    """

    def __init__(
        self, thread_service: ThreadService, vote_service: VoteService
    ) -> None:
        """Initialize vote use case.

        Args:
            thread_service: Thread domain service
            vote_service: Vote domain service
        """
        self.thread_service = thread_service
        self.vote_service = vote_service

    async def execute(self, request: VoteRequest) -> ThreadResponse:
        """Execute vote flow.

        Returns:
            The thread with its recomputed tally

        Raises:
            NotFoundError: If the thread or the voter does not exist
        """
        thread = await self.thread_service.resolve(request.slug_or_id)
        updated = await self.vote_service.vote(thread, request.nickname, request.voice)
        return ThreadResponse.from_thread(updated)
