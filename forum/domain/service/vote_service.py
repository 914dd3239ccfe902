"""Vote domain service."""

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model.thread import Thread
from forum.domain.model.vote import Vote
from forum.domain.repository import ThreadRepository, VoteRepository
from forum.domain.value import Voice

from .base import Service
from .user_service import UserService


class VoteService(Service):
    """Domain service for thread votes."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        thread_repository: ThreadRepository,
        user_service: UserService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            thread_repository: Thread repository
            user_service: User domain service
        """
        self.vote_repository = vote_repository
        self.thread_repository = thread_repository
        self.user_service = user_service

    async def vote(self, thread: Thread, nickname: str, voice: Voice) -> Thread:
        """Cast or change a user's vote on a thread.

        The thread row is locked first so votes on one thread are applied one
        at a time; the vote is then upserted and the tally recomputed from all
        votes of the thread.

        Args:
            thread: Thread being voted on
            nickname: Voter nickname
            voice: +1 or -1

        Returns:
            The thread with its recomputed tally

        Raises:
            NotFoundError: If the voter or the thread does not exist
        """
        with logfire.span(
            "vote_service.vote",
            thread_id=thread.id,
            nickname=nickname,
            voice=int(voice),
        ):
            voter = await self.user_service.get_by_nickname(nickname)

            locked = await self.thread_repository.lock(thread.id)
            if locked is None:
                logfire.warn("Vote on non-existent thread", thread_id=thread.id)
                raise NotFoundError("Thread", str(thread.id))

            await self.vote_repository.upsert(
                Vote(nickname=voter.nickname, thread_id=thread.id, voice=voice)
            )

            tally = await self.vote_repository.sum_by_thread(thread.id)
            updated = await self.thread_repository.set_votes(thread.id, tally)
            if updated is None:
                raise NotFoundError("Thread", str(thread.id))

            logfire.info(
                "Vote applied",
                thread_id=thread.id,
                nickname=str(voter.nickname),
                voice=int(voice),
                votes=updated.votes,
            )
            return updated
