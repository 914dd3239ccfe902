"""Thread domain service."""

import re
from datetime import datetime
from typing import Optional

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model.thread import Thread
from forum.domain.repository import ForumRepository, ThreadRepository
from forum.domain.value import ThreadId

from .base import Service

_THREAD_ID = re.compile(r"^-?\d+$")


class ThreadService(Service):
    """Domain service for thread lookups."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        forum_repository: ForumRepository,
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            forum_repository: Forum repository
        """
        self.thread_repository = thread_repository
        self.forum_repository = forum_repository

    async def resolve(self, slug_or_id: str) -> Thread:
        """Resolve a thread reference given either as an id or as a slug.

        Slugs are never numeric, so a reference made only of digits is
        always an id.

        Args:
            slug_or_id: Thread id as a string, or thread slug

        Returns:
            The thread

        Raises:
            NotFoundError: If no thread matches the reference
        """
        with logfire.span("thread_service.resolve", slug_or_id=slug_or_id):
            if _THREAD_ID.match(slug_or_id):
                thread = await self.thread_repository.find_by_id(
                    ThreadId(int(slug_or_id))
                )
            else:
                thread = await self.thread_repository.find_by_slug(slug_or_id)

            if thread is None:
                logfire.warn("Thread not found", slug_or_id=slug_or_id)
                raise NotFoundError("Thread", slug_or_id)
            return thread

    async def list_forum_threads(
        self,
        forum_slug: str,
        limit: Optional[int] = None,
        since: Optional[datetime] = None,
        desc: bool = False,
    ) -> list[Thread]:
        """List the threads of a forum by creation time.

        Args:
            forum_slug: Forum slug
            limit: Maximum number of threads (None for all)
            since: Inclusive creation-time bound
            desc: Newest first

        Returns:
            Threads of the forum

        Raises:
            NotFoundError: If the forum does not exist
        """
        with logfire.span(
            "thread_service.list_forum_threads",
            forum_slug=forum_slug,
            limit=limit,
            since=since.isoformat() if since else None,
            desc=desc,
        ):
            forum = await self.forum_repository.find_by_slug(forum_slug)
            if forum is None:
                logfire.warn("Forum not found", forum_slug=forum_slug)
                raise NotFoundError("Forum", forum_slug)

            threads = await self.thread_repository.find_by_forum(
                forum.slug, limit=limit, since=since, desc=desc
            )
            logfire.info(
                "Forum threads retrieved", forum_slug=forum_slug, count=len(threads)
            )
            return threads
