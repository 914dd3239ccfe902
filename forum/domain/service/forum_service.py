"""Forum domain service."""

from typing import Optional

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model.user import User
from forum.domain.repository import ForumRepository, UserRepository

from .base import Service


class ForumService(Service):
    """Domain service for forum-wide queries."""

    def __init__(
        self,
        forum_repository: ForumRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize forum service.

        Args:
            forum_repository: Forum repository
            user_repository: User repository
        """
        self.forum_repository = forum_repository
        self.user_repository = user_repository

    async def list_users(
        self,
        forum_slug: str,
        limit: Optional[int] = None,
        since: Optional[str] = None,
        desc: bool = False,
    ) -> list[User]:
        """List the users who opened a thread or wrote a post in a forum.

        Users come back ordered by nickname, compared case-insensitively.

        Args:
            forum_slug: Forum slug
            limit: Maximum number of users (None for all)
            since: Exclusive nickname cursor
            desc: Reverse nickname order

        Returns:
            Forum participants

        Raises:
            NotFoundError: If the forum does not exist
        """
        with logfire.span(
            "forum_service.list_users",
            forum_slug=forum_slug,
            limit=limit,
            since=since,
            desc=desc,
        ):
            forum = await self.forum_repository.find_by_slug(forum_slug)
            if forum is None:
                logfire.warn("Forum not found", forum_slug=forum_slug)
                raise NotFoundError("Forum", forum_slug)

            users = await self.user_repository.find_by_forum(
                forum.slug, limit=limit, since=since, desc=desc
            )
            logfire.info("Forum users retrieved", forum_slug=forum_slug, count=len(users))
            return users
