"""Test configuration and fixtures."""

from datetime import datetime, timezone
from typing import Optional

import logfire

from forum.domain.model import Forum, Thread, User
from forum.domain.repository import ForumRepository, ThreadRepository, UserRepository
from forum.domain.value import ForumId, Nickname, Slug, ThreadId, UserId

# Keep spans and events local during tests
logfire.configure(send_to_logfire=False, console=False)


async def seed_user(
    user_repo: UserRepository, nickname: str, user_id: int = 1
) -> User:
    """Store a user with filler profile fields."""
    return await user_repo.save(
        User(
            id=UserId(user_id),
            nickname=Nickname(nickname),
            fullname=f"{nickname} Fullname",
            email=f"{nickname.lower()}@example.org",
            about=None,
        )
    )


async def seed_forum(
    forum_repo: ForumRepository, slug: str, owner: str, forum_id: int = 1
) -> Forum:
    """Store an empty forum."""
    return await forum_repo.save(
        Forum(
            id=ForumId(forum_id),
            slug=Slug(slug),
            title=f"Forum {slug}",
            user=Nickname(owner),
        )
    )


async def seed_thread(
    thread_repo: ThreadRepository,
    thread_id: int,
    forum: str,
    author: str,
    slug: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> Thread:
    """Store a thread without votes."""
    return await thread_repo.save(
        Thread(
            id=ThreadId(thread_id),
            slug=Slug(slug) if slug else None,
            forum=Slug(forum),
            author=Nickname(author),
            title=f"Thread {thread_id}",
            message="Opening message",
            created_at=created_at or datetime.now(timezone.utc),
        )
    )
