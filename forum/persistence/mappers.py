"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from forum.domain.model import Forum, Post, Thread, User, Vote
from forum.domain.value import (
    ForumId,
    Nickname,
    PostId,
    PostPath,
    Slug,
    ThreadId,
    UserId,
    Voice,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        nickname=Nickname(row["nickname"]),
        fullname=row["fullname"],
        email=row["email"],
        about=row.get("about"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_forum(row: Dict[str, Any]) -> Forum:
    """Convert database row to Forum domain model."""
    return Forum(
        id=ForumId(row["id"]),
        slug=Slug(row["slug"]),
        title=row["title"],
        user=Nickname(row["user"]),
        posts=row["posts"],
        threads=row["threads"],
    )


def forum_to_dict(forum: Forum) -> Dict[str, Any]:
    """Convert Forum domain model to database dict."""
    return forum.model_dump()


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(row["id"]),
        slug=Slug(row["slug"]) if row.get("slug") else None,
        forum=Slug(row["forum"]),
        author=Nickname(row["author"]),
        title=row["title"],
        message=row["message"],
        votes=row["votes"],
        created_at=row["created_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict."""
    return thread.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        thread_id=ThreadId(row["thread_id"]),
        forum=Slug(row["forum"]),
        author=Nickname(row["author"]),
        message=row["message"],
        parent_id=PostId(row["parent_id"]) if row.get("parent_id") else None,
        path=PostPath(tuple(row["path"])),
        is_edited=row["is_edited"],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    The path is dumped as a list so it binds as a PostgreSQL array.
    """
    post_dict = post.model_dump()
    post_dict["path"] = list(post_dict["path"])
    return post_dict


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        nickname=Nickname(row["nickname"]),
        thread_id=ThreadId(row["thread_id"]),
        voice=Voice(row["voice"]),
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "nickname": vote.nickname.root,
        "thread_id": vote.thread_id,
        "voice": int(vote.voice),
    }
