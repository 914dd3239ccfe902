"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    ForumId,
    PostId,
    ThreadId,
    UserId,
)
from forum.domain.value.path import PostPath
from forum.domain.value.types import (
    Nickname,
    PostSort,
    Slug,
    Voice,
)

__all__ = [
    # Identifiers
    "UserId",
    "ForumId",
    "ThreadId",
    "PostId",
    # Types
    "Nickname",
    "Slug",
    "Voice",
    "PostSort",
    "PostPath",
]
