"""Domain model entities for the forum."""

from forum.domain.model.forum import Forum
from forum.domain.model.post import Post, PostDraft
from forum.domain.model.status import Status
from forum.domain.model.thread import Thread
from forum.domain.model.user import User
from forum.domain.model.vote import Vote

__all__ = [
    "User",
    "Forum",
    "Thread",
    "Post",
    "PostDraft",
    "Vote",
    "Status",
]
