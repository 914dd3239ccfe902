"""Domain services."""

from .base import Service
from .forum_service import ForumService
from .path_encoder import PathEncoder
from .post_service import PostService
from .status_counter import StatusCounter
from .thread_service import ThreadService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "ForumService",
    "PathEncoder",
    "PostService",
    "Service",
    "StatusCounter",
    "ThreadService",
    "UserService",
    "VoteService",
]
