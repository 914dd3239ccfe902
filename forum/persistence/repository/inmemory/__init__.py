"""In-memory repository implementations for testing."""

from .forum import InMemoryForumRepository
from .post import InMemoryPostRepository
from .thread import InMemoryThreadRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryForumRepository",
    "InMemoryPostRepository",
    "InMemoryThreadRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
