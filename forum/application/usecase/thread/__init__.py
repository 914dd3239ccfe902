"""Thread use cases."""

from .get_thread import GetThreadRequest, GetThreadUseCase, ThreadResponse
from .list_forum_threads import (
    ListForumThreadsRequest,
    ListForumThreadsResponse,
    ListForumThreadsUseCase,
)

__all__ = [
    "GetThreadRequest",
    "GetThreadUseCase",
    "ThreadResponse",
    "ListForumThreadsRequest",
    "ListForumThreadsResponse",
    "ListForumThreadsUseCase",
]
