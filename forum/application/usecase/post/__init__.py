"""Post use cases."""

from .create_posts import (
    CreatePostsRequest,
    CreatePostsResponse,
    CreatePostsUseCase,
    NewPost,
    PostResponse,
)
from .get_thread_posts import (
    GetThreadPostsRequest,
    GetThreadPostsResponse,
    GetThreadPostsUseCase,
)

__all__ = [
    "CreatePostsRequest",
    "CreatePostsResponse",
    "CreatePostsUseCase",
    "NewPost",
    "PostResponse",
    "GetThreadPostsRequest",
    "GetThreadPostsResponse",
    "GetThreadPostsUseCase",
]
