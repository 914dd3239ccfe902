"""Forum use cases."""

from .list_forum_users import (
    ListForumUsersRequest,
    ListForumUsersResponse,
    ListForumUsersUseCase,
    UserResponse,
)

__all__ = [
    "ListForumUsersRequest",
    "ListForumUsersResponse",
    "ListForumUsersUseCase",
    "UserResponse",
]
