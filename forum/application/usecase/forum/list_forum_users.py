"""List forum users use case."""

from typing import Optional

from pydantic import BaseModel, Field

from forum.domain.model.user import User
from forum.domain.service import ForumService


class UserResponse(BaseModel):
    """User profile."""

    nickname: str
    fullname: str
    email: str
    about: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """Build the response from a domain user."""
        return cls(
            nickname=user.nickname.root,
            fullname=user.fullname,
            email=user.email,
            about=user.about,
        )


class ListForumUsersRequest(BaseModel):
    """List forum users request."""

    forum_slug: str
    limit: Optional[int] = Field(default=None, ge=0)
    since: Optional[str] = None  # Exclusive nickname cursor
    desc: bool = False


class ListForumUsersResponse(BaseModel):
    """List forum users response."""

    users: list[UserResponse]


class ListForumUsersUseCase:
    """Use case for listing the participants of a forum."""

    def __init__(self, forum_service: ForumService) -> None:
        """Initialize list forum users use case.

        Args:
            forum_service: Forum domain service
        """
        self.forum_service = forum_service

    async def execute(self, request: ListForumUsersRequest) -> ListForumUsersResponse:
        """Execute list forum users flow.

        Raises:
            NotFoundError: If the forum does not exist
        """
        users = await self.forum_service.list_users(
            request.forum_slug,
            limit=request.limit,
            since=request.since,
            desc=request.desc,
        )
        return ListForumUsersResponse(
            users=[UserResponse.from_user(user) for user in users]
        )
