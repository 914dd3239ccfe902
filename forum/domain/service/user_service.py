"""User domain service."""

from typing import Collection, Dict

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model.user import User
from forum.domain.repository import UserRepository

from .base import Service


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_nickname(self, nickname: str) -> User:
        """Get a user that must exist.

        Args:
            nickname: Nickname in any letter case

        Returns:
            The user

        Raises:
            NotFoundError: If no user has this nickname
        """
        user = await self.user_repository.find_by_nickname(nickname)
        if user is None:
            logfire.warn("User not found", nickname=nickname)
            raise NotFoundError("User", nickname)
        return user

    async def find_by_nicknames(self, nicknames: Collection[str]) -> Dict[str, User]:
        """Look up several users in one round trip.

        Args:
            nicknames: Nicknames in any letter case

        Returns:
            Found users keyed by lower-cased nickname
        """
        if not nicknames:
            return {}
        return await self.user_repository.find_by_nicknames(nicknames)
