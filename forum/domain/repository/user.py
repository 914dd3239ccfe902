"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Collection, Dict, List, Optional

from forum.domain.model.user import User
from forum.domain.value import Slug


class UserRepository(ABC):
    """Repository for User entity.

    Nickname lookups are case-insensitive.
    """

    @abstractmethod
    async def find_by_nickname(self, nickname: str) -> Optional[User]:
        """Find a user by nickname.

        Args:
            nickname: Nickname in any letter case

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_nicknames(self, nicknames: Collection[str]) -> Dict[str, User]:
        """Find several users at once.

        Args:
            nicknames: Nicknames in any letter case

        Returns:
            Found users keyed by lower-cased nickname; unknown nicknames are
            simply absent
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def find_by_forum(
        self,
        forum: Slug,
        limit: Optional[int] = None,
        since: Optional[str] = None,
        desc: bool = False,
    ) -> List[User]:
        """Find the users who opened a thread or wrote a post in a forum.

        Users are ordered by nickname, compared case-insensitively.

        Args:
            forum: Forum slug
            limit: Maximum number of users (None for all)
            since: Exclusive nickname cursor, a lower bound when ascending
                and an upper bound when descending
            desc: Reverse nickname order

        Returns:
            Participants of the forum, each listed once
        """
        pass
