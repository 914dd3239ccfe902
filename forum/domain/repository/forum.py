"""Forum repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.forum import Forum
from forum.domain.value import Slug


class ForumRepository(ABC):
    """Repository for Forum entity."""

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Forum]:
        """Find a forum by slug (case-insensitive).

        Args:
            slug: Forum slug

        Returns:
            The forum if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, forum: Forum) -> Forum:
        """Save a forum (create or update).

        Args:
            forum: The forum to save

        Returns:
            The saved forum
        """
        pass

    @abstractmethod
    async def increment_posts(self, slug: Slug, count: int) -> None:
        """Atomically add to the forum's post counter.

        Args:
            slug: Forum slug
            count: Number of posts added
        """
        pass
