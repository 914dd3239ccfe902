"""In-memory forum repository for testing."""

from typing import Optional

from forum.domain.model.forum import Forum
from forum.domain.repository.forum import ForumRepository
from forum.domain.value import Slug


class InMemoryForumRepository(ForumRepository):
    """In-memory implementation of ForumRepository for testing."""

    def __init__(self) -> None:
        self._forums: dict[str, Forum] = {}

    async def find_by_slug(self, slug: str) -> Optional[Forum]:
        """Find a forum by slug (case-insensitive)."""
        return self._forums.get(slug.lower())

    async def save(self, forum: Forum) -> Forum:
        """Save or update a forum."""
        self._forums[forum.slug.key] = forum
        return forum

    async def increment_posts(self, slug: Slug, count: int) -> None:
        """Add to the forum's post counter."""
        forum = self._forums.get(slug.key)
        if forum:
            self._forums[slug.key] = forum.model_copy(
                update={"posts": forum.posts + count}
            )
