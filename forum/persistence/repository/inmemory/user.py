"""In-memory user repository for testing."""

from typing import TYPE_CHECKING, Collection, List, Optional

from forum.domain.model.user import User
from forum.domain.repository.user import UserRepository
from forum.domain.value import Slug

if TYPE_CHECKING:
    from .post import InMemoryPostRepository
    from .thread import InMemoryThreadRepository


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Forum participants are read from the thread and post repositories passed
    in; without them no user participates in any forum.
    """

    def __init__(
        self,
        threads: Optional["InMemoryThreadRepository"] = None,
        posts: Optional["InMemoryPostRepository"] = None,
    ) -> None:
        self._users: dict[str, User] = {}
        self._threads = threads
        self._posts = posts

    async def find_by_nickname(self, nickname: str) -> Optional[User]:
        """Find a user by nickname (case-insensitive)."""
        return self._users.get(nickname.lower())

    async def find_by_nicknames(self, nicknames: Collection[str]) -> dict[str, User]:
        """Find several users at once, keyed by lower-cased nickname."""
        keys = {nickname.lower() for nickname in nicknames}
        return {key: user for key, user in self._users.items() if key in keys}

    async def find_by_forum(
        self,
        forum: Slug,
        limit: Optional[int] = None,
        since: Optional[str] = None,
        desc: bool = False,
    ) -> List[User]:
        """Find thread and post authors of a forum, paginated by nickname."""
        authors: set[str] = set()
        if self._threads is not None:
            authors |= self._threads.forum_authors(forum)
        if self._posts is not None:
            authors |= self._posts.forum_authors(forum)

        keys = sorted(key for key in self._users if key in authors)
        if desc:
            keys.reverse()

        if since is not None:
            cursor = since.lower()
            if desc:
                keys = [key for key in keys if key < cursor]
            else:
                keys = [key for key in keys if key > cursor]

        users = [self._users[key] for key in keys]
        return users[:limit] if limit is not None else users

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.nickname.key] = user
        return user
