"""Mock persistence providers for testing."""

from dishka import Scope, provide

from forum.domain.repository import (
    ForumRepository,
    PostRepository,
    ThreadRepository,
    UserRepository,
    VoteRepository,
)
from forum.persistence.repository.inmemory import (
    InMemoryForumRepository,
    InMemoryPostRepository,
    InMemoryThreadRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from forum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_user_repository(
        self, thread_repository: ThreadRepository, post_repository: PostRepository
    ) -> UserRepository:
        """Provide in-memory user repository reading forum participants."""
        return InMemoryUserRepository(threads=thread_repository, posts=post_repository)

    @provide(scope=Scope.REQUEST)
    def get_forum_repository(self) -> ForumRepository:
        """Provide in-memory forum repository."""
        return InMemoryForumRepository()

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self) -> ThreadRepository:
        """Provide in-memory thread repository."""
        return InMemoryThreadRepository()

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()
