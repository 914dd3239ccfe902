"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import PostSettings
from forum.domain.repository import (
    ForumRepository,
    PostRepository,
    ThreadRepository,
    UserRepository,
    VoteRepository,
)
from forum.domain.service import (
    ForumService,
    PathEncoder,
    PostService,
    StatusCounter,
    ThreadService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_path_encoder(self) -> PathEncoder:
        """Provide materialized path encoder."""
        return PathEncoder()

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_thread_service(
        self, thread_repository: ThreadRepository, forum_repository: ForumRepository
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository, forum_repository=forum_repository
        )

    @provide
    def get_forum_service(
        self, forum_repository: ForumRepository, user_repository: UserRepository
    ) -> ForumService:
        """Provide forum domain service."""
        return ForumService(
            forum_repository=forum_repository, user_repository=user_repository
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        forum_repository: ForumRepository,
        user_service: UserService,
        path_encoder: PathEncoder,
        status_counter: StatusCounter,
        post_settings: PostSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            forum_repository=forum_repository,
            user_service=user_service,
            path_encoder=path_encoder,
            status_counter=status_counter,
            post_settings=post_settings,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        thread_repository: ThreadRepository,
        user_service: UserService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            thread_repository=thread_repository,
            user_service=user_service,
        )
