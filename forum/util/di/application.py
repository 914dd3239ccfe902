"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.forum import ListForumUsersUseCase
from forum.application.usecase.post import CreatePostsUseCase, GetThreadPostsUseCase
from forum.application.usecase.status import GetStatusUseCase
from forum.application.usecase.thread import GetThreadUseCase, ListForumThreadsUseCase
from forum.application.usecase.vote import VoteUseCase
from forum.domain.service import (
    ForumService,
    PostService,
    StatusCounter,
    ThreadService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Forum use cases
    @provide(scope=Scope.REQUEST)
    def get_list_forum_users_use_case(
        self, forum_service: ForumService
    ) -> ListForumUsersUseCase:
        """Provide list forum users use case."""
        return ListForumUsersUseCase(forum_service=forum_service)

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_thread_use_case(self, thread_service: ThreadService) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_list_forum_threads_use_case(
        self, thread_service: ThreadService
    ) -> ListForumThreadsUseCase:
        """Provide list forum threads use case."""
        return ListForumThreadsUseCase(thread_service=thread_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_posts_use_case(
        self, thread_service: ThreadService, post_service: PostService
    ) -> CreatePostsUseCase:
        """Provide create posts use case."""
        return CreatePostsUseCase(
            thread_service=thread_service, post_service=post_service
        )

    @provide(scope=Scope.REQUEST)
    def get_thread_posts_use_case(
        self, thread_service: ThreadService, post_service: PostService
    ) -> GetThreadPostsUseCase:
        """Provide get thread posts use case."""
        return GetThreadPostsUseCase(
            thread_service=thread_service, post_service=post_service
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_use_case(
        self, thread_service: ThreadService, vote_service: VoteService
    ) -> VoteUseCase:
        """Provide vote use case."""
        return VoteUseCase(thread_service=thread_service, vote_service=vote_service)

    # Status use cases
    @provide(scope=Scope.REQUEST)
    def get_status_use_case(self, status_counter: StatusCounter) -> GetStatusUseCase:
        """Provide get status use case."""
        return GetStatusUseCase(status_counter=status_counter)
