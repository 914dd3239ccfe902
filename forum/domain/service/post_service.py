"""Post domain service."""

from datetime import datetime, timezone
from typing import Sequence

import logfire

from forum.config import PostSettings
from forum.domain.error import InternalError, NotFoundError, StructuralViolationError
from forum.domain.model.post import Post, PostDraft
from forum.domain.model.thread import Thread
from forum.domain.repository import ForumRepository, PostPage, PostRepository
from forum.domain.value import PostSort, ThreadId

from .base import Service
from .path_encoder import PathEncoder
from .status_counter import StatusCounter
from .user_service import UserService


class PostService(Service):
    """Domain service for writing and reading the posts of a thread."""

    def __init__(
        self,
        post_repository: PostRepository,
        forum_repository: ForumRepository,
        user_service: UserService,
        path_encoder: PathEncoder,
        status_counter: StatusCounter,
        post_settings: PostSettings,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            forum_repository: Forum repository (post counters)
            user_service: User domain service (author lookups)
            path_encoder: Materialized path encoder
            status_counter: Process-wide status counters
            post_settings: Post writing limits
        """
        self.post_repository = post_repository
        self.forum_repository = forum_repository
        self.user_service = user_service
        self.path_encoder = path_encoder
        self.status_counter = status_counter
        self.post_settings = post_settings

    async def create_posts(
        self, thread: Thread, drafts: Sequence[PostDraft]
    ) -> list[Post]:
        """Create a batch of posts in a thread, all of them or none.

        Candidates are checked in submission order: the first unknown author
        or foreign parent aborts the whole batch before anything is written.
        The batch then gets its ids, its paths and one shared creation time,
        and is stored with a single insert.

        Args:
            thread: Thread receiving the posts
            drafts: Posts to create, in submission order

        Returns:
            Created posts in submission order

        Raises:
            NotFoundError: If an author does not exist
            StructuralViolationError: If a parent is missing or belongs to
                another thread, or the batch is too large
        """
        if not drafts:
            return []

        with logfire.span(
            "post_service.create_posts", thread_id=thread.id, count=len(drafts)
        ):
            if len(drafts) > self.post_settings.max_batch_size:
                logfire.warn(
                    "Post batch too large",
                    thread_id=thread.id,
                    count=len(drafts),
                    max_batch_size=self.post_settings.max_batch_size,
                )
                raise StructuralViolationError(
                    f"Batch of {len(drafts)} posts exceeds the limit of "
                    f"{self.post_settings.max_batch_size}"
                )

            authors = await self.user_service.find_by_nicknames(
                {draft.author for draft in drafts}
            )
            parents = await self.post_repository.find_by_ids(
                {draft.parent_id for draft in drafts if draft.parent_id is not None}
            )

            resolved = []
            for draft in drafts:
                author = authors.get(draft.author.lower())
                if author is None:
                    logfire.warn(
                        "Post author not found",
                        author=draft.author,
                        thread_id=thread.id,
                    )
                    raise NotFoundError("User", draft.author)
                parent = self.path_encoder.resolve_parent(
                    thread.id, draft.parent_id, parents
                )
                resolved.append((draft, author, parent))

            post_ids = await self.post_repository.reserve_ids(len(resolved))
            created_at = datetime.now(timezone.utc)
            posts = [
                Post(
                    id=post_id,
                    thread_id=thread.id,
                    forum=thread.forum,
                    author=author.nickname,
                    message=draft.message,
                    parent_id=parent.id if parent else None,
                    path=self.path_encoder.encode(post_id, parent),
                    is_edited=False,
                    created_at=created_at,
                )
                for post_id, (draft, author, parent) in zip(post_ids, resolved)
            ]

            saved = await self.post_repository.insert_batch(posts)
            if len(saved) != len(posts):
                logfire.error(
                    "Post batch insert returned an unexpected row count",
                    thread_id=thread.id,
                    expected=len(posts),
                    actual=len(saved),
                )
                raise InternalError("Post batch was only partially stored")

            await self.forum_repository.increment_posts(thread.forum, len(saved))
            self.status_counter.increment_posts(len(saved))

            logfire.info(
                "Posts created",
                thread_id=thread.id,
                forum=str(thread.forum),
                count=len(saved),
                first_id=saved[0].id,
            )
            return saved

    async def get_thread_posts(self, thread_id: ThreadId, page: PostPage) -> list[Post]:
        """List the posts of a thread under one of the traversal modes.

        - flat: by id
        - tree: depth-first by path, cursor compared on full paths
        - parent_tree: whole branches, limit and cursor applied to the
          top-level posts

        Args:
            thread_id: Thread identifier
            page: Sort mode and pagination window

        Returns:
            Posts of the requested page, empty when nothing matches
        """
        with logfire.span(
            "post_service.get_thread_posts",
            thread_id=thread_id,
            sort=page.sort.value,
            limit=page.limit,
            since=page.since,
            desc=page.desc,
        ):
            if page.sort == PostSort.TREE:
                finder = self.post_repository.find_tree
            elif page.sort == PostSort.PARENT_TREE:
                finder = self.post_repository.find_parent_tree
            else:
                finder = self.post_repository.find_flat

            posts = await finder(
                thread_id, limit=page.limit, since=page.since, desc=page.desc
            )
            logfire.info(
                "Thread posts retrieved",
                thread_id=thread_id,
                sort=page.sort.value,
                count=len(posts),
            )
            return posts
