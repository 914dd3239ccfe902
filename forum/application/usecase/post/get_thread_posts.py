"""Get thread posts use case."""

from typing import Optional

from pydantic import BaseModel, Field

from forum.domain.repository import PostPage
from forum.domain.service import PostService, ThreadService
from forum.domain.value import PostId, PostSort

from .create_posts import PostResponse


class GetThreadPostsRequest(BaseModel):
    """Get thread posts request.

    An unknown or missing sort falls back to flat.
    """

    slug_or_id: str
    sort: Optional[str] = None  # flat, tree or parent_tree
    limit: Optional[int] = Field(default=None, ge=0)
    since: Optional[int] = None  # Id of the last post already seen
    desc: bool = False


class GetThreadPostsResponse(BaseModel):
    """Get thread posts response."""

    posts: list[PostResponse]


class GetThreadPostsUseCase:
    """Use case for reading the posts of a thread."""

    def __init__(
        self, thread_service: ThreadService, post_service: PostService
    ) -> None:
        """Initialize get thread posts use case.

        Args:
            thread_service: Thread domain service
            post_service: Post domain service
        """
        self.thread_service = thread_service
        self.post_service = post_service

    async def execute(self, request: GetThreadPostsRequest) -> GetThreadPostsResponse:
        """Execute get thread posts flow.

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread = await self.thread_service.resolve(request.slug_or_id)

        page = PostPage(
            sort=PostSort.parse(request.sort),
            limit=request.limit,
            since=PostId(request.since) if request.since is not None else None,
            desc=request.desc,
        )
        posts = await self.post_service.get_thread_posts(thread.id, page)

        return GetThreadPostsResponse(posts=[PostResponse.from_post(p) for p in posts])
