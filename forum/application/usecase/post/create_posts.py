"""Create posts use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from forum.domain.model import Post, PostDraft
from forum.domain.service import PostService, ThreadService


class PostResponse(BaseModel):
    """Post details.

    parent is 0 for top-level posts.
    """

    id: int
    thread: int
    forum: str
    author: str
    message: str
    parent: int
    path: list[int]
    is_edited: bool
    created: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        """Build the response from a domain post."""
        return cls(
            id=post.id,
            thread=post.thread_id,
            forum=post.forum.root,
            author=post.author.root,
            message=post.message,
            parent=post.parent_id or 0,
            path=list(post.path.root),
            is_edited=post.is_edited,
            created=post.created_at,
        )


class NewPost(BaseModel):
    """One post of a create request."""

    author: str
    message: str
    parent: int = 0  # 0 for a top-level post


class CreatePostsRequest(BaseModel):
    """Create posts request."""

    slug_or_id: str
    posts: list[NewPost] = Field(default_factory=list)


class CreatePostsResponse(BaseModel):
    """Create posts response, posts in submission order."""

    posts: list[PostResponse]


class CreatePostsUseCase:
    """Use case for adding a batch of posts to a thread."""

    def __init__(
        self, thread_service: ThreadService, post_service: PostService
    ) -> None:
        """Initialize create posts use case.

        Args:
            thread_service: Thread domain service
            post_service: Post domain service
        """
        self.thread_service = thread_service
        self.post_service = post_service

    async def execute(self, request: CreatePostsRequest) -> CreatePostsResponse:
        """Execute create posts flow.

        Args:
            request: Thread reference and posts to create

        Returns:
            Created posts

        Raises:
            NotFoundError: If the thread or an author does not exist
            StructuralViolationError: If a parent is missing or in another thread
        """
        thread = await self.thread_service.resolve(request.slug_or_id)

        drafts = [
            PostDraft(author=p.author, message=p.message, parent_id=p.parent)
            for p in request.posts
        ]
        posts = await self.post_service.create_posts(thread, drafts)

        return CreatePostsResponse(posts=[PostResponse.from_post(p) for p in posts])
