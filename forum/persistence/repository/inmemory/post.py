"""In-memory post repository for testing."""

from typing import Collection, Optional

from forum.domain.error import StructuralViolationError
from forum.domain.model.post import Post
from forum.domain.repository.post import PostRepository
from forum.domain.value import PostId, Slug, ThreadId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Orderings compare paths as tuples, which sort the same way PostgreSQL
    compares arrays.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._last_id = 0

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_ids(self, post_ids: Collection[PostId]) -> dict[PostId, Post]:
        """Find several posts at once."""
        return {pid: self._posts[pid] for pid in post_ids if pid in self._posts}

    async def reserve_ids(self, count: int) -> list[PostId]:
        """Allocate increasing identifiers."""
        first = self._last_id + 1
        self._last_id += max(count, 0)
        return [PostId(i) for i in range(first, self._last_id + 1)]

    async def insert_batch(self, posts: list[Post]) -> list[Post]:
        """Insert posts, all of them or none.

        Raises:
            StructuralViolationError: On a duplicate id or a dangling parent
        """
        batch_ids = {post.id for post in posts}
        if len(batch_ids) != len(posts) or batch_ids & self._posts.keys():
            raise StructuralViolationError("Duplicate post id in batch")
        for post in posts:
            if post.parent_id is not None and not (
                post.parent_id in self._posts or post.parent_id in batch_ids
            ):
                raise StructuralViolationError(
                    f"Parent post {post.parent_id} does not exist"
                )

        for post in posts:
            self._posts[post.id] = post
        return list(posts)

    def forum_authors(self, forum: Slug) -> set[str]:
        """Lower-cased nicknames of the post authors of a forum."""
        return {p.author.key for p in self._posts.values() if p.forum.key == forum.key}

    def _thread_posts(self, thread_id: ThreadId) -> list[Post]:
        return [p for p in self._posts.values() if p.thread_id == thread_id]

    async def find_flat(
        self,
        thread_id: ThreadId,
        limit: Optional[int] = None,
        since: Optional[PostId] = None,
        desc: bool = False,
    ) -> list[Post]:
        """Find posts of a thread ordered by id."""
        posts = self._thread_posts(thread_id)

        if since is not None:
            if desc:
                posts = [p for p in posts if p.id < since]
            else:
                posts = [p for p in posts if p.id > since]

        posts.sort(key=lambda p: p.id, reverse=desc)
        return posts[:limit] if limit is not None else posts

    async def find_tree(
        self,
        thread_id: ThreadId,
        limit: Optional[int] = None,
        since: Optional[PostId] = None,
        desc: bool = False,
    ) -> list[Post]:
        """Find posts of a thread in depth-first order."""
        posts = self._thread_posts(thread_id)

        if since is not None:
            cursor = self._posts.get(since)
            if cursor is None:
                return []
            if desc:
                posts = [p for p in posts if p.path < cursor.path]
            else:
                posts = [p for p in posts if p.path > cursor.path]

        posts.sort(key=lambda p: (p.path.root, p.id), reverse=desc)
        return posts[:limit] if limit is not None else posts

    async def find_parent_tree(
        self,
        thread_id: ThreadId,
        limit: Optional[int] = None,
        since: Optional[PostId] = None,
        desc: bool = False,
    ) -> list[Post]:
        """Find whole branches of a thread, paginated by top-level post."""
        posts = self._thread_posts(thread_id)
        roots = [p.id for p in posts if p.is_root]

        if since is not None:
            cursor = self._posts.get(since)
            if cursor is None:
                return []
            branch = cursor.path.root_id
            if desc:
                roots = [r for r in roots if r < branch]
            else:
                roots = [r for r in roots if r > branch]

        roots.sort(reverse=desc)
        if limit is not None:
            roots = roots[:limit]

        rank = {root_id: position for position, root_id in enumerate(roots)}
        selected = [p for p in posts if p.path.root_id in rank]
        selected.sort(key=lambda p: (rank[p.path.root_id], p.path.root, p.id))
        return selected
