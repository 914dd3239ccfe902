"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Collection, Dict, List, Optional

from pydantic import Field

from forum.domain.model.post import Post
from forum.domain.value import PostId, PostSort, ThreadId
from forum.domain.value.common import ValueObject


class PostPage(ValueObject):
    """Pagination window over the posts of a thread.

    since is an exclusive cursor: the id of the last post the caller has
    already seen. limit counts posts, except in parent_tree mode where it
    counts top-level branches.
    """

    sort: PostSort = PostSort.FLAT
    limit: Optional[int] = Field(default=None, ge=0)
    since: Optional[PostId] = None
    desc: bool = False


class PostRepository(ABC):
    """Repository for Post entity.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: Collection[PostId]) -> Dict[PostId, Post]:
        """Find several posts at once.

        Args:
            post_ids: Post identifiers

        Returns:
            Found posts keyed by id; unknown ids are absent
        """
        pass

    @abstractmethod
    async def reserve_ids(self, count: int) -> List[PostId]:
        """Allocate identifiers for posts about to be inserted.

        Identifiers are increasing in the returned order, so a batch keeps
        its submission order when listed by id.

        Args:
            count: Number of identifiers

        Returns:
            Fresh post identifiers
        """
        pass

    @abstractmethod
    async def insert_batch(self, posts: List[Post]) -> List[Post]:
        """Insert posts, ids and paths included, as one statement.

        Args:
            posts: Fully built posts

        Returns:
            The inserted posts in the given order

        Raises:
            StructuralViolationError: If the batch violates a constraint
        """
        pass

    @abstractmethod
    async def find_flat(
        self,
        thread_id: ThreadId,
        limit: Optional[int] = None,
        since: Optional[PostId] = None,
        desc: bool = False,
    ) -> List[Post]:
        """Find posts of a thread ordered by id.

        Args:
            thread_id: Thread identifier
            limit: Maximum number of posts (None for all)
            since: Only posts with a greater id (smaller when desc)
            desc: Order by id descending

        Returns:
            Posts in id order
        """
        pass

    @abstractmethod
    async def find_tree(
        self,
        thread_id: ThreadId,
        limit: Optional[int] = None,
        since: Optional[PostId] = None,
        desc: bool = False,
    ) -> List[Post]:
        """Find posts of a thread in depth-first order.

        Posts are ordered by (path, id). With a cursor, only posts whose path
        is strictly after (before when desc) the cursor post's path are
        returned; an unknown cursor matches nothing.

        Args:
            thread_id: Thread identifier
            limit: Maximum number of posts (None for all)
            since: Cursor post id
            desc: Reverse depth-first order

        Returns:
            Posts in tree order
        """
        pass

    @abstractmethod
    async def find_parent_tree(
        self,
        thread_id: ThreadId,
        limit: Optional[int] = None,
        since: Optional[PostId] = None,
        desc: bool = False,
    ) -> List[Post]:
        """Find whole branches of a thread, paginated by top-level post.

        Top-level posts are ordered by id and windowed by limit and by the
        cursor's branch id. Every selected branch is returned complete,
        branches ordered by root id (descending when desc) and each branch
        in ascending path order.

        Args:
            thread_id: Thread identifier
            limit: Maximum number of branches (None for all)
            since: Cursor post id; its branch and the branches before it
                are skipped
            desc: Newest branches first

        Returns:
            Posts of the selected branches
        """
        pass
