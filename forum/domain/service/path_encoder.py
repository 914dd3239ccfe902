"""Materialized path assignment for new posts."""

from typing import Mapping, Optional

import logfire

from forum.domain.error import StructuralViolationError
from forum.domain.model.post import Post
from forum.domain.value import PostId, PostPath, ThreadId

from .base import Service


class PathEncoder(Service):
    """Computes the materialized path of a post from its parent.

    Paths are encoded in two steps. The parent is resolved while the batch is
    validated, before any identifier exists; the path itself is encoded once
    the post has its final id, so a stored path never contains a provisional
    value.
    """

    def resolve_parent(
        self,
        thread_id: ThreadId,
        parent_id: Optional[PostId],
        parents: Mapping[PostId, Post],
    ) -> Optional[Post]:
        """Find the parent of a new post and check it lives in the same thread.

        Args:
            thread_id: Thread receiving the new post
            parent_id: Declared parent (None for a top-level post)
            parents: Candidate parents keyed by id

        Returns:
            The parent post, None for a top-level post

        Raises:
            StructuralViolationError: If the parent does not exist or belongs
                to another thread
        """
        if parent_id is None:
            return None

        parent = parents.get(parent_id)
        if parent is None:
            logfire.warn(
                "Parent post not found",
                parent_id=parent_id,
                thread_id=thread_id,
            )
            raise StructuralViolationError(f"Parent post {parent_id} does not exist")
        if parent.thread_id != thread_id:
            logfire.warn(
                "Parent post belongs to another thread",
                parent_id=parent_id,
                parent_thread_id=parent.thread_id,
                thread_id=thread_id,
            )
            raise StructuralViolationError(
                f"Parent post {parent_id} does not belong to thread {thread_id}"
            )
        return parent

    def encode(self, post_id: PostId, parent: Optional[Post]) -> PostPath:
        """Build the path of a post from its resolved parent.

        Args:
            post_id: Final identifier of the new post
            parent: Parent returned by resolve_parent

        Returns:
            The parent's path extended with post_id, or [post_id] for a
            top-level post
        """
        if parent is None:
            return PostPath.for_root(post_id)
        return parent.path.child(post_id)
