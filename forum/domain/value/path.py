"""Materialized path of a post.

A path is the chain of post ids from the top-level post of a branch down to
the post itself. Comparing two paths element by element, with a prefix sorting
before any of its extensions, yields depth-first order: every post comes right
after its parent and before its parent's next sibling.
"""

from pydantic import field_validator

from forum.domain.value.common import RootValueObject
from forum.domain.value.identifiers import PostId


class PostPath(RootValueObject[tuple[int, ...]]):
    """Ordered ancestor chain of a post, ending in the post's own id."""

    @field_validator("root")
    @classmethod
    def validate_not_empty(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """A path always holds at least the post's own id."""
        if not v:
            raise ValueError("Path must contain at least one post id")
        return v

    @classmethod
    def for_root(cls, post_id: PostId) -> "PostPath":
        """Path of a top-level post."""
        return cls((post_id,))

    def child(self, post_id: PostId) -> "PostPath":
        """Path of a direct reply to the post owning this path."""
        return PostPath(self.root + (post_id,))

    @property
    def root_id(self) -> PostId:
        """Id of the top-level post of the branch."""
        return PostId(self.root[0])

    def __lt__(self, other: "PostPath") -> bool:
        return self.root < other.root

    def __le__(self, other: "PostPath") -> bool:
        return self.root <= other.root

    def __gt__(self, other: "PostPath") -> bool:
        return self.root > other.root

    def __ge__(self, other: "PostPath") -> bool:
        return self.root >= other.root
