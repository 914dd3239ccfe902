"""Post entity.

Posts form reply trees inside a thread. Every post stores a materialized
path (see PostPath) that is computed once, when the post is inserted, and
never changes afterwards.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import Nickname, PostId, PostPath, Slug, ThreadId


class Post(DomainModel):
    """Post entity.

    Threading is managed through:
    - parent_id: Direct parent post (None for top-level posts)
    - path: Ancestor chain ending in the post's own id
    """

    id: PostId
    thread_id: ThreadId
    forum: Slug  # Denormalized from the thread
    author: Nickname
    message: str
    parent_id: Optional[PostId] = None
    path: PostPath
    is_edited: bool = False
    created_at: datetime

    @property
    def is_root(self) -> bool:
        """Whether the post starts a new branch of the thread."""
        return self.parent_id is None


class PostDraft(DomainModel):
    """A post submitted for creation, before it has an id or a path.

    A parent of 0 is accepted as "no parent".
    """

    author: str
    message: str
    parent_id: Optional[PostId] = Field(default=None)

    @field_validator("parent_id")
    @classmethod
    def zero_means_root(cls, v: Optional[int]) -> Optional[int]:
        """Normalize the 0 parent reference to None."""
        return v or None
