"""Forum entity."""

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import ForumId, Nickname, Slug


class Forum(DomainModel):
    """Top-level container of threads.

    The posts and threads counters are denormalized and maintained by the
    writers of posts and threads.
    """

    id: ForumId
    slug: Slug
    title: str
    user: Nickname  # Owner
    posts: int = Field(default=0, ge=0)
    threads: int = Field(default=0, ge=0)
