"""Thread entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import Nickname, Slug, ThreadId


class Thread(DomainModel):
    """Discussion thread inside a forum.

    votes is the sum of all vote voices cast on the thread, recomputed by the
    vote service after every vote.
    """

    id: ThreadId
    slug: Optional[Slug] = None
    forum: Slug
    author: Nickname
    title: str
    message: str
    votes: int = 0
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
