"""User entity.

Users are identified by nickname everywhere in the forum: posts, threads and
votes reference them by nickname rather than by numeric id.
"""

from typing import Optional

from forum.domain.model.common import DomainModel
from forum.domain.value import Nickname, UserId


class User(DomainModel):
    """Forum member."""

    id: UserId
    nickname: Nickname
    fullname: str
    email: str
    about: Optional[str] = None
