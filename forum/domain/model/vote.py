"""Vote entity.

One vote per user per thread. Voting again replaces the previous voice.
"""

from forum.domain.model.common import DomainModel
from forum.domain.value import Nickname, ThreadId, Voice


class Vote(DomainModel):
    """A user's voice on a thread."""

    nickname: Nickname
    thread_id: ThreadId
    voice: Voice
