"""Service status snapshot."""

from forum.domain.model.common import DomainModel


class Status(DomainModel):
    """Approximate activity counters of the running process."""

    posts: int = 0
