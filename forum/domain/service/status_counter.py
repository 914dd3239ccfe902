"""Process-wide activity counters."""

from forum.domain.model.status import Status

from .base import Service


class StatusCounter(Service):
    """Approximate counters for status reporting.

    One instance lives for the whole process. Increments are not
    synchronized; under concurrent writers the numbers may drift, so they are
    for diagnostics only and never feed any other decision.
    """

    def __init__(self) -> None:
        self._posts = 0

    def increment_posts(self, count: int = 1) -> None:
        """Record newly created posts."""
        self._posts += count

    def snapshot(self) -> Status:
        """Current counter values."""
        return Status(posts=self._posts)

