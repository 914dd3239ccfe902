"""Get status use case."""

from pydantic import BaseModel

from forum.domain.service import StatusCounter


class GetStatusResponse(BaseModel):
    """Approximate service counters."""

    post: int


class GetStatusUseCase:
    """Use case for reading the service status counters."""

    def __init__(self, status_counter: StatusCounter) -> None:
        self.status_counter = status_counter

    async def execute(self) -> GetStatusResponse:
        """Execute get status flow."""
        status = self.status_counter.snapshot()
        return GetStatusResponse(post=status.posts)
