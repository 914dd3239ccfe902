"""Status use cases."""

from .get_status import GetStatusResponse, GetStatusUseCase

__all__ = ["GetStatusResponse", "GetStatusUseCase"]
