"""Unit tests for the request-scoped session of ProdPersistenceProvider."""

import pytest
from dishka import Scope, make_async_container, provide
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from forum.util.di import ProdConfigProvider
from forum.util.di.infrastructure import ProdPersistenceProvider


class RecordingSession:
    """Stands in for AsyncSession and records transaction calls."""

    def __init__(self, calls: list[str]) -> None:
        self.calls = calls

    async def __aenter__(self) -> "RecordingSession":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.calls.append("close")

    async def commit(self) -> None:
        self.calls.append("commit")

    async def rollback(self) -> None:
        self.calls.append("rollback")


def _build_container(calls: list[str]):
    """Production persistence wiring with the session factory swapped out."""

    class RecordingPersistenceProvider(ProdPersistenceProvider):
        @provide(scope=Scope.APP)
        def get_session_factory(self) -> async_sessionmaker[AsyncSession]:
            return lambda: RecordingSession(calls)

    return make_async_container(ProdConfigProvider(), RecordingPersistenceProvider())


class TestRequestSession:
    """Tests for the commit/rollback decision at request scope exit."""

    @pytest.mark.asyncio
    async def test_clean_exit_commits(self):
        # Arrange
        calls: list[str] = []
        container = _build_container(calls)

        # Act
        async with container() as request_container:
            await request_container.get(AsyncSession)

        await container.close()

        # Assert
        assert calls == ["commit", "close"]

    @pytest.mark.asyncio
    async def test_exception_rolls_back(self):
        """A failure inside the request must not commit partial writes."""
        # Arrange
        calls: list[str] = []
        container = _build_container(calls)

        # Act
        with pytest.raises(RuntimeError):
            async with container() as request_container:
                await request_container.get(AsyncSession)
                raise RuntimeError("insert went wrong")

        await container.close()

        # Assert
        assert calls == ["rollback", "close"]
