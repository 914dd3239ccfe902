"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from forum.config import PostSettings, Settings
from forum.domain.service import StatusCounter
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_post_settings(self, settings: Settings) -> PostSettings:
        """Provide post writing limits."""
        return settings.posts

    @provide(scope=Scope.APP)
    def provide_status_counter(self) -> StatusCounter:
        """Provide the process-wide status counters."""
        return StatusCounter()
