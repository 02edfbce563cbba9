"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from gitusers.config import GitProviderSettings, IdentitySettings, Settings
from gitusers.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_identity_settings(self, settings: Settings) -> IdentitySettings:
        """Provide identity store settings."""
        return settings.identity

    @provide(scope=Scope.APP)
    def provide_git_provider_settings(self, settings: Settings) -> GitProviderSettings:
        """Provide git provider settings."""
        return settings.git_provider
