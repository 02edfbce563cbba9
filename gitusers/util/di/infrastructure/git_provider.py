"""Git provider infrastructure providers."""

from dishka import Scope, provide

from gitusers.adapter.github import RealGitHubClient
from gitusers.config import GitProviderSettings
from gitusers.domain.service import GitProviderClient
from gitusers.util.di.base import ProviderBase
from gitusers.util.error import ConfigurationError


class GitProviderProvider(ProviderBase):
    """Git provider component base."""

    __mock_component__ = "git_provider"


class ProdGitProviderProvider(GitProviderProvider):
    """Production git provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_git_provider_client(
        self, git_provider_settings: GitProviderSettings
    ) -> GitProviderClient:
        """Provide the git provider client for the configured kind.

        Raises:
            ConfigurationError: If the provider kind is not supported
        """
        if git_provider_settings.kind != "github":
            raise ConfigurationError(
                f"Unsupported git provider kind: {git_provider_settings.kind}"
            )

        return RealGitHubClient(
            api_url=git_provider_settings.api_url,
            token=git_provider_settings.token,
            timeout=git_provider_settings.timeout,
        )
