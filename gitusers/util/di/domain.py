"""Domain layer DI providers."""

from dishka import Scope, provide

from gitusers.config import IdentitySettings
from gitusers.domain.repository import UserRepository
from gitusers.domain.service import (
    CommitAuthorReconciler,
    GitProviderClient,
    GitUserResolver,
)
from gitusers.domain.value import provider_key
from gitusers.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_git_user_resolver(
        self,
        user_repository: UserRepository,
        git_provider: GitProviderClient,
        identity_settings: IdentitySettings,
    ) -> GitUserResolver:
        """Provide git user resolution domain service."""
        return GitUserResolver(
            user_repository=user_repository,
            git_provider=git_provider,
            label_prefix=identity_settings.label_prefix,
        )

    @provide
    def get_commit_author_reconciler(
        self,
        user_repository: UserRepository,
        git_provider: GitProviderClient,
        identity_settings: IdentitySettings,
    ) -> CommitAuthorReconciler:
        """Provide commit author reconciliation domain service."""
        return CommitAuthorReconciler(
            user_repository=user_repository,
            provider_key=provider_key(git_provider.kind, identity_settings.label_prefix),
        )
