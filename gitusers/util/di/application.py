"""Application layer DI providers."""

from dishka import Scope, provide

from gitusers.application.usecase.user import (
    BackfillAuthorEmailUseCase,
    GetUserUseCase,
    ResolveGitUserUseCase,
)
from gitusers.domain.repository import UserRepository
from gitusers.domain.service import CommitAuthorReconciler, GitUserResolver
from gitusers.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_resolve_git_user_use_case(
        self, git_user_resolver: GitUserResolver
    ) -> ResolveGitUserUseCase:
        """Provide resolve git user use case."""
        return ResolveGitUserUseCase(git_user_resolver=git_user_resolver)

    @provide(scope=Scope.REQUEST)
    def get_backfill_author_email_use_case(
        self,
        commit_author_reconciler: CommitAuthorReconciler,
        user_repository: UserRepository,
    ) -> BackfillAuthorEmailUseCase:
        """Provide backfill author email use case."""
        return BackfillAuthorEmailUseCase(
            commit_author_reconciler=commit_author_reconciler,
            user_repository=user_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_repository: UserRepository) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_repository=user_repository)
