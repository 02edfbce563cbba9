"""Backfill pull request author email use case."""

from pydantic import BaseModel, Field

from gitusers.application.usecase.base import BaseUseCase
from gitusers.application.usecase.user.response import UserResponse
from gitusers.domain.error import NotFoundError
from gitusers.domain.repository import UserRepository
from gitusers.domain.service import CommitAuthorReconciler
from gitusers.domain.value import GitCommit, GitPullRequest, UserName


class BackfillAuthorEmailRequest(BaseModel):
    """Backfill author email request."""

    user_name: str
    pull_request: GitPullRequest | None = None
    commits: list[GitCommit] = Field(default_factory=list)


class BackfillAuthorEmailUseCase(BaseUseCase):
    """Use case for completing a pull request author's email from commits."""

    def __init__(
        self,
        commit_author_reconciler: CommitAuthorReconciler,
        user_repository: UserRepository,
    ) -> None:
        """Initialize backfill author email use case.

        Args:
            commit_author_reconciler: Commit author reconciliation service
            user_repository: Identity store
        """
        self.commit_author_reconciler = commit_author_reconciler
        self.user_repository = user_repository

    async def execute(self, request: BackfillAuthorEmailRequest) -> UserResponse:
        """Execute backfill flow.

        Steps:
        1. Load the pull request author's user record
        2. Copy the email of the first commit the author made

        Raises:
            NotFoundError: If the user does not exist
        """
        user = await self.user_repository.get(UserName(request.user_name))
        if user is None:
            raise NotFoundError("User", request.user_name)

        updated = await self.commit_author_reconciler.backfill_email_from_commits(
            user, request.pull_request, request.commits
        )
        return UserResponse.from_user(updated)
