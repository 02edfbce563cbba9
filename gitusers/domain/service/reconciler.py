"""Commit author reconciliation domain service."""

from typing import Iterable, Optional

import logfire

from gitusers.domain.model.user import User
from gitusers.domain.repository.user import UserRepository
from gitusers.domain.service.base import Service
from gitusers.domain.service.conversion import git_user_login, with_email
from gitusers.domain.value import GitCommit, GitPullRequest


class CommitAuthorReconciler(Service):
    """Backfills user details from commit metadata.

    Pull request author metadata often lacks an email address while the
    commits in the pull request carry one.
    """

    def __init__(self, user_repository: UserRepository, provider_key: str) -> None:
        """Initialize commit author reconciler.

        Args:
            user_repository: Identity store for the target namespace
            provider_key: Provider key of the git provider the commits come from
        """
        self.user_repository = user_repository
        self.provider_key = provider_key

    async def backfill_email_from_commits(
        self,
        user: Optional[User],
        pull_request: Optional[GitPullRequest],
        commits: Iterable[GitCommit],
    ) -> Optional[User]:
        """Copy the email of the first commit authored by the user.

        Args:
            user: Resolved pull request author
            pull_request: Pull request the commits belong to
            commits: Commits of the pull request, in order

        Returns:
            The updated user, or the given user unchanged when nothing matched
        """
        if pull_request is None or user is None:
            return user

        login = git_user_login(user, self.provider_key) or user.spec.login
        if not login:
            return user

        for commit in commits:
            if commit.author is not None and commit.author.login == login:
                logfire.info(
                    "Found commit author match",
                    user=user.name,
                    login=login,
                    email=commit.author.email,
                    sha=commit.sha,
                )
                return await self.user_repository.update(
                    with_email(user, commit.author.email)
                )
        return user
