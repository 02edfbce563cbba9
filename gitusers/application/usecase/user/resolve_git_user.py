"""Resolve git user use case."""

from pydantic import BaseModel

from gitusers.application.usecase.base import BaseUseCase
from gitusers.application.usecase.user.response import UserResponse
from gitusers.domain.service import GitUserResolver
from gitusers.domain.value import GitUser


class ResolveGitUserRequest(BaseModel):
    """Resolve git user request."""

    login: str | None = None
    name: str | None = None
    email: str | None = None
    url: str | None = None
    avatar_url: str | None = None


class ResolveGitUserUseCase(BaseUseCase):
    """Use case for turning an observed git identity into a user record."""

    def __init__(self, git_user_resolver: GitUserResolver) -> None:
        """Initialize resolve git user use case.

        Args:
            git_user_resolver: Git user resolution domain service
        """
        self.git_user_resolver = git_user_resolver

    async def execute(self, request: ResolveGitUserRequest) -> UserResponse:
        """Execute resolve git user flow.

        Args:
            request: Observed git identity

        Returns:
            The matching or newly created user

        Raises:
            InvalidInputError: If every field of the request is empty
            AmbiguousIdentityError: If more than one user matches
        """
        git_user = GitUser(**request.model_dump())
        user = await self.git_user_resolver.resolve(git_user)
        return UserResponse.from_user(user)
