"""Get user use case."""

from pydantic import BaseModel

from gitusers.application.usecase.base import BaseUseCase
from gitusers.application.usecase.user.response import UserResponse
from gitusers.domain.repository import UserRepository
from gitusers.domain.value import UserName


class GetUserRequest(BaseModel):
    """Get user request."""

    name: str


class GetUserUseCase(BaseUseCase):
    """Use case for reading one user record."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: GetUserRequest) -> UserResponse | None:
        """Return the user, or None if it does not exist."""
        user = await self.user_repository.get(UserName(request.name))
        if user is None:
            return None
        return UserResponse.from_user(user)
