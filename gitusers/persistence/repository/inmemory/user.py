"""In-memory user repository for testing."""

from typing import Optional

from gitusers.domain.error import StoreUnavailableError, UserConflictError
from gitusers.domain.model.user import User
from gitusers.domain.repository.user import UserRepository
from gitusers.domain.value import Namespace, UserName


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, namespace: Namespace = Namespace("jx")) -> None:
        self.namespace = namespace
        self._users: list[User] = []

    async def list(self, labels: Optional[dict[str, str]] = None) -> list[User]:
        """List users matching every label in the selector."""
        selector = labels or {}
        return [
            user
            for user in self._users
            if all(user.labels.get(k) == v for k, v in selector.items())
        ]

    async def get(self, name: UserName) -> Optional[User]:
        """Get user by name."""
        for user in self._users:
            if user.name == name:
                return user
        return None

    async def update(self, user: User) -> User:
        """Replace a stored user."""
        for i, existing in enumerate(self._users):
            if existing.name == user.name:
                self._users[i] = user
                return user
        raise StoreUnavailableError(
            f"failed to update user {user.name}: not found in {self.namespace}"
        )

    async def create(self, user: User) -> User:
        """Store a new user."""
        if any(existing.name == user.name for existing in self._users):
            raise UserConflictError(user.name, self.namespace)
        user = user.model_copy(update={"namespace": self.namespace})
        self._users.append(user)
        return user
