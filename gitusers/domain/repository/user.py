"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from gitusers.domain.model.user import User
from gitusers.domain.value import Namespace, UserName


class UserRepository(ABC):
    """Repository for User records in a single namespace.

    Implementations raise StoreUnavailableError for any I/O failure so the
    caller never has to know which backend it talks to.
    """

    namespace: Namespace

    @abstractmethod
    async def list(self, labels: Optional[dict[str, str]] = None) -> list[User]:
        """List users, optionally filtered by label.

        Args:
            labels: Label selector; every entry must match exactly.
                None lists every user in the namespace.

        Returns:
            Matching users (may be empty)
        """
        pass

    @abstractmethod
    async def get(self, name: UserName) -> Optional[User]:
        """Get a user by name.

        Args:
            name: The user's record name

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Replace an existing user.

        Args:
            user: The user to store

        Returns:
            The stored user
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user.

        Args:
            user: The user to create

        Returns:
            The created user

        Raises:
            UserConflictError: If a user with the same name exists
        """
        pass
