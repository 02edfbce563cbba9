"""Git provider client interface."""

from typing import Literal

from gitusers.domain.value.common import ValueObject
from gitusers.domain.value.types import GitUser


class UserInfoFound(ValueObject):
    """The provider knows the login."""

    found: Literal[True] = True
    user: GitUser


class UserInfoNotFound(ValueObject):
    """The provider has no user with the login."""

    found: Literal[False] = False
    login: str


UserInfo = UserInfoFound | UserInfoNotFound


class GitProviderClient:
    """Generic git provider client interface for all provider kinds."""

    @property
    def kind(self) -> str:
        """Provider kind, e.g. "github"."""
        raise NotImplementedError

    async def user_info(self, login: str) -> UserInfo:
        """Look up the provider's current view of a login.

        Args:
            login: Login on the provider

        Returns:
            UserInfoFound with the provider's data, or UserInfoNotFound

        Raises:
            ProviderLookupFailedError: If the provider could not be queried
        """
        raise NotImplementedError
