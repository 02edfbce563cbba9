"""User response shared by the user use cases."""

from datetime import datetime

from pydantic import BaseModel

from gitusers.domain.model import User
from gitusers.domain.value import AccountReference


class UserResponse(BaseModel):
    """User record as returned to callers."""

    name: str
    namespace: str
    labels: dict[str, str]
    login: str
    display_name: str
    email: str
    url: str
    avatar_url: str
    accounts: list[AccountReference]
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """Build the response from a user record."""
        return cls(
            name=user.name,
            namespace=user.namespace,
            labels=dict(user.labels),
            login=user.spec.login,
            display_name=user.spec.name,
            email=user.spec.email,
            url=user.spec.url,
            avatar_url=user.spec.avatar_url,
            accounts=list(user.spec.accounts),
            updated_at=user.updated_at,
        )
