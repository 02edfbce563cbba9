"""User aggregate root.

A user is the canonical identity of one contributor. External git accounts
are linked to it through account references, and labels act as a secondary
index for fast lookup by provider login.
"""

from datetime import datetime

from pydantic import Field

from gitusers.domain.model.common import DomainModel
from gitusers.domain.value import AccountReference, Namespace, UserName


class UserDetails(DomainModel):
    """Descriptive part of a user record."""

    login: str = ""  # Login the record was created from
    name: str = ""  # Display name
    email: str = ""
    url: str = ""
    avatar_url: str = ""
    accounts: list[AccountReference] = Field(default_factory=list)


class User(DomainModel):
    """User aggregate root - provider-agnostic.

    One record per real person. A record may link accounts on several
    git providers, at most one per provider.
    """

    name: UserName
    namespace: Namespace
    labels: dict[str, str] = Field(default_factory=dict)
    spec: UserDetails = Field(default_factory=UserDetails)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def account_id(self, provider: str) -> str | None:
        """Return the linked account id for a provider, if any."""
        for account in self.spec.accounts:
            if account.provider == provider:
                return account.id
        return None

    def has_account(self, provider: str, account_id: str) -> bool:
        """Check whether this user links the given provider account."""
        return any(
            a.provider == provider and a.id == account_id for a in self.spec.accounts
        )
