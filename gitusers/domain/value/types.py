"""Domain value objects for git identity resolution.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and the small pieces of logic that
only depend on their own fields.
"""

import re
from collections.abc import Collection
from uuid import uuid4

from pydantic import Field, field_validator

from gitusers.domain.value.common import ValueObject
from gitusers.domain.value.identifiers import UserName

# DNS-1123 label rules used by the identity store for record names
_INVALID_NAME_CHARS = re.compile(r"[^a-z0-9-]+")
_MAX_NAME_LENGTH = 63


def provider_key(kind: str, prefix: str) -> str:
    """Build the label / account provider key for a git provider kind.

    The same string is used as the label name on identity records and as the
    ``provider`` of their account references.

    Args:
        kind: Git provider kind (e.g. "github", "gitlab")
        prefix: Label prefix owned by this service (e.g. "gitusers.io")

    Returns:
        Provider key, e.g. "gitusers.io/git-github-userid"
    """
    return f"{prefix}/git-{kind}-userid"


class AccountReference(ValueObject):
    """Link from an identity record to one external account."""

    provider: str
    id: str


class GitUser(ValueObject):
    """A partial identity observed from a git provider.

    Any field may be empty; an empty string means "unknown".
    """

    login: str = ""
    name: str = ""
    email: str = ""
    url: str = ""
    avatar_url: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def none_as_empty(cls, v: str | None) -> str:
        """Treat missing values the same as empty strings."""
        return "" if v is None else v

    @property
    def is_empty(self) -> bool:
        """True when no field carries any information."""
        return not any(
            (self.login, self.name, self.email, self.url, self.avatar_url)
        )


class GitSignature(ValueObject):
    """Author or committer signature recorded on a commit."""

    name: str = ""
    email: str = ""


class GitCommit(ValueObject):
    """Commit metadata as reported by a git provider."""

    sha: str = ""
    message: str = ""
    author: GitUser | None = None
    committer: GitUser | None = None


class GitPullRequest(ValueObject):
    """Pull request metadata as reported by a git provider."""

    owner: str = ""
    repo: str = ""
    number: int | None = None
    title: str = ""
    url: str = ""
    author: GitUser | None = None
    labels: list[str] = Field(default_factory=list)


def _base_name(git_user: GitUser) -> str:
    for candidate in (git_user.login, git_user.email.split("@")[0]):
        name = _INVALID_NAME_CHARS.sub("-", candidate.lower()).strip("-")
        name = name[:_MAX_NAME_LENGTH].rstrip("-")
        if name:
            return name
    return f"user-{uuid4().hex[:8]}"


def user_name_for(git_user: GitUser, taken: Collection[str] = ()) -> UserName:
    """Derive a free store name for a new identity record.

    Prefers the login, then the local part of the email address. Falls back to
    a random name when neither yields a valid identifier. Different identities
    can map to the same base name (``Bob-`` and ``bob``, or login ``bob`` and
    email ``bob@corp.io``), so names already taken get a numeric suffix.

    Args:
        git_user: Fragment the record is created from
        taken: Names of the records already in the namespace

    Returns:
        Valid record name not in ``taken``
    """
    base = _base_name(git_user)
    if base not in taken:
        return UserName(base)

    n = 2
    while True:
        suffix = f"-{n}"
        name = base[: _MAX_NAME_LENGTH - len(suffix)].rstrip("-") + suffix
        if name not in taken:
            return UserName(name)
        n += 1
