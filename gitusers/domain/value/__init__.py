"""Domain value objects for git identity resolution."""

from gitusers.domain.value.identifiers import Namespace, UserName
from gitusers.domain.value.types import (
    AccountReference,
    GitCommit,
    GitPullRequest,
    GitSignature,
    GitUser,
    provider_key,
    user_name_for,
)

__all__ = [
    # Identifiers
    "UserName",
    "Namespace",
    # Types
    "AccountReference",
    "GitUser",
    "GitSignature",
    "GitCommit",
    "GitPullRequest",
    # Helpers
    "provider_key",
    "user_name_for",
]
