"""Domain services for git identity resolution."""

from .base import Service
from .git_provider import (
    GitProviderClient,
    UserInfo,
    UserInfoFound,
    UserInfoNotFound,
)
from .merge import merge_git_users
from .reconciler import CommitAuthorReconciler
from .resolver import GitUserResolver, Hit, Miss, StageResult

__all__ = [
    "Service",
    "GitProviderClient",
    "UserInfo",
    "UserInfoFound",
    "UserInfoNotFound",
    "merge_git_users",
    "CommitAuthorReconciler",
    "GitUserResolver",
    "Hit",
    "Miss",
    "StageResult",
]
