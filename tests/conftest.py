"""Test configuration and fixtures."""

import pytest

from gitusers.adapter.github import MockGitHubClient
from gitusers.domain.service import CommitAuthorReconciler, GitUserResolver
from tests.doubles import GITHUB_KEY, RecordingUserRepository


@pytest.fixture
def user_repo() -> RecordingUserRepository:
    """Empty recording repository in namespace jx."""
    return RecordingUserRepository()


@pytest.fixture
def github() -> MockGitHubClient:
    """Mock GitHub client with no known users."""
    return MockGitHubClient()


@pytest.fixture
def resolver(user_repo, github) -> GitUserResolver:
    """Resolver wired to the recording repository and mock GitHub."""
    return GitUserResolver(user_repo, github, label_prefix="gitusers.io")


@pytest.fixture
def reconciler(user_repo) -> CommitAuthorReconciler:
    """Reconciler wired to the recording repository."""
    return CommitAuthorReconciler(user_repo, provider_key=GITHUB_KEY)
