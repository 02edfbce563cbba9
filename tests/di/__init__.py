"""Mock providers for testing."""

from .git_provider import MockGitProviderProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockGitProviderProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
