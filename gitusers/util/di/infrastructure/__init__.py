"""Infrastructure providers."""

# Import bases
from .git_provider import GitProviderProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .git_provider import ProdGitProviderProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "GitProviderProvider",
    "PersistenceProvider",
    "ProdGitProviderProvider",
    "ProdPersistenceProvider",
]
