"""User use cases."""

from .backfill_author_email import BackfillAuthorEmailUseCase
from .get_user import GetUserUseCase
from .resolve_git_user import ResolveGitUserUseCase

__all__ = ["BackfillAuthorEmailUseCase", "GetUserUseCase", "ResolveGitUserUseCase"]
