"""Domain model entities for git identity resolution."""

from gitusers.domain.model.user import User, UserDetails

__all__ = [
    "User",
    "UserDetails",
]
