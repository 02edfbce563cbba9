"""Repository interfaces for the domain layer."""

from gitusers.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
]
