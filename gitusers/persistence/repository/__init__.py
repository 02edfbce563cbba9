"""PostgreSQL repository implementations."""

from gitusers.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
]
