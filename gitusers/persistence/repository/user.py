"""User repository implementation using PostgreSQL."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gitusers.domain.error import StoreUnavailableError, UserConflictError
from gitusers.domain.model.user import User
from gitusers.domain.repository.user import UserRepository
from gitusers.domain.value import Namespace, UserName
from gitusers.persistence.mappers import row_to_user, user_to_dict
from gitusers.persistence.tables import git_users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession, namespace: Namespace) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            namespace: Namespace all operations are scoped to
        """
        self.session = session
        self.namespace = namespace

    async def list(self, labels: Optional[dict[str, str]] = None) -> list[User]:
        """List users in the namespace, optionally filtered by labels.

        Args:
            labels: Label selector matched with JSONB containment

        Returns:
            Matching users ordered by name
        """
        stmt = select(git_users_table).where(
            git_users_table.c.namespace == self.namespace
        )
        if labels:
            stmt = stmt.where(git_users_table.c.labels.contains(labels))
        stmt = stmt.order_by(git_users_table.c.name)

        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"failed to list users: {e}") from e
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def get(self, name: UserName) -> Optional[User]:
        """Get user by name.

        Args:
            name: Record name to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(git_users_table).where(
            git_users_table.c.namespace == self.namespace,
            git_users_table.c.name == name,
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"failed to get user {name}: {e}") from e
        row = result.mappings().first()

        if not row:
            return None

        return row_to_user(dict(row))

    async def update(self, user: User) -> User:
        """Replace a stored user.

        Args:
            user: User to store

        Returns:
            Stored user
        """
        values = user_to_dict(user)
        # Identity of the row never changes
        values.pop("namespace")
        values.pop("name")
        stmt = (
            git_users_table.update()
            .where(
                git_users_table.c.namespace == self.namespace,
                git_users_table.c.name == user.name,
            )
            .values(**values)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"failed to update user {user.name}: {e}") from e

        if result.rowcount == 0:
            raise StoreUnavailableError(
                f"failed to update user {user.name}: not found in {self.namespace}"
            )
        return user

    async def create(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: User to insert

        Returns:
            Inserted user
        """
        values = user_to_dict(user)
        values["namespace"] = self.namespace
        stmt = git_users_table.insert().values(**values)
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            raise UserConflictError(user.name, self.namespace) from e
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"failed to create user {user.name}: {e}") from e
        return user.model_copy(update={"namespace": self.namespace})
