"""Async PostgreSQL engine and sessions for the identity store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from gitusers.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the identity store engine.

    Args:
        settings: Application settings with database URL and pool sizes

    Returns:
        Async engine
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory for request-scoped sessions.

    Repositories flush explicitly; the session is committed once per request.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
