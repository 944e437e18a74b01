"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from forum.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    SQL echo follows ``settings.debug``. Connections are pinged on checkout
    so that a restarted database doesn't surface as request errors.

    Args:
        settings: Application settings

    Returns:
        Async engine sized from ``settings.database``
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory for per-request sessions.

    Sessions never autoflush and keep attributes loaded after commit;
    repositories flush explicitly when they need generated values.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
