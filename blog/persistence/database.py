"""Engine and session helpers.

The same helpers serve PostgreSQL (asyncpg) in production and SQLite
(aiosqlite) in tests.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blog.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine described by ``settings.database``.

    SQL is echoed in debug mode. Pooled connections are pinged before use
    so a restarted database doesn't fail the first request.
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
    """Session factory whose sessions keep loaded rows usable after commit."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def session_scope(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Session that commits on success and rolls back on error.

    A whole cascade delete runs inside one session, so on PostgreSQL it
    either commits completely or not at all. Domain events raised during
    the session are already published when the commit runs and are not
    retracted on rollback.

    Args:
        session_factory: Factory for creating sessions

    Yields:
        Database session
    """
    async with session_factory() as session:
        try:
            yield session
        except Exception as e:
            await session.rollback()
            logfire.warn("Session rolled back", error=str(e))
            raise
        await session.commit()
