"""Async engine and session factory for PostgreSQL (asyncpg driver)."""

from typing import Optional

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from club.application.transaction import RequestTransaction
from club.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    SQL is echoed when ``DEBUG`` is on; pool size comes from
    ``DATABASE__POOL_SIZE`` and ``DATABASE__MAX_OVERFLOW``.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Entities are mapped to pydantic models right after each query, so
    # nothing relies on lazy refresh after commit.
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


async def finish_session(
    session: AsyncSession,
    transaction: RequestTransaction,
    error: Optional[BaseException] = None,
) -> bool:
    """Commit or roll back the request session.

    Args:
        session: Session opened for the request
        transaction: Failure flag set by the error handlers
        error: Exception the request scope closed with, if any

    Returns:
        True if the session was committed
    """
    if error is not None:
        transaction.mark_failed(type(error).__name__)

    if transaction.failed:
        await session.rollback()
        logfire.warn("Request transaction rolled back", reason=transaction.failure)
        return False

    await session.commit()
    return True
