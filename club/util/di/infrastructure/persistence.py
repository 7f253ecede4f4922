"""PostgreSQL persistence providers."""

from collections.abc import AsyncGenerator, AsyncIterator
from typing import Optional

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from club.application.transaction import RequestTransaction
from club.config import Settings
from club.domain.repository import (
    CommentRepository,
    PostRepository,
    ProjectRepository,
    TagRepository,
    UserRepository,
)
from club.persistence.database import (
    create_engine,
    create_session_factory,
    finish_session,
)
from club.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresProjectRepository,
    PostgresTagRepository,
    PostgresUserRepository,
)
from club.util.di.base import ProviderBase
from club.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories backed by one SQLAlchemy session per request."""

    __is_mock__ = False

    users = provide(
        PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST
    )
    tags = provide(PostgresTagRepository, provides=TagRepository, scope=Scope.REQUEST)
    posts = provide(
        PostgresPostRepository, provides=PostRepository, scope=Scope.REQUEST
    )
    projects = provide(
        PostgresProjectRepository, provides=ProjectRepository, scope=Scope.REQUEST
    )
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Engine shared by the process; disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        transaction: RequestTransaction,
    ) -> AsyncGenerator[AsyncSession, Optional[BaseException]]:
        """Request-scoped unit of work.

        Dishka sends the exception the request scope closed with, if any,
        back into this generator. Errors already turned into responses are
        recorded on ``transaction`` by the API error handlers. Either one
        rolls the session back; otherwise it commits.
        """
        async with session_factory() as session:
            error = yield session
            await finish_session(session, transaction, error)
