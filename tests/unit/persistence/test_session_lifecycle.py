"""Unit tests for the request session commit/rollback decision."""

from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from dishka import Provider, Scope, make_async_container, provide
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from club.application.transaction import RequestTransaction
from club.domain.error import NotFoundError
from club.persistence.database import finish_session
from club.util.di import ProdConfigProvider, ProdPersistenceProvider


class RecordingSession:
    """Stands in for ``AsyncSession``; records how the request ended."""

    def __init__(self, log: list[str]) -> None:
        self.log = log

    async def commit(self) -> None:
        self.log.append("commit")

    async def rollback(self) -> None:
        self.log.append("rollback")


class RecordingSessionProvider(Provider):
    """Replaces the engine-backed session factory."""

    def __init__(self, log: list[str]) -> None:
        super().__init__()
        self.log = log

    @provide(scope=Scope.APP)
    def get_session_factory(self) -> async_sessionmaker[AsyncSession]:
        log = self.log

        @asynccontextmanager
        async def open_session():
            yield RecordingSession(log)

        return open_session

    @provide(scope=Scope.REQUEST)
    def get_transaction(self) -> RequestTransaction:
        return RequestTransaction()


@pytest.fixture
def log() -> list[str]:
    return []


@pytest_asyncio.fixture
async def container(log):
    container = make_async_container(
        ProdConfigProvider(),
        ProdPersistenceProvider(),
        RecordingSessionProvider(log),
    )
    yield container
    await container.close()


class TestFinishSession:
    """The decision itself."""

    @pytest.mark.asyncio
    async def test_commits_clean_request(self, log):
        committed = await finish_session(RecordingSession(log), RequestTransaction())

        assert committed
        assert log == ["commit"]

    @pytest.mark.asyncio
    async def test_rolls_back_handled_error(self, log):
        transaction = RequestTransaction()
        transaction.mark_failed(NotFoundError.code)

        committed = await finish_session(RecordingSession(log), transaction)

        assert not committed
        assert log == ["rollback"]

    @pytest.mark.asyncio
    async def test_rolls_back_propagated_error(self, log):
        transaction = RequestTransaction()

        await finish_session(RecordingSession(log), transaction, RuntimeError("boom"))

        assert log == ["rollback"]
        assert transaction.failure == "RuntimeError"


class TestRequestScope:
    """Session provider wired through the container."""

    @pytest.mark.asyncio
    async def test_clean_scope_commits(self, container, log):
        async with container() as request_container:
            await request_container.get(AsyncSession)

        assert log == ["commit"]

    @pytest.mark.asyncio
    async def test_handled_error_rolls_back(self, container, log):
        async with container() as request_container:
            await request_container.get(AsyncSession)
            transaction = await request_container.get(RequestTransaction)
            transaction.mark_failed("NotFound")

        assert log == ["rollback"]

    @pytest.mark.asyncio
    async def test_exception_through_scope_rolls_back(self, container, log):
        with pytest.raises(RuntimeError):
            async with container() as request_container:
                await request_container.get(AsyncSession)
                raise RuntimeError("write failed")

        assert log == ["rollback"]
