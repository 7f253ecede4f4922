"""Test harness for unit, integration and E2E tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import pytest_asyncio
from dishka.integrations.fastapi import FastapiProvider
from httpx import ASGITransport, AsyncClient

from club.interface.api.app import create_app
from club.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_tag(unit_env):
            service = await unit_env.get(TagService)
            tag = await service.create_system_tag("robotics")
            assert tag.is_system
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        # Build container with specified unmocking
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


class AppEnvironment:
    """HTTP client plus the container behind the app.

    ``request_scope()`` opens a fresh request context for seeding and
    inspecting data; it shares the in-memory store with the app.
    """

    def __init__(self, container, client: AsyncClient) -> None:
        self.container = container
        self.client = client

    def request_scope(self):
        return self.container()


def create_app_fixture(unmock: set[Component] | None = None):
    """Factory for fixtures driving the FastAPI app through ASGITransport.

    Returns:
        Pytest fixture function that yields AppEnvironment
    """

    @pytest_asyncio.fixture
    async def _app_environment():
        container = build_test_container(unmock or set(), FastapiProvider())
        app = create_app(container)
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield AppEnvironment(container, client)
        await container.close()

    return _app_environment
