"""Test harness for unit, integration and API tests.

Settings are loaded from environment variables (configure via .env or export).
Integration tests assume postgres is already running and migrated.
"""

from dataclasses import dataclass

import httpx
import pytest_asyncio
from dishka import AsyncContainer

from menumaster.domain.model import Invitation, User
from menumaster.domain.repository import InvitationRepository, UserRepository
from menumaster.interface.api.app import create_app
from menumaster.util.di import Component
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
        # Unit tests - everything mocked, no docker needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_redeem(unit_env):
            service = await unit_env.get(InvitationService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


@dataclass
class ApiEnv:
    """HTTP client over the app plus the container backing it."""

    client: httpx.AsyncClient
    container: AsyncContainer

    async def seed(self, *records: User | Invitation) -> None:
        """Save records through the repositories, as a separate request."""
        async with self.container() as request_container:
            users = await request_container.get(UserRepository)
            invitations = await request_container.get(InvitationRepository)
            for record in records:
                if isinstance(record, User):
                    await users.save(record)
                else:
                    await invitations.save(record)


def create_api_fixture(unmock: set[Component] | None = None):
    """Factory for API test fixtures.

    Yields an ``ApiEnv`` whose client talks to an app wired to a fresh test
    container; every test gets its own records.
    """

    @pytest_asyncio.fixture
    async def _api_environment():
        container = build_test_container(unmock=unmock or set())
        app = create_app(container)

        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(
            transport=transport, base_url="http://testserver"
        ) as client:
            yield ApiEnv(client=client, container=container)

        await container.close()

    return _api_environment
