"""Test harness for unit and integration tests.

Integration tests assume a PostgreSQL database is already running and
migrated (``alembic upgrade head``). Settings are loaded from environment
variables (configure via .env or export).
"""

import pytest_asyncio

from kiiaren.util.di import Component
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
        # Unit tests - everything mocked, no database or network needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_add_domain(unit_env):
            service = await unit_env.get(DomainClaimService)
            claim = await service.add_domain(...)
            assert claim.status == DomainStatus.PENDING
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
