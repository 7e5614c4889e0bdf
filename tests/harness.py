"""Test harness building DI containers per test.

Unit tests run entirely in memory. Integration tests that unmock
``persistence`` expect PostgreSQL at ``DATABASE__URL`` with migrations
applied.
"""

import pytest_asyncio

from stackit.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a fresh container, yields a
    request-scoped child container for service access, and closes both
    afterwards.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_vote(unit_env):
            votes = await unit_env.get(VoteService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
