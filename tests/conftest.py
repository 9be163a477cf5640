from datetime import date

import pytest
import pytest_asyncio

from tests.fakes import (
    InMemoryLeagueStore,
    InMemorySessionStore,
    InMemoryUserDirectory,
    PlaintextHasher,
)

TODAY = date(2026, 10, 19)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def store() -> InMemoryLeagueStore:
    return InMemoryLeagueStore()


@pytest_asyncio.fixture
async def league(store: InMemoryLeagueStore) -> InMemoryLeagueStore:
    """Store seeded with three teams: alpha, beta and gamma-rays."""
    await store.create_team("Alpha", "desc")
    await store.create_team("Beta", "")
    await store.create_team("Gamma Rays", "cosmic")
    return store


@pytest.fixture
def users() -> InMemoryUserDirectory:
    directory = InMemoryUserDirectory()
    directory.add("admin", "hunter22", name="Admin")
    return directory


@pytest.fixture
def sessions(users: InMemoryUserDirectory) -> InMemorySessionStore:
    return InMemorySessionStore(users)


@pytest.fixture
def hasher() -> PlaintextHasher:
    return PlaintextHasher()
