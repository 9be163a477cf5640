"""Tests for database URL rewriting in settings."""

import pytest

from league_api.config import Settings

pytestmark = [pytest.mark.unit]


@pytest.mark.parametrize(
    "database_url, async_url, sync_url",
    [
        (
            "postgresql://u:p@db:5432/league",
            "postgresql+asyncpg://u:p@db:5432/league",
            "postgresql+psycopg://u:p@db:5432/league",
        ),
        (
            "postgresql+asyncpg://u:p@db:5432/league",
            "postgresql+asyncpg://u:p@db:5432/league",
            "postgresql+psycopg://u:p@db:5432/league",
        ),
    ],
)
def test_driver_specific_urls(database_url, async_url, sync_url):
    config = Settings(database_url=database_url)

    assert config.async_database_url == async_url
    assert config.sync_database_url == sync_url
