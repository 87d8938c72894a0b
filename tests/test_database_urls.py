from __future__ import annotations

import pytest

from app.db import normalize_database_url, sync_database_url


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("postgresql://u:p@db:5432/gifts", "postgresql+asyncpg"),
        ("postgresql+psycopg2://u:p@db:5432/gifts", "postgresql+asyncpg"),
        ("sqlite:///./giftgenius.db", "sqlite+aiosqlite"),
        ("sqlite+aiosqlite:///./giftgenius.db", "sqlite+aiosqlite"),
    ],
)
def test_app_urls_use_async_drivers(raw, expected):
    assert normalize_database_url(raw).drivername == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("postgresql+asyncpg://u:p@db:5432/gifts", "postgresql://u:p@db:5432/gifts"),
        ("postgresql://u:p@db:5432/gifts", "postgresql://u:p@db:5432/gifts"),
        ("sqlite+aiosqlite:///./giftgenius.db", "sqlite:///./giftgenius.db"),
    ],
)
def test_migration_urls_use_sync_drivers(raw, expected):
    assert sync_database_url(raw).render_as_string(hide_password=False) == expected
