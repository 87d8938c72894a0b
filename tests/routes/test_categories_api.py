from __future__ import annotations

import json
from unittest.mock import AsyncMock

from app.redis_client import get_redis


def test_categories_summary(client):
    response = client.get("/api/categories")
    assert response.status_code == 200
    rows = response.json()

    assert [row["category"] for row in rows] == [
        "unique",
        "beauty",
        "experiences",
        "home",
        "fashion",
        "jewelry",
        "tech",
    ]
    unique = rows[0]
    assert unique["count"] == 6
    assert unique["display_name"] == "Unique & Creative"
    assert unique["icon"] == "✨"

    jewelry = next(row for row in rows if row["category"] == "jewelry")
    assert jewelry == {
        "category": "jewelry",
        "count": 4,
        "min_price": 45.99,
        "max_price": 89.99,
        "avg_success_rate": 91,
        "display_name": "Jewelry",
        "icon": "💎",
    }


def test_categories_served_from_cache(client):
    cached = [{"category": "cached", "count": 1}]
    redis_mock = AsyncMock()
    redis_mock.incr = AsyncMock(return_value=1)
    redis_mock.get = AsyncMock(return_value=json.dumps(cached))
    client.app.dependency_overrides[get_redis] = lambda: redis_mock

    assert client.get("/api/categories").json() == cached
    redis_mock.setex.assert_not_called()


def test_categories_written_to_cache(client):
    redis_mock = AsyncMock()
    redis_mock.incr = AsyncMock(return_value=1)
    redis_mock.get = AsyncMock(return_value=None)
    client.app.dependency_overrides[get_redis] = lambda: redis_mock

    rows = client.get("/api/categories").json()
    key, ttl, payload = redis_mock.setex.call_args.args
    assert key == "catalog:categories"
    assert ttl == 60
    assert json.loads(payload) == rows
