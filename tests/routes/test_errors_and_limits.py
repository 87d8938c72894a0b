from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

from fastapi.testclient import TestClient
from redis.exceptions import RedisError
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from app.deps import get_catalog_store
from app.main import create_app
from app.redis_client import get_redis


def _failing_store(exc: Exception) -> AsyncMock:
    store = AsyncMock()
    store.count.side_effect = exc
    store.query.side_effect = exc
    return store


def test_unknown_api_path(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "not_found"
    assert "timestamp" in body
    assert "processing_time_ms" in body


def test_locked_database_is_retryable(client):
    exc = OperationalError("SELECT 1", {}, Exception("database is locked"))
    client.app.dependency_overrides[get_catalog_store] = lambda: _failing_store(exc)

    response = client.get("/api/gifts")
    assert response.status_code == 503
    body = response.json()
    assert body["error"] == "store_unavailable"
    assert body["retry"] is True


def test_other_store_errors_are_500(client):
    client.app.dependency_overrides[get_catalog_store] = lambda: _failing_store(SQLAlchemyError("boom"))

    response = client.get("/api/gifts")
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "store_error"
    assert "retry" not in body
    assert "boom" in body["message"]


def test_unexpected_errors_hide_details_in_production(api_settings):
    settings = api_settings.model_copy(update={"env": "production"})
    app = create_app(settings)
    app.dependency_overrides[get_catalog_store] = lambda: _failing_store(RuntimeError("secret detail"))

    with TestClient(app, raise_server_exceptions=False) as prod_client:
        response = prod_client.get("/api/gifts")

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "internal_error"
    assert "secret detail" not in body["message"]


def test_slow_requests_time_out(api_settings):
    settings = api_settings.model_copy(update={"request_timeout_seconds": 0.05})
    app = create_app(settings)

    async def slow_count(filters):
        await asyncio.sleep(0.5)
        return 0

    store = AsyncMock()
    store.count.side_effect = slow_count
    app.dependency_overrides[get_catalog_store] = lambda: store

    with TestClient(app) as slow_client:
        response = slow_client.get("/api/gifts")

    assert response.status_code == 504
    assert response.json()["error"] == "request_timeout"


def _redis_returning(count: int) -> AsyncMock:
    redis_mock = AsyncMock()
    redis_mock.incr = AsyncMock(return_value=count)
    redis_mock.expire = AsyncMock()
    return redis_mock


def test_rate_limit_first_hit_sets_window(client):
    redis_mock = _redis_returning(1)
    client.app.dependency_overrides[get_redis] = lambda: redis_mock

    assert client.get("/api/gifts").status_code == 200
    redis_mock.expire.assert_awaited_with("rate_limit:api:testclient", 900)


def test_rate_limit_exceeded(client):
    client.app.dependency_overrides[get_redis] = lambda: _redis_returning(101)

    response = client.get("/api/gifts")
    assert response.status_code == 429
    assert response.json()["error"] == "rate_limited"


def test_analytics_has_stricter_limit(client):
    client.app.dependency_overrides[get_redis] = lambda: _redis_returning(11)

    assert client.get("/api/gifts").status_code == 200
    response = client.post("/api/analytics/track", json={"eventType": "view_gift", "sessionId": "s1"})
    assert response.status_code == 429


def test_rate_limiter_fails_open(client):
    redis_mock = AsyncMock()
    redis_mock.incr = AsyncMock(side_effect=RedisError("down"))
    client.app.dependency_overrides[get_redis] = lambda: redis_mock

    assert client.get("/api/gifts").status_code == 200
