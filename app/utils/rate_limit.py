from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Request
from redis.asyncio import Redis
from redis.exceptions import RedisError
from starlette import status

from app.redis_client import get_redis
from app.utils.errors import AppError

logger = logging.getLogger(__name__)


def client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class RateLimiter:
    """Fixed-window per-IP request limit backed by Redis INCR/EXPIRE."""

    def __init__(self, scope: str, limit_setting: str, window_setting: str = "rate_limit_window_seconds"):
        self.scope = scope
        self.limit_setting = limit_setting
        self.window_setting = window_setting

    async def __call__(self, request: Request, redis: Optional[Redis] = Depends(get_redis)) -> None:
        if redis is None:
            return

        settings = request.app.state.settings
        limit = getattr(settings, self.limit_setting)
        window = getattr(settings, self.window_setting)
        if limit <= 0:
            return

        ip = client_ip(request)
        rate_key = f"rate_limit:{self.scope}:{ip}"
        try:
            current = await redis.incr(rate_key)
            if current == 1:
                await redis.expire(rate_key, window)
        except RedisError as exc:
            logger.warning("Rate limiter unavailable, allowing request from %s: %s", ip, exc)
            return

        if current > limit:
            logger.warning("Rate limit exceeded for %s by IP: %s", self.scope, ip)
            raise AppError(
                "rate_limited",
                "Too many requests. Please try again later.",
                status.HTTP_429_TOO_MANY_REQUESTS,
                retry=True,
            )


api_rate_limit = RateLimiter("api", "rate_limit_requests")
analytics_rate_limit = RateLimiter("analytics_track", "analytics_rate_limit_requests")
