from __future__ import annotations

from typing import Optional

from fastapi import Request
from redis.asyncio import Redis, from_url

from app.config import Settings


async def init_redis(settings: Settings) -> Optional[Redis]:
    if not settings.redis_url:
        return None
    return from_url(settings.redis_url, decode_responses=True)


async def get_redis(request: Request) -> Optional[Redis]:
    redis: Optional[Redis] = getattr(request.app.state, "redis", None)
    return redis
