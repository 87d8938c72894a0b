from __future__ import annotations

import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.config import CATEGORY_INFO, DEFAULT_CATEGORY_ICON, Settings
from app.deps import get_app_settings, get_catalog_store
from app.redis_client import get_redis
from app.repositories.catalog import CatalogStore
from app.schemas import CategorySummarySchema
from app.utils.rate_limit import api_rate_limit
from catalog.models import CategorySummary

router = APIRouter(prefix="/api/categories", tags=["Categories"], dependencies=[Depends(api_rate_limit)])
logger = logging.getLogger(__name__)

CATEGORIES_CACHE_KEY = "catalog:categories"


def category_payload(summary: CategorySummary) -> dict:
    info = CATEGORY_INFO.get(summary.category, {})
    return CategorySummarySchema(
        category=summary.category,
        count=summary.count,
        min_price=summary.min_price,
        max_price=summary.max_price,
        avg_success_rate=summary.avg_success_rate,
        display_name=info.get("name", summary.category),
        icon=info.get("icon", DEFAULT_CATEGORY_ICON),
    ).model_dump()


@router.get("")
async def list_categories(
    store: CatalogStore = Depends(get_catalog_store),
    redis: Optional[Redis] = Depends(get_redis),
    settings: Settings = Depends(get_app_settings),
) -> list[dict]:
    """
    Per-category counts, price range and average success rate.
    """
    if redis is not None:
        try:
            cached = await redis.get(CATEGORIES_CACHE_KEY)
            if cached:
                return json.loads(cached)
        except RedisError as exc:
            logger.warning(f"Category cache read failed: {exc}")

    categories = [category_payload(summary) for summary in await store.category_summaries()]

    if redis is not None and settings.category_cache_ttl_seconds > 0:
        try:
            await redis.setex(CATEGORIES_CACHE_KEY, settings.category_cache_ttl_seconds, json.dumps(categories))
        except RedisError as exc:
            logger.warning(f"Category cache write failed: {exc}")

    return categories
