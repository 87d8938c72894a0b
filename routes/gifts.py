from __future__ import annotations

import time
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from app.config import Settings
from app.deps import get_app_settings, get_catalog_store, get_query_limits
from app.metrics import catalog_query_latency_ms
from app.repositories.catalog import TESTIMONIALS_PER_GIFT, CatalogStore
from app.schemas import gift_payload, testimonial_payload
from app.utils.errors import NotFoundError
from app.utils.rate_limit import api_rate_limit
from catalog.assembler import assemble_gift_list
from catalog.filters import GiftFilters
from catalog.pagination import PageRequest, build_pagination
from catalog.presets import QUICK_RECOMMEND_LIMIT, quick_recommend_filters
from catalog.sorting import SortKey
from catalog.validation import (
    QueryLimits,
    SEARCH_MAX_LENGTH,
    parse_gift_query,
    parse_int,
    sanitize_string,
    validate_record_id,
)

router = APIRouter(prefix="/api/gifts", tags=["Gifts"], dependencies=[Depends(api_rate_limit)])

SEARCH_MIN_LENGTH = 2
SEARCH_DEFAULT_LIMIT = 10


@router.get("")
async def list_gifts(
    request: Request,
    store: CatalogStore = Depends(get_catalog_store),
    limits: QueryLimits = Depends(get_query_limits),
    settings: Settings = Depends(get_app_settings),
) -> dict:
    """
    Filtered, sorted and paginated catalog listing.
    """
    started = time.perf_counter()
    query = parse_gift_query(request.query_params, limits, strict=settings.strict_query_validation)

    total = await store.count(query.filters)
    gifts = await store.query(query.filters, query.sort_by, query.page)
    catalog_query_latency_ms.labels(endpoint="list").observe((time.perf_counter() - started) * 1000)

    return assemble_gift_list(
        [gift_payload(gift) for gift in gifts],
        build_pagination(total, len(gifts), query.page),
        query.echo(),
        query.sort_by.value,
        getattr(request.state, "started_at", started),
    )


@router.get("/search")
async def search_gifts(
    q: Optional[str] = None,
    limit: Optional[str] = None,
    store: CatalogStore = Depends(get_catalog_store),
    limits: QueryLimits = Depends(get_query_limits),
) -> list[dict]:
    term = sanitize_string(q, SEARCH_MAX_LENGTH)
    if len(term) < SEARCH_MIN_LENGTH:
        return []

    page_limit = parse_int(limit, 1, limits.max_limit) or SEARCH_DEFAULT_LIMIT
    started = time.perf_counter()
    gifts = await store.query(GiftFilters(search=term), SortKey.SUCCESS_RATE, PageRequest(limit=page_limit))
    catalog_query_latency_ms.labels(endpoint="search").observe((time.perf_counter() - started) * 1000)
    return [gift_payload(gift) for gift in gifts]


@router.get("/quick-recommend")
async def quick_recommend(
    budget: Optional[str] = None,
    occasion: Optional[str] = Query(None, max_length=100),
    urgency: Optional[str] = None,
    store: CatalogStore = Depends(get_catalog_store),
) -> list[dict]:
    filters = quick_recommend_filters(budget, sanitize_string(occasion, 50) or None, urgency)
    gifts = await store.query(filters, SortKey.SUCCESS_RATE, PageRequest(limit=QUICK_RECOMMEND_LIMIT))
    return [gift_payload(gift) for gift in gifts]


@router.get("/{gift_id}")
async def get_gift(gift_id: str, store: CatalogStore = Depends(get_catalog_store)) -> dict:
    parsed_id = validate_record_id(gift_id)
    gift = await store.get_gift(parsed_id) if parsed_id is not None else None
    if gift is None:
        raise NotFoundError("gift_not_found", "Gift not found")

    testimonials = await store.testimonials_for(gift.id, limit=TESTIMONIALS_PER_GIFT)
    similar = await store.similar_gifts(gift)
    return {
        "gift": gift_payload(gift),
        "testimonials": [testimonial_payload(t) for t in testimonials],
        "similarGifts": [gift_payload(g) for g in similar],
    }
