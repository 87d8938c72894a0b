from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_db
from app.deps import get_analytics_repository
from app.metrics import analytics_events_total
from app.repositories.analytics import SUMMARY_WINDOW_DAYS, TOP_VIEWED_LIMIT, AnalyticsRepository
from app.schemas import AnalyticsTrackRequest, AnalyticsTrackResponse
from app.utils.errors import ValidationError
from app.utils.rate_limit import analytics_rate_limit, api_rate_limit
from catalog.assembler import utc_timestamp
from catalog.validation import sanitize_string

router = APIRouter(prefix="/api/analytics", tags=["Analytics"], dependencies=[Depends(api_rate_limit)])
logger = logging.getLogger(__name__)

EVENT_FIELD_MAX_LENGTH = 100


@router.post(
    "/track",
    response_model=AnalyticsTrackResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(analytics_rate_limit)],
)
async def track_event(
    data: AnalyticsTrackRequest,
    repo: AnalyticsRepository = Depends(get_analytics_repository),
    db: AsyncSession = Depends(get_db),
):
    """
    Records one tracking event. Storage failures never surface to the caller.
    """
    event_type = sanitize_string(data.event_type, EVENT_FIELD_MAX_LENGTH)
    session_id = sanitize_string(data.session_id, EVENT_FIELD_MAX_LENGTH)
    # Markup-only values are empty once sanitized
    empty = {
        alias: "must not be empty"
        for alias, value in (("eventType", event_type), ("sessionId", session_id))
        if not value
    }
    if empty:
        raise ValidationError("Event type and session ID are required", empty)

    try:
        event_id = await repo.track(event_type, session_id, data.gift_id, data.metadata)
        await db.commit()
    except Exception:
        await db.rollback()
        analytics_events_total.labels(status="error").inc()
        logger.exception(f"Failed to track analytics event {event_type!r}")
        return AnalyticsTrackResponse(success=False)

    analytics_events_total.labels(status="ok").inc()
    return AnalyticsTrackResponse(success=True, id=event_id, session_id=session_id)


@router.get("/summary")
async def analytics_summary(
    days: int = Query(SUMMARY_WINDOW_DAYS, ge=1, le=365),
    repo: AnalyticsRepository = Depends(get_analytics_repository),
) -> dict:
    summary = await repo.summary(days)
    return {**summary, "window_days": days, "timestamp": utc_timestamp()}


@router.get("/popular")
async def popular_gifts(
    limit: int = Query(TOP_VIEWED_LIMIT, ge=1, le=100),
    repo: AnalyticsRepository = Depends(get_analytics_repository),
) -> list[dict]:
    return await repo.popular(limit=limit)
