from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from sqlalchemy import case, distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import AnalyticsEvent, Gift

logger = logging.getLogger(__name__)

SUMMARY_WINDOW_DAYS = 7
TOP_VIEWED_LIMIT = 10
POPULAR_WINDOW_DAYS = 30


class AnalyticsRepository:
    """Append-only sink for tracking events plus the admin read-outs over it."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def track(
        self,
        event_type: str,
        session_id: str,
        gift_id: Optional[int] = None,
        metadata: Optional[dict[str, Any]] = None,
    ) -> int:
        event = AnalyticsEvent(
            event_type=event_type,
            gift_id=gift_id,
            session_id=session_id,
            event_metadata=metadata or {},
        )
        self.session.add(event)
        await self.session.flush()
        return event.id

    def _cutoff(self, days: int) -> datetime:
        cutoff = datetime.now(timezone.utc) - timedelta(days=days)
        # SQLite stores CURRENT_TIMESTAMP as naive UTC text
        if self.session.bind is not None and self.session.bind.dialect.name == "sqlite":
            return cutoff.replace(tzinfo=None)
        return cutoff

    async def top_viewed(self, days: int = SUMMARY_WINDOW_DAYS, limit: int = TOP_VIEWED_LIMIT) -> list[dict]:
        view_count = func.count(AnalyticsEvent.id).label("view_count")
        stmt = (
            select(Gift.id, Gift.title, Gift.category, Gift.price, view_count)
            .select_from(AnalyticsEvent)
            .join(Gift, AnalyticsEvent.gift_id == Gift.id)
            .where(AnalyticsEvent.event_type == "view_gift", AnalyticsEvent.created_at > self._cutoff(days))
            .group_by(Gift.id, Gift.title, Gift.category, Gift.price)
            .order_by(view_count.desc(), Gift.id.asc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [dict(row._mapping) for row in result.all()]

    async def conversion_funnel(self, days: int = SUMMARY_WINDOW_DAYS) -> dict[str, Any]:
        def sessions_for(event_type: str):
            return func.count(distinct(case((AnalyticsEvent.event_type == event_type, AnalyticsEvent.session_id))))

        stmt = select(
            sessions_for("page_view").label("visitors"),
            sessions_for("view_gift").label("viewers"),
            sessions_for("click_buy").label("clickers"),
        ).where(AnalyticsEvent.created_at > self._cutoff(days))
        row = (await self.session.execute(stmt)).one()
        viewers = int(row.viewers or 0)
        clickers = int(row.clickers or 0)
        return {
            "visitors": int(row.visitors or 0),
            "viewers": viewers,
            "clickers": clickers,
            "conversion_rate": round(100.0 * clickers / viewers, 2) if viewers else None,
        }

    async def category_performance(self, days: int = SUMMARY_WINDOW_DAYS) -> list[dict]:
        unique_views = func.count(distinct(AnalyticsEvent.session_id)).label("unique_views")
        stmt = (
            select(
                Gift.category,
                unique_views,
                func.count(case((AnalyticsEvent.event_type == "click_buy", 1))).label("purchases"),
            )
            .select_from(AnalyticsEvent)
            .join(Gift, AnalyticsEvent.gift_id == Gift.id)
            .where(AnalyticsEvent.created_at > self._cutoff(days))
            .group_by(Gift.category)
            .order_by(unique_views.desc(), Gift.category.asc())
        )
        result = await self.session.execute(stmt)
        return [dict(row._mapping) for row in result.all()]

    async def popular(self, limit: int = TOP_VIEWED_LIMIT, days: int = POPULAR_WINDOW_DAYS) -> list[dict]:
        return await self.top_viewed(days=days, limit=limit)

    async def summary(self, days: int = SUMMARY_WINDOW_DAYS) -> dict[str, Any]:
        return {
            "top_viewed_gifts": await self.top_viewed(days),
            "conversion_funnel": await self.conversion_funnel(days),
            "category_performance": await self.category_performance(days),
        }
