from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select

from app.models import AnalyticsEvent
from app.repositories.analytics import AnalyticsRepository


async def _track_sample_events(repo: AnalyticsRepository) -> None:
    await repo.track("page_view", "s1")
    await repo.track("view_gift", "s1", gift_id=1)
    await repo.track("click_buy", "s1", gift_id=1, metadata={"retailer": "Etsy"})
    await repo.track("page_view", "s2")
    await repo.track("view_gift", "s2", gift_id=1)
    await repo.track("view_gift", "s2", gift_id=3)
    await repo.track("page_view", "s3")


@pytest.mark.asyncio
async def test_track_persists_event(seeded_session):
    repo = AnalyticsRepository(seeded_session)
    event_id = await repo.track("click_buy", "anon_1_abc", gift_id=2, metadata={"source": "grid"})
    await seeded_session.commit()

    event = (await seeded_session.execute(select(AnalyticsEvent).where(AnalyticsEvent.id == event_id))).scalar_one()
    assert event.event_type == "click_buy"
    assert event.gift_id == 2
    assert event.session_id == "anon_1_abc"
    assert event.event_metadata == {"source": "grid"}


@pytest.mark.asyncio
async def test_conversion_funnel(seeded_session):
    repo = AnalyticsRepository(seeded_session)
    await _track_sample_events(repo)
    await seeded_session.commit()

    funnel = await repo.conversion_funnel()
    assert funnel == {"visitors": 3, "viewers": 2, "clickers": 1, "conversion_rate": 50.0}


@pytest.mark.asyncio
async def test_empty_funnel_has_no_rate(seeded_session):
    funnel = await AnalyticsRepository(seeded_session).conversion_funnel()
    assert funnel["viewers"] == 0
    assert funnel["conversion_rate"] is None


@pytest.mark.asyncio
async def test_top_viewed_and_popular(seeded_session):
    repo = AnalyticsRepository(seeded_session)
    await _track_sample_events(repo)
    await seeded_session.commit()

    top = await repo.top_viewed()
    assert [(row["id"], row["view_count"]) for row in top] == [(1, 2), (3, 1)]
    assert top[0]["title"] == "Classic Pearl Pendant"
    assert [row["id"] for row in await repo.popular(limit=1)] == [1]


@pytest.mark.asyncio
async def test_summary_ignores_events_outside_window(seeded_session):
    repo = AnalyticsRepository(seeded_session)
    await _track_sample_events(repo)
    seeded_session.add(
        AnalyticsEvent(
            event_type="view_gift",
            gift_id=5,
            session_id="old",
            created_at=datetime.now(timezone.utc) - timedelta(days=30),
        )
    )
    await seeded_session.commit()

    summary = await repo.summary(days=7)
    assert set(summary) == {"top_viewed_gifts", "conversion_funnel", "category_performance"}
    assert 5 not in [row["id"] for row in summary["top_viewed_gifts"]]
    assert summary["category_performance"] == [{"category": "jewelry", "unique_views": 2, "purchases": 1}]
