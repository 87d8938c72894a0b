from __future__ import annotations

import os
import sys
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.append(ROOT)

from app.config import Settings  # noqa: E402
from app.db import Base  # noqa: E402
from app.main import create_app  # noqa: E402
from app.models import Gift, Testimonial  # noqa: E402
from app.repositories.catalog import InMemoryCatalogStore, SqlCatalogStore  # noqa: E402
from catalog.aggregation import SuccessRateStrategy  # noqa: E402

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)

# Three jewelry gifts priced 50/150/300 with success rates 98/90/97, plus
# two other active gifts and one retired gift.
SCENARIO_GIFTS = [
    {
        "title": "Classic Pearl Pendant",
        "description": "Freshwater pearl on a fine chain",
        "price": 50.0,
        "category": "jewelry",
        "occasion": "birthday",
        "relationship_stage": "dating",
        "retailer": "Etsy",
        "delivery_days": 3,
        "success_rate": 98,
        "total_reviews": 50,
    },
    {
        "title": "Gold Hoop Earrings",
        "description": "14k gold hoops",
        "price": 150.0,
        "category": "jewelry",
        "occasion": "anniversary",
        "relationship_stage": "serious",
        "retailer": "Blue Nile",
        "delivery_days": 5,
        "success_rate": 90,
        "total_reviews": 20,
    },
    {
        "title": "Diamond Tennis Bracelet",
        "description": "A line of brilliant-cut stones",
        "price": 300.0,
        "category": "jewelry",
        "occasion": "anniversary",
        "relationship_stage": "married",
        "retailer": "Blue Nile",
        "delivery_days": 7,
        "success_rate": 97,
        "total_reviews": 12,
    },
    {
        "title": "Noise Cancelling Headphones",
        "description": "Wireless over-ear headphones with 30h battery",
        "price": 250.0,
        "category": "tech",
        "occasion": "birthday",
        "relationship_stage": "serious",
        "retailer": "Amazon",
        "delivery_days": 1,
        "success_rate": 90,
        "total_reviews": 40,
    },
    {
        "title": "Weekend Cooking Class",
        "description": "Hands-on pasta workshop for two",
        "price": 120.0,
        "category": "experiences",
        "occasion": "just-because",
        "relationship_stage": "dating",
        "retailer": "Cozymeal",
        "delivery_days": 0,
        "success_rate": 85,
        "total_reviews": 8,
    },
    {
        "title": "Retired Table Lamp",
        "description": "No longer sold",
        "price": 40.0,
        "category": "home",
        "occasion": "birthday",
        "relationship_stage": "dating",
        "retailer": "Amazon",
        "delivery_days": 2,
        "success_rate": 99,
        "total_reviews": 5,
        "is_active": False,
    },
]
for _idx, _gift in enumerate(SCENARIO_GIFTS):
    _gift["created_at"] = BASE_TIME + timedelta(days=_idx)

# gift_id is the 1-based position in SCENARIO_GIFTS
SCENARIO_TESTIMONIALS = [
    {"gift_id": 1, "reviewer_name": "Ann", "partner_rating": 5, "testimonial_text": "Loved it", "helpful_votes": 1},
    {"gift_id": 1, "reviewer_name": "Ben", "partner_rating": 5, "testimonial_text": "Perfect", "helpful_votes": 4},
    {"gift_id": 1, "reviewer_name": "Cal", "partner_rating": 4, "testimonial_text": "Nice", "helpful_votes": 0},
    {"gift_id": 1, "reviewer_name": "Dee", "partner_rating": 3, "testimonial_text": "Fine", "helpful_votes": 2},
    {"gift_id": 2, "reviewer_name": "Eve", "partner_rating": 5, "testimonial_text": "Great", "helpful_votes": 0},
    {"gift_id": 2, "reviewer_name": "Fay", "partner_rating": 2, "testimonial_text": "Meh", "helpful_votes": 0},
    {"gift_id": 4, "reviewer_name": "Gus", "partner_rating": 4, "testimonial_text": "Good sound", "helpful_votes": 0},
    {"gift_id": 4, "reviewer_name": "Hal", "partner_rating": 4, "testimonial_text": "Comfy", "helpful_votes": 0},
    {"gift_id": 4, "reviewer_name": "Ivy", "partner_rating": 5, "testimonial_text": "Quiet", "helpful_votes": 0},
]
for _idx, _testimonial in enumerate(SCENARIO_TESTIMONIALS):
    _testimonial["created_at"] = BASE_TIME + timedelta(hours=_idx)


@pytest.fixture
def make_memory_store():
    def _make(strategy: SuccessRateStrategy = SuccessRateStrategy.PRECOMPUTED) -> InMemoryCatalogStore:
        return InMemoryCatalogStore.from_seed(SCENARIO_GIFTS, SCENARIO_TESTIMONIALS, strategy)

    return _make


@pytest.fixture
def memory_store(make_memory_store):
    return make_memory_store()


@pytest.fixture
async def sqlite_engine(tmp_path):
    db_path = tmp_path / "catalog_tests.sqlite"
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", future=True)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def sqlite_db_session(sqlite_engine):
    session_factory = async_sessionmaker(sqlite_engine, expire_on_commit=False, class_=AsyncSession)
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded_session(sqlite_db_session):
    gifts = [Gift(**data) for data in SCENARIO_GIFTS]
    sqlite_db_session.add_all(gifts)
    await sqlite_db_session.flush()
    for data in SCENARIO_TESTIMONIALS:
        sqlite_db_session.add(Testimonial(**{**data, "gift_id": gifts[data["gift_id"] - 1].id}))
    await sqlite_db_session.commit()
    return sqlite_db_session


@pytest.fixture
def make_sql_store(seeded_session):
    def _make(strategy: SuccessRateStrategy = SuccessRateStrategy.PRECOMPUTED) -> SqlCatalogStore:
        return SqlCatalogStore(seeded_session, strategy)

    return _make


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'api.sqlite'}",
        redis_url=None,
        env="test",
        seed_on_startup=True,
        success_rate_refresh_seconds=0,
        request_timeout_seconds=10.0,
    )


@pytest.fixture
def client(api_settings):
    app = create_app(api_settings)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
