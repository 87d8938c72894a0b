from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.db import get_db
from app.repositories.analytics import AnalyticsRepository
from app.repositories.catalog import CatalogStore, SqlCatalogStore
from catalog.aggregation import SuccessRateStrategy
from catalog.validation import QueryLimits


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def query_limits(settings: Settings) -> QueryLimits:
    return QueryLimits(
        categories=tuple(settings.category_allow_list),
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
        max_offset=settings.max_offset,
        max_price=settings.max_price,
    )


def get_query_limits(settings: Settings = Depends(get_app_settings)) -> QueryLimits:
    return query_limits(settings)


async def get_catalog_store(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> CatalogStore:
    return SqlCatalogStore(db, SuccessRateStrategy.from_setting(settings.success_rate_strategy))


async def get_analytics_repository(db: AsyncSession = Depends(get_db)) -> AnalyticsRepository:
    return AnalyticsRepository(db)
