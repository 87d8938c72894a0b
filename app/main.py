from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI

from app.config import Settings, get_settings
from app.db import Database
from app.jobs.success_rates import SuccessRateRefresher, refresh_once
from app.middleware.cors import OriginAllowListCORSMiddleware
from app.middleware.request_context import RequestContextMiddleware
from app.redis_client import init_redis
from app.seed import seed_catalog
from app.utils.errors import NotFoundError, install_exception_handlers
from catalog.aggregation import SuccessRateStrategy
from routes.analytics import router as analytics_router
from routes.categories import router as categories_router
from routes.gifts import router as gifts_router
from routes.health import router as health_router
from routes.survey import router as survey_router
from routes.testimonials import router as testimonials_router

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    configure_logging(settings)

    database = Database(settings.database_url)
    database.connect()
    app.state.database = database

    if settings.seed_on_startup:
        await database.create_all()
        async with database.session() as session:
            await seed_catalog(session)

    strategy = SuccessRateStrategy.from_setting(settings.success_rate_strategy)
    refresher: Optional[SuccessRateRefresher] = None
    if strategy is SuccessRateStrategy.PRECOMPUTED:
        await refresh_once(database)
        refresher = SuccessRateRefresher(database, settings.success_rate_refresh_seconds)
        refresher.start()

    app.state.redis = await init_redis(settings)
    logger.info(
        f"GiftGenius API {settings.app_version} started (env={settings.env}, "
        f"db={database.dialect}, success_rate={strategy.value})"
    )
    try:
        yield
    finally:
        if refresher is not None:
            await refresher.stop()
        if app.state.redis is not None:
            await app.state.redis.close()
        await database.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="GiftGenius API", version=settings.app_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.redis = None

    app.add_middleware(RequestContextMiddleware, timeout_seconds=settings.request_timeout_seconds)
    app.add_middleware(
        OriginAllowListCORSMiddleware,
        origins=settings.cors_origin_list,
        origin_patterns=settings.cors_origin_patterns,
    )

    install_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(gifts_router)
    app.include_router(categories_router)
    app.include_router(testimonials_router)
    app.include_router(analytics_router)
    app.include_router(survey_router)

    fallback = APIRouter()

    @fallback.api_route("/api/{path:path}", methods=["GET", "POST", "PUT", "DELETE"], include_in_schema=False)
    async def api_not_found(path: str) -> None:
        raise NotFoundError("not_found", "API endpoint not found")

    app.include_router(fallback)
    return app


app = create_app()
