from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from app.config import Settings
from app.db import Database, get_database
from app.deps import get_app_settings
from app.schemas import HealthResponse
from catalog.assembler import utc_timestamp

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


@router.get("/api/health", response_model=HealthResponse)
async def health(
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_app_settings),
):
    try:
        await database.ping()
    except Exception as exc:
        logger.exception("Health check failed: database unreachable")
        return JSONResponse(
            status_code=500,
            content={
                "status": "unhealthy",
                "error": "Database connection failed" if settings.is_production else str(exc),
                "timestamp": utc_timestamp(),
            },
        )

    return HealthResponse(
        status="healthy",
        timestamp=utc_timestamp(),
        environment=settings.env,
        database="connected",
        version=settings.app_version,
    )


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
