from __future__ import annotations

import asyncio
import logging
from typing import Optional

from app.db import Database
from app.metrics import success_rate_refresh_total
from app.repositories.catalog import SqlCatalogStore

logger = logging.getLogger(__name__)


async def refresh_once(database: Database) -> int:
    async with database.session() as session:
        store = SqlCatalogStore(session)
        try:
            updated = await store.refresh_success_rates()
            await session.commit()
        except Exception:
            await session.rollback()
            success_rate_refresh_total.labels(status="error").inc()
            raise
    success_rate_refresh_total.labels(status="ok").inc()
    logger.info(f"Success rates refreshed for {updated} gifts.")
    return updated


class SuccessRateRefresher:
    """Periodically recomputes stored success rates while the app runs."""

    def __init__(self, database: Database, interval_seconds: float):
        self.database = database
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running or self.interval_seconds <= 0:
            return
        logger.info(f"Starting success-rate refresh loop every {self.interval_seconds}s...")
        self._task = asyncio.create_task(self._run(), name="success-rate-refresh")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Success-rate refresh loop stopped.")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                await refresh_once(self.database)
            except Exception:
                # Readers keep the last stored values until the next run
                logger.exception("Success-rate refresh failed")
