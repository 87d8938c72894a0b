from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from .pagination import PaginationMeta


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def processing_time_ms(started_at: Optional[float]) -> float:
    if started_at is None:
        return 0.0
    return round((time.perf_counter() - started_at) * 1000, 2)


def assemble_gift_list(
    gifts: Sequence[dict[str, Any]],
    pagination: PaginationMeta,
    filters: dict[str, Any],
    sort_by: str,
    started_at: Optional[float] = None,
) -> dict[str, Any]:
    return {
        "gifts": list(gifts),
        "pagination": pagination.to_dict(),
        "filters": dict(filters),
        "sort_by": sort_by,
        "processing_time_ms": processing_time_ms(started_at),
        "timestamp": utc_timestamp(),
    }


def assemble_error(
    code: str,
    message: str,
    started_at: Optional[float] = None,
    **extra: Any,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "error": code,
        "message": message,
        "processing_time_ms": processing_time_ms(started_at),
        "timestamp": utc_timestamp(),
    }
    payload.update({k: v for k, v in extra.items() if v is not None})
    return payload
