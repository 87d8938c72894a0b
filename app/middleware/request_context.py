from __future__ import annotations

import asyncio
import logging
import time

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from app.utils.errors import RequestTimeoutError, internal_error_response
from catalog.assembler import assemble_error, processing_time_ms

logger = logging.getLogger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Stamps request start time, enforces the request deadline and logs one access line."""

    def __init__(self, app, timeout_seconds: float = 5.0):
        super().__init__(app)
        self.timeout_seconds = timeout_seconds

    async def dispatch(self, request: Request, call_next):
        started_at = time.perf_counter()
        request.state.started_at = started_at
        client = request.client.host if request.client else "unknown"

        try:
            if self.timeout_seconds and self.timeout_seconds > 0:
                response = await asyncio.wait_for(call_next(request), timeout=self.timeout_seconds)
            else:
                response = await call_next(request)
        except asyncio.TimeoutError:
            error = RequestTimeoutError()
            logger.error(
                "Request timed out after %.1fs: %s %s (ip=%s)",
                self.timeout_seconds,
                request.method,
                request.url.path,
                client,
            )
            return JSONResponse(
                status_code=error.http_status,
                content=assemble_error(error.code, error.message, started_at),
            )
        except Exception as exc:
            # Outer middleware (CORS) needs a response to decorate
            response = internal_error_response(request, exc)

        logger.info(
            "%s %s %s %.2fms ip=%s",
            request.method,
            request.url.path,
            response.status_code,
            processing_time_ms(started_at),
            client,
        )
        return response
