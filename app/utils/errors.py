from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.assembler import assemble_error
from catalog.validation import QueryValidationError

logger = logging.getLogger(__name__)

_TRANSIENT_MARKERS = ("database is locked", "database is busy", "sqlite_busy", "sqlite_locked", "too many connections")


class AppError(Exception):
    def __init__(
        self,
        code: str,
        message: str,
        http_status: int,
        fields: Optional[dict[str, Any]] = None,
        retry: Optional[bool] = None,
    ):
        self.code = code
        self.message = message
        self.http_status = http_status
        self.fields = fields or {}
        self.retry = retry
        super().__init__(message)


class ValidationError(AppError):
    def __init__(self, message: str, fields: Optional[dict[str, Any]] = None):
        super().__init__("validation_error", message, status.HTTP_400_BAD_REQUEST, fields)


class NotFoundError(AppError):
    def __init__(self, code: str, message: str):
        super().__init__(code, message, status.HTTP_404_NOT_FOUND)


class StoreError(AppError):
    def __init__(self, message: str, transient: bool = False):
        super().__init__(
            "store_unavailable" if transient else "store_error",
            message,
            status.HTTP_503_SERVICE_UNAVAILABLE if transient else status.HTTP_500_INTERNAL_SERVER_ERROR,
            retry=True if transient else None,
        )
        self.transient = transient


class RequestTimeoutError(AppError):
    def __init__(self, message: str = "Request took too long"):
        super().__init__("request_timeout", message, status.HTTP_504_GATEWAY_TIMEOUT)


def is_transient_store_error(exc: BaseException) -> bool:
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return True
    if isinstance(exc, OperationalError):
        text = str(exc).lower()
        return any(marker in text for marker in _TRANSIENT_MARKERS) or "connection" in text
    return False


def to_store_error(exc: SQLAlchemyError) -> StoreError:
    if is_transient_store_error(exc):
        return StoreError("Database is busy, please try again", transient=True)
    return StoreError("Database error")


def _started_at(request: Request) -> Optional[float]:
    return getattr(request.state, "started_at", None)


def _show_details(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return settings is not None and not settings.is_production


def error_response(
    request: Request,
    code: str,
    message: str,
    http_status: int,
    fields: Optional[dict[str, Any]] = None,
    retry: Optional[bool] = None,
) -> JSONResponse:
    payload = assemble_error(code, message, _started_at(request), fields=fields or None, retry=retry)
    return JSONResponse(status_code=http_status, content=payload)


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if _show_details(request) else "Something went wrong"
    return error_response(request, "internal_error", message, status.HTTP_500_INTERNAL_SERVER_ERROR)


def install_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        return error_response(request, exc.code, exc.message, exc.http_status, exc.fields, exc.retry)

    @app.exception_handler(QueryValidationError)
    async def query_validation_handler(request: Request, exc: QueryValidationError) -> JSONResponse:
        return error_response(
            request,
            "validation_error",
            "Invalid query parameter",
            status.HTTP_400_BAD_REQUEST,
            {exc.field: exc.message},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return error_response(request, "not_found", "API endpoint not found", exc.status_code)
        code = "http_error"
        message = exc.detail if isinstance(exc.detail, str) else "HTTP error"
        fields = exc.detail if isinstance(exc.detail, dict) else None
        return error_response(request, code, message, exc.status_code, fields)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
            for err in exc.errors()
        ]
        return error_response(
            request,
            "validation_error",
            "Invalid request",
            status.HTTP_400_BAD_REQUEST,
            {"details": details},
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception("Store failure on %s %s", request.method, request.url.path)
        error = to_store_error(exc)
        message = error.message
        if _show_details(request):
            message = f"{message}: {exc}"
        return error_response(request, error.code, message, error.http_status, retry=error.retry)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        return internal_error_response(request, exc)
