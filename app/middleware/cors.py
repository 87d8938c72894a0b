"""Origin allow-list CORS: exact origins plus regex patterns, preflight short-circuit."""
from __future__ import annotations

import re
from typing import Iterable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
ALLOWED_HEADERS = ("Content-Type", "Authorization", "X-Requested-With")


class OriginAllowListCORSMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, origins: Iterable[str] = (), origin_patterns: Iterable[str] = ()):
        super().__init__(app)
        self.origins = frozenset(origins)
        self.origin_patterns = [re.compile(p) for p in origin_patterns]

    def is_allowed(self, origin: Optional[str]) -> bool:
        if not origin:
            return False
        if origin in self.origins:
            return True
        return any(p.search(origin) for p in self.origin_patterns)

    def _apply_headers(self, request: Request, response: Response) -> None:
        origin = request.headers.get("origin")
        if self.is_allowed(origin):
            response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Vary"] = "Origin"
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Access-Control-Allow-Methods"] = ", ".join(ALLOWED_METHODS)
        response.headers["Access-Control-Allow-Headers"] = ", ".join(ALLOWED_HEADERS)

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)
        self._apply_headers(request, response)
        return response
