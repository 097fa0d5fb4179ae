"""Access log middleware.

One line per request with method, path, status and latency. Headers are not
logged, so bearer credentials never reach the log.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.core.logging import env_bool


def _level_for(status_code: int | None) -> int:
    # None means the handler raised before producing a response.
    if status_code is None or status_code >= 500:
        return logging.ERROR
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: FastAPI) -> None:
        super().__init__(app)
        self.logger = logging.getLogger("app.request")

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        status_code: int | None = None
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
            query = request.url.query
            self.logger.log(
                _level_for(status_code),
                "%s %s%s -> %s (%.2fms)",
                request.method,
                request.url.path,
                f"?{query}" if query else "",
                status_code,
                elapsed_ms,
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "query": query,
                    "status_code": status_code,
                    "duration_ms": elapsed_ms,
                    "client_ip": request.client.host if request.client else None,
                    "user_agent": request.headers.get("user-agent"),
                },
            )


def add_request_logging_middleware(app: FastAPI) -> None:
    """Attach the access log unless LOG_REQUESTS is turned off."""
    if env_bool("LOG_REQUESTS", default=True):
        app.add_middleware(RequestLoggingMiddleware)
