"""
Structured JSON request logging middleware.

Every request/response cycle is logged as a single structured JSON event
containing method, path, status code, duration, the browsing session and
a unique request id for correlation.
"""

from __future__ import annotations

import time
import uuid
from typing import Any

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from infrastructure.observability.logging_config import bind_session

logger: structlog.stdlib.BoundLogger = structlog.get_logger("artwork_catalog.request")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs every HTTP request/response with structured JSON fields.

    Captured fields:
        - ``request_id``  -- unique UUID for the request
        - ``session_id``  -- browsing session (if resolved)
        - ``method``      -- HTTP method
        - ``path``        -- request path
        - ``status_code`` -- response status
        - ``duration_ms`` -- wall-clock duration in milliseconds
        - ``client_ip``   -- client IP address
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        session_id: str | None = getattr(request.state, "session_id", None)
        if session_id is not None:
            bind_session(session_id, request_id)

        start = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            self._log_request(
                request=request,
                request_id=request_id,
                status_code=500,
                duration_ms=duration_ms,
                level="error",
            )
            raise

        duration_ms = round((time.perf_counter() - start) * 1000, 2)

        response.headers["X-Request-ID"] = request_id

        level = "info" if response.status_code < 400 else "warning"
        if response.status_code >= 500:
            level = "error"

        self._log_request(
            request=request,
            request_id=request_id,
            status_code=response.status_code,
            duration_ms=duration_ms,
            level=level,
        )

        return response

    @staticmethod
    def _log_request(
        *,
        request: Request,
        request_id: str,
        status_code: int,
        duration_ms: float,
        level: str = "info",
    ) -> None:
        event_data: dict[str, Any] = {
            "request_id": request_id,
            "session_id": getattr(request.state, "session_id", None),
            "method": request.method,
            "path": str(request.url.path),
            "query": str(request.url.query) if request.url.query else None,
            "status_code": status_code,
            "duration_ms": duration_ms,
            "client_ip": request.client.host if request.client else None,
        }

        log_method = getattr(logger, level, logger.info)
        log_method("http_request", **event_data)
