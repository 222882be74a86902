"""
Session context middleware for the artwork catalog API.

Resolves the browsing session for every non-public request from the
``X-Session-ID`` header, minting a fresh id when the client has none, and
echoes it back so the client can keep its selection across requests.
"""

from __future__ import annotations

import re
import uuid
from typing import Any

from fastapi import Depends, HTTPException, Request, status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import JSONResponse, Response

from application.services.catalog_session import CatalogSession
from infrastructure.adapters import InMemorySessionRegistry
from infrastructure.container import get_session_registry

SESSION_HEADER = "X-Session-ID"

_SESSION_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")

# ---------------------------------------------------------------------------
# Public endpoints that do NOT require a session
# ---------------------------------------------------------------------------

PUBLIC_PATH_PREFIXES: tuple[str, ...] = (
    "/health",
    "/metrics",
    "/docs",
    "/redoc",
    "/openapi.json",
)


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------


class SessionContextMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that attaches ``request.state.session_id``.

    A malformed header is rejected with ``400``; a missing one gets a new
    random id, returned in the response header.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if self._is_public(request.url.path):
            request.state.session_id = None
            return await call_next(request)

        header_value = request.headers.get(SESSION_HEADER)
        if header_value is None:
            session_id = uuid.uuid4().hex
        elif _SESSION_ID_PATTERN.match(header_value):
            session_id = header_value
        else:
            return self._problem_response(
                status_code=status.HTTP_400_BAD_REQUEST,
                title="Invalid Session Identifier",
                detail=(
                    f"The {SESSION_HEADER} header must be 1-64 characters of "
                    "letters, digits, '-' or '_'."
                ),
                instance=request.url.path,
            )

        request.state.session_id = session_id
        response = await call_next(request)
        response.headers[SESSION_HEADER] = session_id
        return response

    @staticmethod
    def _is_public(path: str) -> bool:
        return any(path.startswith(prefix) for prefix in PUBLIC_PATH_PREFIXES)

    @staticmethod
    def _problem_response(
        status_code: int,
        title: str,
        detail: str,
        instance: str | None = None,
    ) -> JSONResponse:
        """Return an RFC 9457 Problem Details JSON response."""
        body: dict[str, Any] = {
            "type": "about:blank",
            "title": title,
            "status": status_code,
            "detail": detail,
        }
        if instance:
            body["instance"] = instance
        return JSONResponse(
            status_code=status_code,
            content=body,
            media_type="application/problem+json",
        )


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------


def get_current_session(
    request: Request,
    registry: InMemorySessionRegistry = Depends(get_session_registry),
) -> CatalogSession:
    """Return the :class:`CatalogSession` for the current request, creating it on first use."""
    session_id: str | None = getattr(request.state, "session_id", None)
    if session_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Session context not available.",
        )
    return registry.get_or_create(session_id)


def get_session_for_reading(
    request: Request,
    registry: InMemorySessionRegistry = Depends(get_session_registry),
) -> CatalogSession:
    """Return the registered session, or an empty unregistered one.

    Read-only endpoints never open a session, so header-less reads leave no
    state behind.
    """
    session_id: str | None = getattr(request.state, "session_id", None)
    if session_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Session context not available.",
        )
    session = registry.get(session_id)
    if session is None:
        return registry.detached(session_id)
    return session
