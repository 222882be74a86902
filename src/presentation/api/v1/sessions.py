"""Session lifecycle endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status

from infrastructure.adapters import InMemorySessionRegistry
from infrastructure.container import get_session_registry

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.delete(
    "/current",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Discard the current session and its selection",
)
async def close_current_session(
    request: Request,
    registry: InMemorySessionRegistry = Depends(get_session_registry),
) -> Response:
    registry.close(request.state.session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
