"""Artwork browsing API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from application.services.catalog_session import CatalogSession
from domain.exceptions import InvalidPageRequestError
from domain.models.page import Page
from infrastructure.container import get_app_settings
from infrastructure.settings import AppSettings

from ...middleware.session_context import get_current_session, get_session_for_reading
from .schemas import ArtworkPageResponse, ArtworkResponse, ErrorResponse, PaginationMeta

router = APIRouter(prefix="/artworks", tags=["Artworks"])


def page_to_response(page: Page, session: CatalogSession) -> ArtworkPageResponse:
    """Map a domain Page and its selection state to the API response schema."""
    return ArtworkPageResponse(
        items=[ArtworkResponse.model_validate(record) for record in page.records],
        pagination=PaginationMeta(
            page=page.page_number,
            page_size=page.page_size,
            total_items=page.total_records,
            total_pages=page.total_pages,
            first_index=page.first_index,
        ),
        selected_ids=[record.id for record in session.view.current_page_selection(page)],
        selection_count=session.store.size(),
    )


@router.get(
    "",
    response_model=ArtworkPageResponse,
    summary="Load a page of artworks",
    responses={
        200: {"description": "The requested page, now the session's current page."},
        422: {"description": "Invalid page or page size.", "model": ErrorResponse},
        502: {"description": "The upstream catalog failed.", "model": ErrorResponse},
    },
)
async def list_artworks(
    page: int = Query(1, ge=1, description="Page number (1-indexed)."),
    page_size: int | None = Query(None, ge=1, description="Rows per page; defaults to the session's size."),
    session: CatalogSession = Depends(get_current_session),
    settings: AppSettings = Depends(get_app_settings),
) -> ArtworkPageResponse:
    if page_size is not None and page_size > settings.max_page_size:
        raise InvalidPageRequestError(page_number=page, page_size=page_size)

    # page and size are coupled: a new size always restarts at page 1
    if page_size is not None and page_size != session.pagination.page_size:
        loaded = await session.change_page_size(page_size)
    else:
        loaded = await session.go_to_page(page)
    return page_to_response(loaded, session)


@router.get(
    "/current",
    response_model=ArtworkPageResponse,
    summary="Current page without refetching",
)
async def current_artworks(
    session: CatalogSession = Depends(get_session_for_reading),
) -> ArtworkPageResponse:
    return page_to_response(session.current_page, session)
