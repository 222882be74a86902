"""Selection API endpoints: page toggles, bulk select and single-row changes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from application.services.catalog_session import CatalogSession
from domain.exceptions import BulkSelectCancelledError, BulkSelectError
from infrastructure.observability.logging_config import get_logger
from infrastructure.observability.metrics import bulk_selections_total

from ...middleware.session_context import get_current_session, get_session_for_reading
from .schemas import (
    BulkSelectRequest,
    BulkSelectResponse,
    ErrorResponse,
    PageSelectionResponse,
    PageSelectionUpdate,
    SelectionChangeResponse,
    SelectionResponse,
)

router = APIRouter(prefix="/selection", tags=["Selection"])

log = get_logger("artwork_catalog.selection")

ArtworkID = Annotated[int, Path(description="Upstream artwork id.")]


@router.get(
    "",
    response_model=SelectionResponse,
    summary="All selected artwork ids",
)
async def get_selection(
    session: CatalogSession = Depends(get_session_for_reading),
) -> SelectionResponse:
    ids = session.selected_ids()
    return SelectionResponse(selected_ids=ids, count=len(ids))


@router.put(
    "/page",
    response_model=PageSelectionResponse,
    summary="Replace the selection state of the current page",
    responses={
        200: {"description": "Rows listed are selected, every other row on the page is deselected."},
    },
)
async def update_page_selection(
    body: PageSelectionUpdate,
    session: CatalogSession = Depends(get_current_session),
) -> PageSelectionResponse:
    selected = session.toggle_page_ids(body.selected_ids)
    return PageSelectionResponse(
        page=session.current_page.page_number,
        selected_ids=[record.id for record in selected],
        selection_count=session.store.size(),
    )


@router.post(
    "/bulk",
    response_model=BulkSelectResponse,
    summary="Select the first N artworks of the catalog",
    responses={
        200: {"description": "Target reached, or the catalog was exhausted first."},
        409: {"description": "Superseded by a newer bulk selection.", "model": ErrorResponse},
        502: {"description": "A page fetch failed; partial progress is kept.", "model": ErrorResponse},
    },
)
async def bulk_select(
    body: BulkSelectRequest,
    session: CatalogSession = Depends(get_current_session),
) -> BulkSelectResponse:
    try:
        outcome = await session.select_first(body.count)
    except BulkSelectCancelledError as exc:
        bulk_selections_total.labels(outcome="cancelled").inc()
        log.info("bulk_selection_cancelled", target=body.count, added=exc.added)
        raise
    except BulkSelectError as exc:
        bulk_selections_total.labels(outcome="failed").inc()
        log.warning("bulk_selection_failed", target=body.count, added=exc.added)
        raise

    if outcome.added == 0 and outcome.pages_scanned == 0:
        result = "noop"
    elif outcome.exhausted:
        result = "exhausted"
    else:
        result = "completed"
    bulk_selections_total.labels(outcome=result).inc()

    return BulkSelectResponse(
        target=outcome.target,
        added=outcome.added,
        pages_scanned=outcome.pages_scanned,
        exhausted=outcome.exhausted,
        selection_count=outcome.selection_size,
    )


@router.post(
    "/{artwork_id}",
    response_model=SelectionChangeResponse,
    summary="Select a single artwork",
)
async def select_artwork(
    artwork_id: ArtworkID,
    session: CatalogSession = Depends(get_current_session),
) -> SelectionChangeResponse:
    changed = session.select(artwork_id)
    return SelectionChangeResponse(
        artwork_id=artwork_id,
        selected=True,
        changed=changed,
        selection_count=session.store.size(),
    )


@router.delete(
    "/{artwork_id}",
    response_model=SelectionChangeResponse,
    summary="Deselect a single artwork",
)
async def deselect_artwork(
    artwork_id: ArtworkID,
    session: CatalogSession = Depends(get_current_session),
) -> SelectionChangeResponse:
    changed = session.deselect(artwork_id)
    return SelectionChangeResponse(
        artwork_id=artwork_id,
        selected=False,
        changed=changed,
        selection_count=session.store.size(),
    )
