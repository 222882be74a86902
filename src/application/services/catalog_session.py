"""Session object that owns the selection and the services bound to it.

A ``CatalogSession`` is the lifetime scope of one user's selection: it
creates a single :class:`SelectionStore` and hands it by reference to the
pagination, bulk-selection and view-binding services. Nothing here is a
module-level singleton.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional
from uuid import uuid4

from domain.models.artwork import DISPLAY_FIELDS, SCAN_FIELDS, Artwork
from domain.models.page import Page
from domain.services.selection_store import SelectionStore

from application.schemas.pagination import DEFAULT_PAGE_SIZE
from application.services.bulk_selector import BulkSelector, BulkSelectOutcome
from application.services.pagination_controller import (
    DataFetcher,
    EventPublisher,
    PaginationController,
)
from application.services.view_binder import ViewBinder

logger = logging.getLogger(__name__)


class CatalogSession:
    """Facade used by the presentation layer for one browsing session."""

    def __init__(
        self,
        fetcher: DataFetcher,
        page_size: int = DEFAULT_PAGE_SIZE,
        scan_page_size: Optional[int] = None,
        event_publisher: Optional[EventPublisher] = None,
        session_id: Optional[str] = None,
    ) -> None:
        self.session_id = session_id or uuid4().hex
        self.store = SelectionStore()
        self.pagination = PaginationController(
            fetcher,
            page_size=page_size,
            fields=DISPLAY_FIELDS,
            event_publisher=event_publisher,
            session_id=self.session_id,
        )
        self.bulk = BulkSelector(
            fetcher,
            self.store,
            scan_page_size=page_size if scan_page_size is None else scan_page_size,
            fields=SCAN_FIELDS,
            event_publisher=event_publisher,
            session_id=self.session_id,
        )
        self.view = ViewBinder(self.store)
        self._closed = False

    # -- navigation -------------------------------------------------------

    @property
    def current_page(self) -> Page:
        return self.pagination.current_page

    async def go_to_page(self, page_number: int, page_size: Optional[int] = None) -> Page:
        return await self.pagination.go_to_page(
            page_number, self.pagination.page_size if page_size is None else page_size
        )

    async def change_page_size(self, page_size: int) -> Page:
        return await self.pagination.change_page_size(page_size)

    # -- selection --------------------------------------------------------

    async def select_first(self, count: int) -> BulkSelectOutcome:
        return await self.bulk.select(count)

    def toggle_page(self, selected: Iterable[Artwork]) -> list[Artwork]:
        """Apply a full-page toggle to the current page and return its selection."""
        page = self.pagination.current_page
        self.view.on_user_toggle(page, selected)
        return self.view.current_page_selection(page)

    def toggle_page_ids(self, selected_ids: Iterable[int]) -> list[Artwork]:
        chosen = set(selected_ids)
        page = self.pagination.current_page
        return self.toggle_page([record for record in page.records if record.id in chosen])

    def selected_on_page(self) -> list[Artwork]:
        return self.view.current_page_selection(self.pagination.current_page)

    def selected_ids(self) -> list[int]:
        return list(self.store)

    def select(self, artwork_id: int) -> bool:
        return self.store.add(artwork_id)

    def deselect(self, artwork_id: int) -> bool:
        return self.store.remove(artwork_id)

    # -- teardown ---------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Tear the session down, cancelling any bulk scan in flight."""
        if self._closed:
            return
        self.bulk.cancel()
        self._closed = True
        logger.info("Session %s closed with %d selected", self.session_id, self.store.size())
