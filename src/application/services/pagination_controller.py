"""Application service that turns navigation requests into page fetches.

``PaginationController`` owns the currently displayed :class:`Page`. Every
navigation issues exactly one call to the :class:`DataFetcher` port and
replaces the current page wholesale; pages are never merged.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any, Optional, Protocol

from domain.events.selection_events import PageLoaded, PageLoadFailed
from domain.exceptions import FetchError
from domain.models.artwork import DISPLAY_FIELDS
from domain.models.page import FetchedPage, Page

from application.schemas.pagination import DEFAULT_PAGE_SIZE, PaginationParams

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Ports
# ---------------------------------------------------------------------------

class DataFetcher(Protocol):
    """Port: a single remote page request.

    Implementations raise :class:`FetchError` on any network, status or
    decode failure and never return partial data.
    """

    async def fetch_page(
        self,
        page_number: int,
        page_size: int,
        fields: Sequence[str],
    ) -> FetchedPage: ...


class EventPublisher(Protocol):
    """Port: domain-event publishing."""

    def publish(self, event: Any) -> None: ...


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

class PaginationController:
    """Tracks the current page, page size and total record count."""

    def __init__(
        self,
        fetcher: DataFetcher,
        page_size: int = DEFAULT_PAGE_SIZE,
        fields: Sequence[str] = DISPLAY_FIELDS,
        event_publisher: Optional[EventPublisher] = None,
        session_id: str = "",
    ) -> None:
        params = PaginationParams(page=1, size=page_size)
        self._fetcher = fetcher
        self._fields = tuple(fields)
        self._event_publisher = event_publisher
        self._session_id = session_id
        self._page = Page.empty(page_number=params.page, page_size=params.size)
        self._loading = False
        # one outstanding navigation at a time
        self._lock = asyncio.Lock()

    # -- state ------------------------------------------------------------

    @property
    def current_page(self) -> Page:
        return self._page

    @property
    def page_number(self) -> int:
        return self._page.page_number

    @property
    def page_size(self) -> int:
        return self._page.page_size

    @property
    def total_records(self) -> int:
        return self._page.total_records

    @property
    def is_loading(self) -> bool:
        return self._loading

    # -- navigation -------------------------------------------------------

    async def go_to_page(self, page_number: int, page_size: int) -> Page:
        """Fetch *page_number* at *page_size* and make it the current page.

        On failure the current page is replaced by an empty one reporting
        zero records and the :class:`FetchError` propagates.
        """
        params = PaginationParams(page=page_number, size=page_size)
        async with self._lock:
            return await self._load(params)

    async def change_page_size(self, page_size: int) -> Page:
        """Switch to *page_size*, restarting from page 1."""
        return await self.go_to_page(1, page_size)

    async def next_page(self) -> Page:
        if not self._page.has_next:
            return self._page
        return await self.go_to_page(self._page.page_number + 1, self._page.page_size)

    async def previous_page(self) -> Page:
        if not self._page.has_previous:
            return self._page
        return await self.go_to_page(self._page.page_number - 1, self._page.page_size)

    async def refresh(self) -> Page:
        return await self.go_to_page(self._page.page_number, self._page.page_size)

    # -- helpers ----------------------------------------------------------

    async def _load(self, params: PaginationParams) -> Page:
        self._loading = True
        try:
            fetched = await self._fetcher.fetch_page(params.page, params.size, self._fields)
        except FetchError as exc:
            logger.warning(
                "Page %d (size %d) failed to load: %s", params.page, params.size, exc.reason
            )
            self._page = Page.empty(page_number=params.page, page_size=params.size)
            self._publish(
                PageLoadFailed(
                    session_id=self._session_id,
                    page_number=params.page,
                    page_size=params.size,
                    reason=exc.reason,
                )
            )
            raise
        finally:
            self._loading = False

        self._page = Page(
            records=fetched.records,
            page_number=params.page,
            page_size=params.size,
            total_records=fetched.resolved_total() or len(fetched.records),
        )
        logger.debug(
            "Loaded page %d (%d records, %d total)",
            params.page,
            len(self._page.records),
            self._page.total_records,
        )
        self._publish(
            PageLoaded(
                session_id=self._session_id,
                page_number=params.page,
                page_size=params.size,
                total_records=self._page.total_records,
            )
        )
        return self._page

    def _publish(self, event: Any) -> None:
        if self._event_publisher is not None:
            self._event_publisher.publish(event)
