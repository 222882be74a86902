"""Application service realizing "select the first N artworks".

``BulkSelector`` walks the catalog from page 1 forward, one page at a time,
adding identifiers it has not seen selected until the requested total is
reached or the upstream reports no more pages. The caller does not need to
have viewed any of the scanned pages.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional

from domain.events.selection_events import BulkSelectionAborted, BulkSelectionCompleted
from domain.exceptions import BulkSelectCancelledError, BulkSelectError, FetchError
from domain.models.artwork import SCAN_FIELDS
from domain.services.selection_store import SelectionStore

from application.schemas.pagination import DEFAULT_PAGE_SIZE, PaginationParams
from application.services.pagination_controller import DataFetcher, EventPublisher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BulkSelectOutcome:
    """Summary of a bulk selection that ran to completion or exhaustion."""

    target: int
    added: int = 0
    pages_scanned: int = 0
    exhausted: bool = False
    selection_size: int = 0


class _ScanToken:
    """Cancellation flag for one scan, checked between iterations."""

    __slots__ = ("cancelled",)

    def __init__(self) -> None:
        self.cancelled = False


class BulkSelector:
    """Sequentially scans pages to grow a :class:`SelectionStore` to N ids."""

    def __init__(
        self,
        fetcher: DataFetcher,
        store: SelectionStore,
        scan_page_size: int = DEFAULT_PAGE_SIZE,
        fields: Sequence[str] = SCAN_FIELDS,
        event_publisher: Optional[EventPublisher] = None,
        session_id: str = "",
    ) -> None:
        self._fetcher = fetcher
        self._store = store
        self._scan_page_size = PaginationParams(page=1, size=scan_page_size).size
        self._fields = tuple(fields)
        self._event_publisher = event_publisher
        self._session_id = session_id
        self._active: Optional[_ScanToken] = None

    @property
    def scan_page_size(self) -> int:
        return self._scan_page_size

    @property
    def is_running(self) -> bool:
        return self._active is not None

    def cancel(self) -> None:
        """Cancel the scan in progress, if any. Committed ids are kept."""
        if self._active is not None:
            self._active.cancelled = True
            self._active = None

    async def select(self, target: int) -> BulkSelectOutcome:
        """Grow the selection to *target* ids, scanning from page 1.

        Ids already selected count toward *target*. Raises
        :class:`BulkSelectError` if a page fetch fails and
        :class:`BulkSelectCancelledError` if a newer scan or :meth:`cancel`
        interrupts this one; in both cases ids added so far stay selected.
        """
        # any newer request supersedes the running scan
        self.cancel()

        if target <= 0:
            return BulkSelectOutcome(target=target, selection_size=self._store.size())

        needed = target - self._store.size()
        if needed <= 0:
            logger.debug("Bulk select %d already satisfied (%d selected)", target, self._store.size())
            return BulkSelectOutcome(target=target, selection_size=self._store.size())

        token = _ScanToken()
        self._active = token

        added = 0
        pages_scanned = 0
        page_number = 1
        exhausted = False

        try:
            while needed > 0:
                if token.cancelled:
                    raise BulkSelectCancelledError(added=added)

                try:
                    fetched = await self._fetcher.fetch_page(
                        page_number, self._scan_page_size, self._fields
                    )
                except FetchError as exc:
                    logger.warning(
                        "Bulk select aborted on page %d after adding %d: %s",
                        page_number,
                        added,
                        exc.reason,
                    )
                    raise BulkSelectError(added=added, cause=exc) from exc

                if token.cancelled:
                    raise BulkSelectCancelledError(added=added)

                pages_scanned += 1
                for record in fetched.records:
                    if self._store.add(record.id):
                        added += 1
                        needed -= 1
                        if needed == 0:
                            break

                if needed > 0 and not fetched.has_more:
                    exhausted = True
                    break

                page_number += 1
        except BulkSelectError as exc:
            self._publish(
                BulkSelectionAborted(
                    session_id=self._session_id,
                    target=target,
                    added=added,
                    cancelled=isinstance(exc, BulkSelectCancelledError),
                    reason=exc.detail,
                )
            )
            raise
        finally:
            if self._active is token:
                self._active = None

        outcome = BulkSelectOutcome(
            target=target,
            added=added,
            pages_scanned=pages_scanned,
            exhausted=exhausted,
            selection_size=self._store.size(),
        )
        logger.info(
            "Bulk select %d added %d across %d pages (exhausted=%s)",
            target,
            added,
            pages_scanned,
            exhausted,
        )
        self._publish(
            BulkSelectionCompleted(
                session_id=self._session_id,
                target=target,
                added=added,
                pages_scanned=pages_scanned,
                exhausted=exhausted,
            )
        )
        return outcome

    def _publish(self, event: Any) -> None:
        if self._event_publisher is not None:
            self._event_publisher.publish(event)
