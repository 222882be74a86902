"""Maps the loaded page against the selection for presentation."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from domain.models.artwork import Artwork
from domain.models.page import Page
from domain.services.selection_store import SelectionStore

logger = logging.getLogger(__name__)


def current_page_selection(page: Page, store: SelectionStore) -> list[Artwork]:
    """Records of *page* whose id is selected, in page order."""
    return [record for record in page.records if store.contains(record.id)]


class ViewBinder:
    def __init__(self, store: SelectionStore) -> None:
        self._store = store

    def current_page_selection(self, page: Page) -> list[Artwork]:
        return current_page_selection(page, self._store)

    def on_user_toggle(self, page: Page, newly_selected: Iterable[Artwork]) -> None:
        """Apply the complete selection state the user sees for *page*.

        Every record on the page that is absent from *newly_selected* is
        deselected, whatever selected it in the first place.
        """
        chosen = {record.id for record in newly_selected}
        added = removed = 0
        for record in page.records:
            if record.id in chosen:
                added += self._store.add(record.id)
            else:
                removed += self._store.remove(record.id)
        logger.debug(
            "Toggle on page %d: +%d -%d (selection size %d)",
            page.page_number,
            added,
            removed,
            self._store.size(),
        )
