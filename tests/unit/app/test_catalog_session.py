"""Unit tests for CatalogSession - ownership and cross-page selection persistence."""

from __future__ import annotations

import pytest

from application.services.catalog_session import CatalogSession
from domain.exceptions import BulkSelectError, FetchError, InvalidPageRequestError
from infrastructure.adapters import InMemoryArtworkFetcher


@pytest.fixture
def session(fetcher, publisher) -> CatalogSession:
    return CatalogSession(fetcher, page_size=12, event_publisher=publisher, session_id="s-1")


class TestOwnership:

    def test_services_share_one_store(self, session):
        assert session.bulk._store is session.store
        assert session.view._store is session.store

    def test_sessions_are_isolated(self, fetcher):
        a = CatalogSession(fetcher)
        b = CatalogSession(fetcher)
        a.select(1)
        assert b.selected_ids() == []
        assert a.session_id != b.session_id

    def test_scan_page_size_defaults_to_display_size(self, fetcher):
        assert CatalogSession(fetcher, page_size=7).bulk.scan_page_size == 7
        assert CatalogSession(fetcher, page_size=7, scan_page_size=50).bulk.scan_page_size == 50

    def test_zero_scan_page_size_is_rejected(self, fetcher):
        with pytest.raises(InvalidPageRequestError):
            CatalogSession(fetcher, page_size=7, scan_page_size=0)


@pytest.mark.asyncio
class TestSelectionPersistence:

    async def test_selection_survives_navigation(self, session):
        await session.go_to_page(1)
        session.toggle_page_ids([2, 5])
        await session.go_to_page(3)
        assert session.selected_on_page() == []
        await session.go_to_page(1)
        assert [r.id for r in session.selected_on_page()] == [2, 5]

    async def test_explicit_zero_page_size_is_rejected(self, session, fetcher):
        with pytest.raises(InvalidPageRequestError):
            await session.go_to_page(1, page_size=0)
        assert fetcher.calls == []

    async def test_page_size_change_keeps_selection(self, session):
        await session.go_to_page(2)
        session.toggle_page_ids([13])
        page = await session.change_page_size(30)
        assert page.page_number == 1
        assert [r.id for r in session.selected_on_page()] == [13]

    async def test_fetch_failure_keeps_selection(self):
        fetcher = InMemoryArtworkFetcher.sample(30, fail_on_pages={2})
        session = CatalogSession(fetcher, page_size=12)
        await session.go_to_page(1)
        session.toggle_page_ids([1, 2, 3])
        with pytest.raises(FetchError):
            await session.go_to_page(2)
        assert session.selected_ids() == [1, 2, 3]

    async def test_toggle_after_bulk_deselects_unlisted(self, session):
        await session.select_first(20)
        await session.go_to_page(2)
        # rows 13..24 on screen, 13..20 selected by bulk
        selected = session.toggle_page_ids([13, 14])
        assert [r.id for r in selected] == [13, 14]
        assert session.store.size() == 14
        assert not session.store.contains(15)


@pytest.mark.asyncio
class TestBulkScenario:

    async def test_select_twenty_leaves_page_three_untouched(self, session, fetcher):
        await session.go_to_page(3)
        outcome = await session.select_first(20)
        assert outcome.added == 20
        assert session.selected_on_page() == []
        await session.go_to_page(2)
        assert [r.id for r in session.selected_on_page()] == list(range(13, 21))

    async def test_partial_failure_reports_added(self):
        fetcher = InMemoryArtworkFetcher.sample(30, fail_on_pages={2})
        session = CatalogSession(fetcher, page_size=12)
        with pytest.raises(BulkSelectError) as excinfo:
            await session.select_first(20)
        assert excinfo.value.added == 12
        assert session.store.size() == 12


class TestTeardown:

    def test_close_is_idempotent(self, session):
        session.close()
        session.close()
        assert session.closed

    def test_close_keeps_selection(self, session):
        session.select(4)
        session.close()
        assert session.selected_ids() == [4]
