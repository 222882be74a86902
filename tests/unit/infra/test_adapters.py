"""Tests for infrastructure.adapters and the service container."""

from __future__ import annotations

import logging

import pytest

from application.services.catalog_session import CatalogSession
from domain.exceptions import FetchError
from infrastructure.adapters import (
    InMemoryArtworkFetcher,
    InMemorySessionRegistry,
    LoggingEventPublisher,
)
from infrastructure.artic.client import ArticArtworkFetcher
from infrastructure.container import ServiceContainer
from infrastructure.settings import AppSettings


@pytest.mark.asyncio
class TestInMemoryArtworkFetcher:

    async def test_pages_and_metadata(self, fetcher):
        fetched = await fetcher.fetch_page(3, 12, ("id",))
        assert [r.id for r in fetched.records] == list(range(25, 31))
        assert fetched.total == 30
        assert fetched.total_pages == 3
        assert not fetched.has_more

    async def test_page_past_end_is_empty(self, fetcher):
        fetched = await fetcher.fetch_page(9, 12, ("id",))
        assert fetched.records == ()

    async def test_simulated_failure(self):
        fetcher = InMemoryArtworkFetcher.sample(5, fail_on_pages={1})
        with pytest.raises(FetchError):
            await fetcher.fetch_page(1, 12, ("id",))
        assert fetcher.calls == [(1, 12, ("id",))]

    async def test_call_log_can_be_disabled(self):
        fetcher = InMemoryArtworkFetcher.sample(5, record_calls=False)
        await fetcher.fetch_page(1, 2, ("id",))
        assert fetcher.calls == []

    async def test_without_metadata(self):
        fetcher = InMemoryArtworkFetcher.sample(5, report_metadata=False)
        fetched = await fetcher.fetch_page(1, 2, ("id",))
        assert fetched.total is None
        assert fetched.total_pages is None


class TestInMemorySessionRegistry:

    @pytest.fixture
    def registry(self, fetcher) -> InMemorySessionRegistry:
        return InMemorySessionRegistry(lambda sid: CatalogSession(fetcher, session_id=sid))

    def test_get_or_create_reuses_session(self, registry):
        first = registry.get_or_create("abc")
        assert registry.get_or_create("abc") is first
        assert first.session_id == "abc"
        assert len(registry) == 1

    def test_get_unknown_is_none(self, registry):
        assert registry.get("nope") is None

    def test_close_removes_and_tears_down(self, registry):
        session = registry.get_or_create("abc")
        assert registry.close("abc") is True
        assert session.closed
        assert registry.get("abc") is None
        assert registry.close("abc") is False

    def test_least_recently_used_session_is_evicted(self, fetcher):
        registry = InMemorySessionRegistry(
            lambda sid: CatalogSession(fetcher, session_id=sid), max_sessions=2
        )
        a = registry.get_or_create("a")
        registry.get_or_create("b")
        registry.get("a")
        registry.get_or_create("c")
        assert len(registry) == 2
        assert registry.get("b") is None
        assert registry.get("a") is a
        assert not a.closed

    def test_evicted_session_is_closed(self, fetcher):
        registry = InMemorySessionRegistry(
            lambda sid: CatalogSession(fetcher, session_id=sid), max_sessions=1
        )
        first = registry.get_or_create("a")
        registry.get_or_create("b")
        assert first.closed
        assert len(registry) == 1

    def test_max_sessions_must_be_positive(self, fetcher):
        with pytest.raises(ValueError):
            InMemorySessionRegistry(lambda sid: CatalogSession(fetcher), max_sessions=0)

    def test_detached_session_is_not_registered(self, registry):
        session = registry.detached("ghost")
        assert session.session_id == "ghost"
        assert len(registry) == 0

    def test_close_all(self, registry):
        registry.get_or_create("a")
        registry.get_or_create("b")
        registry.close_all()
        assert len(registry) == 0


class TestLoggingEventPublisher:

    def test_logs_event(self, caplog):
        with caplog.at_level(logging.INFO, logger="infrastructure.adapters"):
            LoggingEventPublisher().publish({"event_type": "PageLoaded"})
        assert "PageLoaded" in caplog.text


class TestServiceContainer:

    def test_http_fetcher_by_default(self):
        container = ServiceContainer(settings=AppSettings(api_base_url="https://example.test/artworks"))
        assert isinstance(container.fetcher, ArticArtworkFetcher)

    def test_sample_catalog_setting(self):
        container = ServiceContainer(
            settings=AppSettings(use_sample_catalog=True, sample_catalog_size=7)
        )
        assert isinstance(container.fetcher, InMemoryArtworkFetcher)
        assert len(container.fetcher.artworks) == 7
        assert not container.fetcher.record_calls

    def test_registry_bounded_by_settings(self, fetcher):
        container = ServiceContainer(settings=AppSettings(max_sessions=3), fetcher=fetcher)
        for i in range(10):
            container.session_registry.get_or_create(f"s{i}")
        assert len(container.session_registry) == 3

    def test_sessions_use_configured_page_sizes(self, fetcher):
        settings = AppSettings(default_page_size=25, bulk_scan_page_size=100)
        container = ServiceContainer(settings=settings, fetcher=fetcher)
        session = container.session_registry.get_or_create("s")
        assert session.pagination.page_size == 25
        assert session.bulk.scan_page_size == 100
        assert session.session_id == "s"

    def test_shutdown_closes_sessions(self, fetcher):
        container = ServiceContainer(settings=AppSettings(), fetcher=fetcher)
        session = container.session_registry.get_or_create("s")
        container.shutdown()
        assert session.closed
        assert len(container.session_registry) == 0
