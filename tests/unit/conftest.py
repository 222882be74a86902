"""Shared fixtures for unit tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from application.services.bulk_selector import BulkSelector
from application.services.pagination_controller import PaginationController
from application.services.view_binder import ViewBinder
from domain.models.artwork import Artwork
from domain.models.page import Page
from domain.services.selection_store import SelectionStore
from infrastructure.adapters import InMemoryArtworkFetcher

CATALOG_SIZE = 30
PAGE_SIZE = 12


class RecordingEventPublisher:
    """Collects published events for assertions."""

    def __init__(self) -> None:
        self.events: list[Any] = []

    def publish(self, event: Any) -> None:
        self.events.append(event)

    def types(self) -> list[str]:
        return [event.event_type for event in self.events]


def make_artwork(artwork_id: int, **overrides: Any) -> Artwork:
    fields: dict[str, Any] = {"title": f"Artwork {artwork_id}"}
    fields.update(overrides)
    return Artwork(id=artwork_id, **fields)


def make_page(ids: list[int], page_number: int = 1, page_size: int = PAGE_SIZE) -> Page:
    return Page(
        records=tuple(make_artwork(i) for i in ids),
        page_number=page_number,
        page_size=page_size,
        total_records=len(ids),
    )


@pytest.fixture
def fetcher() -> InMemoryArtworkFetcher:
    """30 artworks (ids 1..30): pages 1-2 hold 12 records, page 3 holds 6."""
    return InMemoryArtworkFetcher.sample(CATALOG_SIZE)


@pytest.fixture
def store() -> SelectionStore:
    return SelectionStore()


@pytest.fixture
def publisher() -> RecordingEventPublisher:
    return RecordingEventPublisher()


@pytest.fixture
def controller(fetcher, publisher) -> PaginationController:
    return PaginationController(fetcher, page_size=PAGE_SIZE, event_publisher=publisher)


@pytest.fixture
def selector(fetcher, store, publisher) -> BulkSelector:
    return BulkSelector(fetcher, store, scan_page_size=PAGE_SIZE, event_publisher=publisher)


@pytest.fixture
def binder(store) -> ViewBinder:
    return ViewBinder(store)


@pytest.fixture
def artwork_factory():
    return make_artwork


@pytest.fixture
def page_factory():
    return make_page
