"""Integration test fixtures: a session wired the way the container wires it."""

from __future__ import annotations

import sys
from pathlib import Path

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

CATALOG_SIZE = 30


def _artic_handler(request: httpx.Request) -> httpx.Response:
    """Mimics the upstream listing endpoint over ids 1..CATALOG_SIZE."""
    page = int(request.url.params.get("page", "1"))
    limit = int(request.url.params.get("limit", "12"))
    fields = request.url.params.get("fields", "id").split(",")
    start = (page - 1) * limit
    ids = range(start + 1, min(start + limit, CATALOG_SIZE) + 1)
    data = [
        {field: (i if field == "id" else f"{field} {i}" if field == "title" else None) for field in fields}
        for i in ids
    ]
    return httpx.Response(
        200,
        json={
            "pagination": {
                "total": CATALOG_SIZE,
                "limit": limit,
                "current_page": page,
                "total_pages": -(-CATALOG_SIZE // limit),
            },
            "data": data,
        },
    )


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def container(requests_seen):
    from infrastructure.artic.client import ArticArtworkFetcher
    from infrastructure.container import ServiceContainer
    from infrastructure.settings import AppSettings

    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        return _artic_handler(request)

    fetcher = ArticArtworkFetcher(
        base_url="https://api.example.test/api/v1/artworks",
        transport=httpx.MockTransport(handler),
    )
    container = ServiceContainer(settings=AppSettings(), fetcher=fetcher)
    yield container
    container.shutdown()
