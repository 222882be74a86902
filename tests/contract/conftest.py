"""Contract test fixtures: the FastAPI app wired to an in-memory catalog."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

SESSION_HEADERS = {"X-Session-ID": "contract-session"}


@pytest.fixture
def fetcher():
    from infrastructure.adapters import InMemoryArtworkFetcher

    return InMemoryArtworkFetcher.sample(30)


@pytest.fixture
def app(fetcher):
    from infrastructure.container import ServiceContainer, reset_container, set_container
    from infrastructure.settings import AppSettings
    from presentation.main import create_app

    set_container(ServiceContainer(settings=AppSettings(), fetcher=fetcher))
    yield create_app()
    reset_container()


@pytest.fixture
def client(app):
    from starlette.testclient import TestClient

    with TestClient(app) as test_client:
        test_client.headers.update(SESSION_HEADERS)
        yield test_client
