"""Dependency injection container for the artwork catalog service.

Wires the data fetcher, event publisher and session registry together,
exposing factory functions suitable for FastAPI's ``Depends()`` system.
"""

from __future__ import annotations

import logging

from application.services.catalog_session import CatalogSession
from application.services.pagination_controller import DataFetcher
from infrastructure.adapters import (
    InMemoryArtworkFetcher,
    InMemorySessionRegistry,
    LoggingEventPublisher,
)
from infrastructure.artic.client import ArticArtworkFetcher
from infrastructure.settings import AppSettings, get_settings

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Central DI container that owns the shared adapters."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        fetcher: DataFetcher | None = None,
    ) -> None:
        self._settings = settings or get_settings()

        # Infrastructure adapters
        if fetcher is not None:
            self.fetcher = fetcher
        elif self._settings.use_sample_catalog:
            self.fetcher = InMemoryArtworkFetcher.sample(
                self._settings.sample_catalog_size, record_calls=False
            )
        else:
            self.fetcher = ArticArtworkFetcher(
                base_url=self._settings.api_base_url,
                timeout=self._settings.request_timeout_seconds,
            )
        self.event_publisher = LoggingEventPublisher()

        # Per-session services
        self.session_registry = InMemorySessionRegistry(
            self.create_session, max_sessions=self._settings.max_sessions
        )

        logger.info("ServiceContainer initialized (fetcher=%s)", type(self.fetcher).__name__)

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def create_session(self, session_id: str) -> CatalogSession:
        return CatalogSession(
            self.fetcher,
            page_size=self._settings.default_page_size,
            scan_page_size=self._settings.bulk_scan_page_size,
            event_publisher=self.event_publisher,
            session_id=session_id,
        )

    def shutdown(self) -> None:
        self.session_registry.close_all()


# Module-level singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Return the global container singleton."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install *container* as the global singleton (for testing)."""
    global _container
    _container = container


def reset_container() -> None:
    """Reset the global container (for testing)."""
    global _container
    _container = None


# ---------------------------------------------------------------------------
# FastAPI dependency factories
# ---------------------------------------------------------------------------


def get_session_registry() -> InMemorySessionRegistry:
    return get_container().session_registry


def get_app_settings() -> AppSettings:
    return get_container().settings
