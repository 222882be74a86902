"""Adapter implementations bridging infrastructure to application-layer ports.

Provides an in-memory ``DataFetcher`` over a fixed artwork list, the
in-memory registry that keeps one ``CatalogSession`` per browsing session,
and a logging event publisher.
"""

from __future__ import annotations

import asyncio
import logging
from collections import OrderedDict
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Optional

from application.services.catalog_session import CatalogSession
from domain.exceptions import FetchError
from domain.models.artwork import Artwork
from domain.models.page import FetchedPage

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# In-memory data fetcher (swap for the HTTP fetcher in production)
# ---------------------------------------------------------------------------

class InMemoryArtworkFetcher:
    """Serves pages out of a fixed artwork list.

    ``fail_on_pages`` makes the given page numbers raise :class:`FetchError`;
    ``report_metadata=False`` omits the pagination block the way a degraded
    upstream would. With ``record_calls`` each request is appended to
    ``calls``.
    """

    def __init__(
        self,
        artworks: Optional[Iterable[Artwork]] = None,
        *,
        fail_on_pages: Optional[Iterable[int]] = None,
        report_metadata: bool = True,
        latency: float = 0.0,
        record_calls: bool = True,
    ) -> None:
        self._artworks: list[Artwork] = list(artworks or [])
        self.fail_on_pages: set[int] = set(fail_on_pages or ())
        self.report_metadata = report_metadata
        self._latency = latency
        self.record_calls = record_calls
        self.calls: list[tuple[int, int, tuple[str, ...]]] = []

    @classmethod
    def sample(cls, count: int, first_id: int = 1, **kwargs: Any) -> InMemoryArtworkFetcher:
        """Build a fetcher over *count* synthetic artworks with consecutive ids."""
        artworks = [
            Artwork(
                id=first_id + i,
                title=f"Sample Artwork {first_id + i}",
                place_of_origin="Chicago",
                artist_display="Unknown artist",
                date_start=1900 + i % 100,
                date_end=1900 + i % 100,
            )
            for i in range(count)
        ]
        return cls(artworks, **kwargs)

    @property
    def artworks(self) -> list[Artwork]:
        return list(self._artworks)

    async def fetch_page(
        self,
        page_number: int,
        page_size: int,
        fields: Sequence[str],
    ) -> FetchedPage:
        if self.record_calls:
            self.calls.append((page_number, page_size, tuple(fields)))
        # always yield so callers observe a real suspension point
        await asyncio.sleep(self._latency)

        if page_number in self.fail_on_pages:
            raise FetchError(page_number=page_number, reason="simulated upstream failure")

        start = (page_number - 1) * page_size
        records = tuple(self._artworks[start : start + page_size])

        if not self.report_metadata:
            return FetchedPage(records=records, page_number=page_number, page_size=page_size)

        total = len(self._artworks)
        total_pages = max(1, -(-total // page_size))
        return FetchedPage(
            records=records,
            page_number=page_number,
            page_size=page_size,
            total=total,
            total_pages=total_pages,
        )


# ---------------------------------------------------------------------------
# Session registry
# ---------------------------------------------------------------------------

class InMemorySessionRegistry:
    """Keeps one :class:`CatalogSession` per session id.

    At most ``max_sessions`` sessions are held; opening one more closes the
    least recently used session.
    """

    def __init__(
        self,
        session_factory: Callable[[str], CatalogSession],
        max_sessions: int = 1000,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._factory = session_factory
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, CatalogSession] = OrderedDict()

    @property
    def max_sessions(self) -> int:
        return self._max_sessions

    def get(self, session_id: str) -> Optional[CatalogSession]:
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
        return session

    def get_or_create(self, session_id: str) -> CatalogSession:
        session = self.get(session_id)
        if session is None:
            session = self._factory(session_id)
            self._sessions[session_id] = session
            logger.info("Session %s opened", session_id)
            self._evict_overflow()
        return session

    def detached(self, session_id: str) -> CatalogSession:
        """Return a fresh session that is not registered."""
        return self._factory(session_id)

    def _evict_overflow(self) -> None:
        while len(self._sessions) > self._max_sessions:
            session_id, session = self._sessions.popitem(last=False)
            session.close()
            logger.info("Session %s evicted", session_id)

    def close(self, session_id: str) -> bool:
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.close()
        return True

    def close_all(self) -> None:
        for session_id in list(self._sessions):
            self.close(session_id)

    def __len__(self) -> int:
        return len(self._sessions)


# ---------------------------------------------------------------------------
# Event publisher
# ---------------------------------------------------------------------------

class LoggingEventPublisher:
    """Event publisher that logs events."""

    def publish(self, event: Any) -> None:
        logger.info("Domain event: %s", event)
