"""
HTTP data fetcher for the Art Institute of Chicago artworks API.

Implements the ``DataFetcher`` port with ``httpx``. Every failure mode
(transport error, timeout, non-success status, undecodable payload) is
surfaced as a single :class:`FetchError`; no partial data is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional

import httpx

from domain.exceptions import FetchError
from domain.models.artwork import Artwork
from domain.models.page import FetchedPage
from infrastructure.observability.metrics import artwork_fetches_total

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.artic.edu/api/v1/artworks"


class ArticArtworkFetcher:
    """Thin wrapper around the ``/artworks`` listing endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def fetch_page(
        self,
        page_number: int,
        page_size: int,
        fields: Sequence[str],
    ) -> FetchedPage:
        params = {
            "page": page_number,
            "limit": page_size,
            "fields": ",".join(fields),
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.get(self._base_url, params=params)
                resp.raise_for_status()
                payload = resp.json()
        except httpx.HTTPStatusError as exc:
            artwork_fetches_total.labels(outcome="http_error").inc()
            status = exc.response.status_code
            logger.warning("GET %s page %d returned %d", self._base_url, page_number, status)
            raise FetchError(
                page_number=page_number,
                reason=f"upstream returned {status}",
                upstream_status=status,
            ) from exc
        except httpx.HTTPError as exc:
            artwork_fetches_total.labels(outcome="transport_error").inc()
            logger.warning("GET %s page %d failed: %s", self._base_url, page_number, exc)
            raise FetchError(page_number=page_number, reason=str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            artwork_fetches_total.labels(outcome="decode_error").inc()
            logger.warning("GET %s page %d returned undecodable body", self._base_url, page_number)
            raise FetchError(page_number=page_number, reason="response is not valid JSON") from exc

        fetched = _parse_listing(payload, page_number, page_size)
        artwork_fetches_total.labels(outcome="ok").inc()
        logger.debug(
            "Fetched page %d: %d records (total=%s, total_pages=%s)",
            page_number,
            len(fetched.records),
            fetched.total,
            fetched.total_pages,
        )
        return fetched


# ======================================================================
# Payload decoding
# ======================================================================

def _parse_listing(payload: Any, page_number: int, page_size: int) -> FetchedPage:
    if not isinstance(payload, dict):
        artwork_fetches_total.labels(outcome="decode_error").inc()
        raise FetchError(page_number=page_number, reason="response body is not a JSON object")

    data = payload.get("data") or []
    pagination = payload.get("pagination") or {}
    if not isinstance(data, list) or not isinstance(pagination, dict):
        artwork_fetches_total.labels(outcome="decode_error").inc()
        raise FetchError(page_number=page_number, reason="unexpected listing shape")

    try:
        records = tuple(Artwork.from_payload(item) for item in data)
    except (AttributeError, TypeError, ValueError) as exc:
        artwork_fetches_total.labels(outcome="decode_error").inc()
        raise FetchError(page_number=page_number, reason=f"malformed record: {exc}") from exc

    total = _optional_int(pagination.get("total"))
    total_pages = _optional_int(pagination.get("total_pages"))
    if total is None and total_pages is not None:
        total = total_pages * page_size

    return FetchedPage(
        records=records,
        page_number=page_number,
        page_size=page_size,
        total=total,
        total_pages=total_pages,
    )


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
