from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class CatalogEvent:
    session_id: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    event_type: str = ""


@dataclass
class PageLoaded(CatalogEvent):
    event_type: str = "PageLoaded"
    page_number: int = 1
    page_size: int = 0
    total_records: int = 0


@dataclass
class PageLoadFailed(CatalogEvent):
    event_type: str = "PageLoadFailed"
    page_number: int = 1
    page_size: int = 0
    reason: str = ""


@dataclass
class BulkSelectionCompleted(CatalogEvent):
    event_type: str = "BulkSelectionCompleted"
    target: int = 0
    added: int = 0
    pages_scanned: int = 0
    exhausted: bool = False


@dataclass
class BulkSelectionAborted(CatalogEvent):
    event_type: str = "BulkSelectionAborted"
    target: int = 0
    added: int = 0
    cancelled: bool = False
    reason: str = ""
