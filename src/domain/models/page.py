from __future__ import annotations

import math
from dataclasses import dataclass, field

from domain.models.artwork import Artwork


@dataclass(frozen=True)
class Page:
    """One server-delivered window of artworks plus the total-count metadata."""

    records: tuple[Artwork, ...] = field(default_factory=tuple)
    page_number: int = 1
    page_size: int = 12
    total_records: int = 0

    @classmethod
    def empty(cls, page_number: int = 1, page_size: int = 12) -> Page:
        return cls(records=(), page_number=page_number, page_size=page_size, total_records=0)

    @property
    def ids(self) -> list[int]:
        return [record.id for record in self.records]

    @property
    def first_index(self) -> int:
        """Zero-based offset of the first row, as a paginator widget expects it."""
        return (self.page_number - 1) * self.page_size

    @property
    def total_pages(self) -> int:
        if self.total_records == 0:
            return 1
        return math.ceil(self.total_records / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1


@dataclass(frozen=True)
class FetchedPage:
    """Raw result of a single upstream page request.

    ``total`` and ``total_pages`` are ``None`` when the upstream response
    carried no pagination metadata.
    """

    records: tuple[Artwork, ...]
    page_number: int
    page_size: int
    total: int | None = None
    total_pages: int | None = None

    @property
    def has_more(self) -> bool:
        return self.total_pages is not None and self.page_number < self.total_pages

    def resolved_total(self) -> int:
        if self.total:
            return self.total
        if self.total_pages:
            return self.total_pages * self.page_size
        return len(self.records)
