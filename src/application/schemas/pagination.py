"""Pagination request validation.

Provides a ``PaginationParams`` value object that validates 1-based page
numbers and positive page sizes for the navigation and bulk-scan services.
"""

from __future__ import annotations

from dataclasses import dataclass

from domain.exceptions import InvalidPageRequestError

DEFAULT_PAGE: int = 1
DEFAULT_PAGE_SIZE: int = 12


@dataclass(frozen=True)
class PaginationParams:
    """Immutable pagination request parameters.

    ``page`` is 1-based and ``size`` must be at least 1. Unlike a list
    endpoint, out-of-range values are rejected instead of clamped so the
    caller never silently lands on a page it did not ask for.
    """

    page: int = DEFAULT_PAGE
    size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1 or self.size < 1:
            raise InvalidPageRequestError(page_number=self.page, page_size=self.size)

