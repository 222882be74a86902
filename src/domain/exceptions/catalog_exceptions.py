from __future__ import annotations

from typing import Any

PROBLEM_BASE = "https://api.artwork-catalog.example/problems"


class DomainError(Exception):
    """Base class for all domain-layer exceptions.

    Carries HTTP-mapping metadata so the presentation layer can produce
    RFC 9457 Problem Details without knowing exception internals.
    """

    def __init__(
        self,
        detail: str = "",
        *,
        title: str = "Domain Error",
        status_code: int = 400,
        error_type: str = "about:blank",
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.title = title
        self.status_code = status_code
        self.error_type = error_type

    @property
    def extensions(self) -> dict[str, Any]:
        """Extra Problem Details members for this occurrence."""
        return {}


class FetchError(DomainError):
    def __init__(
        self,
        page_number: int = 0,
        reason: str = "",
        upstream_status: int | None = None,
    ) -> None:
        self.page_number = page_number
        self.reason = reason
        self.upstream_status = upstream_status
        super().__init__(
            detail=f"Failed to fetch page {page_number}: {reason}",
            title="Upstream Fetch Failed",
            status_code=502,
            error_type=f"{PROBLEM_BASE}/fetch-failed",
        )

    @property
    def extensions(self) -> dict[str, Any]:
        ext: dict[str, Any] = {"page": self.page_number}
        if self.upstream_status is not None:
            ext["upstream_status"] = self.upstream_status
        return ext


class BulkSelectError(DomainError):
    def __init__(self, added: int = 0, cause: FetchError | None = None) -> None:
        self.added = added
        self.cause = cause
        reason = cause.detail if cause is not None else "unknown failure"
        super().__init__(
            detail=f"Bulk selection aborted after adding {added} artworks: {reason}",
            title="Bulk Selection Failed",
            status_code=502,
            error_type=f"{PROBLEM_BASE}/bulk-select-failed",
        )

    @property
    def extensions(self) -> dict[str, Any]:
        return {"added": self.added}


class BulkSelectCancelledError(BulkSelectError):
    def __init__(self, added: int = 0) -> None:
        super().__init__(added=added)
        self.detail = f"Bulk selection cancelled after adding {added} artworks"
        self.args = (self.detail,)
        self.title = "Bulk Selection Cancelled"
        self.status_code = 409
        self.error_type = f"{PROBLEM_BASE}/bulk-select-cancelled"


class InvalidPageRequestError(DomainError):
    def __init__(self, page_number: int = 0, page_size: int = 0) -> None:
        self.page_number = page_number
        self.page_size = page_size
        super().__init__(
            detail=f"Invalid page request: page={page_number}, page_size={page_size}",
            title="Invalid Page Request",
            status_code=422,
            error_type=f"{PROBLEM_BASE}/invalid-page",
        )
