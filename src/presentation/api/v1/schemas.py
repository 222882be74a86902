"""
Pydantic v2 request/response schemas for the artwork catalog API.

Errors follow RFC 9457 Problem Details.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Base / shared
# ---------------------------------------------------------------------------


class _CatalogModel(BaseModel):
    """Base model reading straight from domain dataclasses."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
    )


class PaginationMeta(BaseModel):
    """Pagination metadata included in every page response."""

    page: int = Field(..., description="Current page number (1-indexed).")
    page_size: int = Field(..., description="Requested page size.")
    total_items: int = Field(..., description="Total number of artworks upstream.")
    total_pages: int = Field(..., description="Total number of pages.")
    first_index: int = Field(..., description="Zero-based offset of the first row.")


# ---------------------------------------------------------------------------
# RFC 9457 Problem Details error response
# ---------------------------------------------------------------------------


class ErrorResponse(BaseModel):
    """Error response following RFC 9457 Problem Details for HTTP APIs.

    See https://www.rfc-editor.org/rfc/rfc9457
    """

    type: str = Field(
        default="about:blank",
        description="A URI reference that identifies the problem type.",
        examples=["https://api.artwork-catalog.example/problems/fetch-failed"],
    )
    title: str = Field(
        ...,
        description="A short, human-readable summary of the problem type.",
        examples=["Upstream Fetch Failed"],
    )
    status: int = Field(..., description="The HTTP status code.", examples=[502])
    detail: str = Field(
        ...,
        description="A human-readable explanation specific to this occurrence.",
        examples=["Failed to fetch page 2: upstream returned 503"],
    )
    instance: str | None = Field(
        default=None,
        description="A URI reference that identifies the specific occurrence.",
        examples=["/api/v1/artworks"],
    )
    errors: list[dict[str, Any]] | None = Field(
        default=None,
        description="Validation error details (when status is 422).",
    )
    added: int | None = Field(
        default=None,
        description="Artworks selected before a bulk selection stopped.",
    )


# ---------------------------------------------------------------------------
# Artwork schemas
# ---------------------------------------------------------------------------


class ArtworkResponse(_CatalogModel):
    id: int = Field(..., description="Stable upstream artwork id.", examples=[27992])
    title: str = Field(..., examples=["A Sunday on La Grande Jatte, 1884"])
    place_of_origin: str = Field(..., examples=["France"])
    artist_display: str = Field(..., examples=["Georges Seurat\nFrench, 1859-1891"])
    inscriptions: str = Field(..., examples=["-"])
    date_start: int | None = Field(default=None, examples=[1884])
    date_end: int | None = Field(default=None, examples=[1886])


class ArtworkPageResponse(BaseModel):
    """A page of artworks with the selection state of its rows."""

    items: list[ArtworkResponse]
    pagination: PaginationMeta
    selected_ids: list[int] = Field(
        default_factory=list,
        description="Ids on this page that are currently selected, in page order.",
    )
    selection_count: int = Field(..., description="Total selected across all pages.")


# ---------------------------------------------------------------------------
# Selection schemas
# ---------------------------------------------------------------------------


class SelectionResponse(BaseModel):
    selected_ids: list[int] = Field(..., description="All selected artwork ids, ascending.")
    count: int


class PageSelectionUpdate(BaseModel):
    """Complete selection state of the current page.

    Rows on the page that are not listed here are deselected.
    """

    selected_ids: list[int] = Field(default_factory=list, examples=[[27992, 28560]])


class PageSelectionResponse(BaseModel):
    page: int
    selected_ids: list[int]
    selection_count: int


class BulkSelectRequest(BaseModel):
    count: int = Field(
        ...,
        description="Desired total number of selected artworks. Zero or less does nothing.",
        examples=[20],
    )


class BulkSelectResponse(BaseModel):
    target: int
    added: int
    pages_scanned: int
    exhausted: bool = Field(..., description="The catalog ran out before reaching the target.")
    selection_count: int


class SelectionChangeResponse(BaseModel):
    artwork_id: int
    selected: bool
    changed: bool
    selection_count: int
