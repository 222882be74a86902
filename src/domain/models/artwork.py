from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

UNTITLED = "Untitled"
MISSING_TEXT = "-"

DISPLAY_FIELDS: tuple[str, ...] = (
    "id",
    "title",
    "place_of_origin",
    "artist_display",
    "inscriptions",
    "date_start",
    "date_end",
)

SCAN_FIELDS: tuple[str, ...] = ("id", "title")


def _text(payload: Mapping[str, Any], key: str, default: str) -> str:
    value = payload.get(key)
    return default if value is None else str(value)


def _year(payload: Mapping[str, Any], key: str) -> int | None:
    value = payload.get(key)
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class Artwork:
    id: int
    title: str = UNTITLED
    place_of_origin: str = MISSING_TEXT
    artist_display: str = MISSING_TEXT
    inscriptions: str = MISSING_TEXT
    date_start: int | None = None
    date_end: int | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Artwork:
        """Build an artwork from a partial upstream record, defaulting absent fields."""
        raw_id = payload.get("id")
        return cls(
            id=int(raw_id) if raw_id is not None else 0,
            title=_text(payload, "title", UNTITLED),
            place_of_origin=_text(payload, "place_of_origin", MISSING_TEXT),
            artist_display=_text(payload, "artist_display", MISSING_TEXT),
            inscriptions=_text(payload, "inscriptions", MISSING_TEXT),
            date_start=_year(payload, "date_start"),
            date_end=_year(payload, "date_end"),
        )
