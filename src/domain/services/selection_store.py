"""Session-scoped set of selected artwork identifiers.

The store knows nothing about pages: membership is independent of whatever
page happens to be loaded, and it only ever changes through explicit
``add`` / ``remove`` calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class SelectionStore:
    def __init__(self, initial: Iterable[int] | None = None) -> None:
        self._ids: set[int] = set(initial or ())

    def add(self, artwork_id: int) -> bool:
        """Select *artwork_id*. Returns ``False`` if it was already selected."""
        if artwork_id in self._ids:
            return False
        self._ids.add(artwork_id)
        return True

    def remove(self, artwork_id: int) -> bool:
        """Deselect *artwork_id*. Returns ``False`` if it was not selected."""
        if artwork_id not in self._ids:
            return False
        self._ids.discard(artwork_id)
        return True

    def contains(self, artwork_id: int) -> bool:
        return artwork_id in self._ids

    def size(self) -> int:
        return len(self._ids)

    def snapshot(self) -> frozenset[int]:
        return frozenset(self._ids)

    def snapshot_intersected_with(self, ids: Iterable[int]) -> set[int]:
        return {artwork_id for artwork_id in ids if artwork_id in self._ids}

    def __contains__(self, artwork_id: object) -> bool:
        return artwork_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._ids))

    def __repr__(self) -> str:
        return f"SelectionStore(size={len(self._ids)})"
