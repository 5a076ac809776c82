"""Viewport windowing for the entry list."""

from __future__ import annotations

VISIBLE_ROWS = 30


def window(total: int, selected: int, capacity: int = VISIBLE_ROWS) -> tuple[int, int]:
    """Return ``(skip, take)`` for the visible slice of ``total`` rows.

    The window tries to put ``selected`` in its middle but is pinned to the
    list boundaries, so near either end the selection sits off-center.
    """
    capacity = max(0, capacity)
    max_skip = max(0, total - capacity)
    skip = min(max(0, selected - capacity // 2), max_skip)
    take = min(capacity, max(0, total))
    return skip, take
