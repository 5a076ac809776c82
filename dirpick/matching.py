"""Best-match selection for the incremental query.

Only directories take part in matching. Files stay visible in the list but a
query never lands on one.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .entries import Entry
from .fuzzy import powierza_score

Scorer = Callable[[str, str], "int | None"]


def is_fuzzy_candidate(entry: Entry) -> bool:
    """Return whether ``entry`` may be selected by a query."""
    return entry.is_dir


def select_best_match(
    query: str,
    entries: Sequence[Entry],
    scorer: Scorer = powierza_score,
) -> int | None:
    """Return index of the best directory match for ``query``, or ``None``.

    Candidates are ranked by ``(score, name length)``; lower wins and ties keep
    listing order. Names are lowercased before scoring, the query is not.
    """
    best_idx: int | None = None
    best_key: tuple[int, int] | None = None
    for idx, entry in enumerate(entries):
        if not is_fuzzy_candidate(entry):
            continue
        name = entry.name.lower()
        score = scorer(query, name)
        if score is None:
            continue
        key = (score, len(name))
        if best_key is None or key < best_key:
            best_idx = idx
            best_key = key
    return best_idx
