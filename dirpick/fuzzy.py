"""Abbreviation scoring used by query selection.

``powierza_score`` measures how well a typed pattern abbreviates a name: it
matches the pattern as a subsequence of the name and counts the gaps between
consecutive matched characters, minimized over every possible alignment.
"""

from __future__ import annotations


def powierza_score(pattern: str, text: str) -> int | None:
    """Return the Powierża coefficient of ``pattern`` against ``text``.

    ``0`` means ``pattern`` occurs contiguously, higher values mean more gaps,
    and ``None`` means ``pattern`` is not a subsequence of ``text``. Matching is
    case-sensitive.
    """
    if not pattern:
        return 0
    if len(pattern) > len(text):
        return None

    # best[j]: fewest gaps for the current pattern prefix ending exactly at text[j].
    best: list[int | None] = [0 if ch == pattern[0] else None for ch in text]
    for needle in pattern[1:]:
        current: list[int | None] = [None] * len(text)
        detached: int | None = None
        for j, ch in enumerate(text):
            if j >= 2:
                earlier = best[j - 2]
                if earlier is not None and (detached is None or earlier < detached):
                    detached = earlier
            if ch != needle:
                continue
            candidates: list[int] = []
            if j >= 1 and best[j - 1] is not None:
                candidates.append(best[j - 1])
            if detached is not None:
                candidates.append(detached + 1)
            if candidates:
                current[j] = min(candidates)
        best = current

    scores = [score for score in best if score is not None]
    return min(scores) if scores else None
