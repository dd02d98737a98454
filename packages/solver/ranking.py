"""
Ranker: best next guesses from the current candidates.

Order: frequency score desc, then position score desc, then the word itself
(ascending) so equal scores always come out the same way. Words containing
an excluded letter are dropped before the top-K cut.
"""

from __future__ import annotations

import heapq
from typing import Dict, Iterable, Tuple

from .frequency import WordScores


def top_guesses(candidates: Iterable[str], scores: WordScores, *,
                exclude: str = "", max_results: int = 5) -> Dict[str, Tuple[float, float]]:
    if max_results <= 0:
        return {}

    banned = set(exclude.lower())
    pool = (w for w in candidates if banned.isdisjoint(w))
    best = heapq.nsmallest(
        max_results, pool,
        key=lambda w: (-scores.frequency[w], -scores.position[w], w),
    )
    return {w: scores.get(w) for w in best}
