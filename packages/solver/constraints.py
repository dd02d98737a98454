"""
Constraint filter: shrink a candidate set with one round of feedback.

Per guess letter c at position i with mark m:

  '2'  keep words with c at i.
  '1'  keep words with c somewhere other than i, and drop words with c at i.
  '0'  if c got no '1'/'2' anywhere in this guess, drop every word with c.
       Otherwise this is a surplus copy of a repeated letter: only drop
       words with c exactly at i.

Then, for every letter that got at least one '1'/'2', require at least that
many copies in the word (lower bound for repeated letters).

Every step is an intersection or difference against the incoming set, so
the result never grows and does not depend on letter order.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import FrozenSet, Iterable

from packages.engine.scoring import ABSENT, CORRECT, PRESENT
from .index import DictionaryIndex

logger = logging.getLogger(__name__)


def apply_feedback(index: DictionaryIndex, candidates: Iterable[str],
                   guess: str, score: str) -> FrozenSet[str]:
    """
    Return the subset of `candidates` consistent with (guess, score).

    `guess` and `score` are assumed well-formed (see engine.validation);
    an empty result is a valid outcome.
    """
    guess = guess.lower()
    hits = Counter(c for c, m in zip(guess, score) if m != ABSENT)

    result = set(candidates)
    before = len(result)

    for i, (c, m) in enumerate(zip(guess, score)):
        if m == CORRECT:
            result &= index.at(c, i)
        elif m == PRESENT:
            result &= index.containing_except(c, i)
            result -= index.at(c, i)
        elif hits[c]:
            result -= index.at(c, i)
        else:
            result -= index.containing(c)

    # Lower bound must run after every per-position mark.
    for c, need in hits.items():
        result = {w for w in result if w.count(c) >= need}

    logger.debug("feedback %s/%s: %d -> %d candidates", guess, score, before, len(result))
    return frozenset(result)
