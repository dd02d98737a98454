"""
Frequency scorer.

For the CURRENT candidate set, build:
  - overall letter counts (total = |candidates| * N)
  - per-position letter counts (total at each position = |candidates|)

Each word then gets two running products, one factor per letter occurrence,
where m is the multiplicity of that letter in the word:

  frequency *= (overall[c] / m - m) / total
  position  *= (at[p][c]   / m - m) / total_at[p]

Dividing by m and subtracting m pushes words with repeated letters down the
ranking. Scores only mean something relative to other words scored from the
same candidate set.

Count tables and products are computed with numpy over an (M, N) array of
letter codes, so a full recompute is a handful of vector operations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Tuple

import numpy as np

from .index import ALPHABET

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordScores:
    """Both score maps for one candidate set; always share the same keys."""
    frequency: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    position: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, word: str) -> Tuple[float, float]:
        return self.frequency[word], self.position[word]

    def __len__(self) -> int:
        return len(self.frequency)

    def __contains__(self, word) -> bool:
        return word in self.frequency


def encode(words: List[str], N: int) -> np.ndarray:
    """(M, N) array of letter codes 0..25."""
    raw = np.frombuffer("".join(words).encode("ascii"), dtype=np.uint8)
    return raw.astype(np.intp).reshape(len(words), N) - ord("a")


def letter_counts(codes: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Return (overall[26], at[N, 26]) counts as floats."""
    overall = np.bincount(codes.ravel(), minlength=len(ALPHABET)).astype(float)
    at = np.stack([
        np.bincount(codes[:, i], minlength=len(ALPHABET)) for i in range(codes.shape[1])
    ]).astype(float)
    return overall, at


def score_words(words: Iterable[str], N: int) -> WordScores:
    """Full recompute of both score maps for `words` (empty in -> empty out)."""
    words = sorted(words)
    logger.debug("scoring %d candidates", len(words))
    if not words:
        return WordScores()

    codes = encode(words, N)
    M = len(words)
    overall, at = letter_counts(codes)
    total = float(M * N)
    total_at = np.full(N, float(M))

    # multiplicity of the letter sitting at each position, per word
    mult = (codes[:, :, None] == codes[:, None, :]).sum(axis=2)

    freq = ((overall[codes] / mult - mult) / total).prod(axis=1)
    pos = ((at[np.arange(N), codes] / mult - mult) / total_at).prod(axis=1)

    return WordScores(
        frequency=MappingProxyType(dict(zip(words, freq.tolist()))),
        position=MappingProxyType(dict(zip(words, pos.tolist()))),
    )
