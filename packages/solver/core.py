"""
The Solver: one object owning the whole puzzle state.

State:
  - index       DictionaryIndex, built once, read-only
  - candidates  words still consistent with every accepted feedback
  - scores      frequency / position scores for exactly those candidates
  - history     accepted (guess, score) pairs since the last reset

Candidates and scores are only ever replaced together (`_replace_candidates`),
so callers never observe one without the other.

Typical use:
    s = Solver(5)
    s.guess()                 # {'slate': (f, p), ...}
    s.update("slate", "01020")
    s.reset()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Mapping, Tuple

from packages.datasets.io import clean_words, load_words
from packages.engine.validation import validate_feedback
from .constraints import apply_feedback
from .frequency import WordScores, score_words
from .index import DictionaryIndex
from .ranking import top_guesses

logger = logging.getLogger(__name__)

DEFAULT_WORD_LENGTH = 5
DEFAULT_MAX_RESULTS = 5


class Solver:
    def __init__(self, word_length: int = DEFAULT_WORD_LENGTH,
                 source: Path | str | None = None):
        """
        Load the dictionary (path, bundled name, or the bundled default for
        `word_length`) and score it.

        Raises DictionaryUnavailable if no usable word list can be loaded.
        """
        word_length = int(word_length)
        if word_length < 1:
            raise ValueError(f"word length must be positive; got {word_length}")
        self._setup(load_words(source, word_length), word_length)

    @classmethod
    def from_words(cls, words: Iterable[str],
                   word_length: int = DEFAULT_WORD_LENGTH) -> "Solver":
        """Build a solver from an in-memory word list (same cleaning rules)."""
        word_length = int(word_length)
        if word_length < 1:
            raise ValueError(f"word length must be positive; got {word_length}")
        solver = cls.__new__(cls)
        solver._setup(clean_words(words, word_length), word_length)
        return solver

    def _setup(self, words: List[str], word_length: int) -> None:
        self.word_length = word_length
        self._index = DictionaryIndex(words, word_length)
        self._candidates: FrozenSet[str] = frozenset()
        self._scores = WordScores()
        self._history: List[Tuple[str, str]] = []
        self._replace_candidates(self._index.words)
        logger.debug("indexed %d words of length %d", len(self._index), word_length)

    def _replace_candidates(self, words: FrozenSet[str]) -> None:
        scores = score_words(words, self.word_length)
        self._candidates, self._scores = words, scores

    # ---- read-only views ----

    @property
    def index(self) -> DictionaryIndex:
        return self._index

    @property
    def candidates(self) -> FrozenSet[str]:
        return self._candidates

    @property
    def frequency_scores(self) -> Mapping[str, float]:
        return self._scores.frequency

    @property
    def position_scores(self) -> Mapping[str, float]:
        return self._scores.position

    @property
    def history(self) -> List[Tuple[str, str]]:
        return list(self._history)

    def remaining_count(self) -> int:
        return len(self._candidates)

    def __len__(self) -> int:
        return len(self._candidates)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(word_length={self.word_length}, "
                f"remaining={len(self._candidates)}/{len(self._index)})")

    # ---- operations ----

    def guess(self, exclude: str = "",
              max_results: int = DEFAULT_MAX_RESULTS) -> Dict[str, Tuple[float, float]]:
        """
        Top `max_results` candidates as {word: (frequency, position)}, best
        first, skipping words that contain any letter of `exclude`.
        """
        return top_guesses(self._candidates, self._scores,
                           exclude=exclude, max_results=max_results)

    def update(self, guess: str, score: str) -> int:
        """
        Apply feedback for `guess` ('0' absent, '1' wrong spot, '2' right spot)
        and return how many candidates remain.

        Raises MalformedFeedback (state untouched) on a bad guess/score.
        """
        validate_feedback(guess, score, self.word_length)
        guess = guess.lower()
        remaining = apply_feedback(self._index, self._candidates, guess, score)
        self._replace_candidates(remaining)
        self._history.append((guess, score))
        return len(self._candidates)

    def reset(self) -> int:
        """Back to the full dictionary; history is cleared."""
        self._replace_candidates(self._index.words)
        self._history.clear()
        return len(self._candidates)
