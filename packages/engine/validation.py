"""
Lightweight word and feedback validation.

Two questions are answered here:
  - "Is this token a usable N-letter word?" (dictionary loading, CLIs)
  - "Is this (guess, score) pair well-formed?" (before the solver filters)

A word is usable iff it is a string of exactly N letters a-z once lowercased.
A score is well-formed iff it has exactly N characters drawn from '0', '1', '2'.

The solver calls `validate_feedback` itself, so a malformed pair is rejected
with MalformedFeedback before any state changes.
"""

import re

from .errors import MalformedFeedback
from .scoring import MARKS

_LETTERS = re.compile(r"[a-z]+")


def is_valid_word(word, N: int) -> bool:
    """
    Return True if `word` is an N-letter a-z token (case-insensitive).

    Surrounding whitespace is ignored; anything else (digits, hyphens,
    accented letters) makes the word invalid.
    """
    if not isinstance(word, str):
        return False
    w = word.strip().lower()
    return len(w) == N and _LETTERS.fullmatch(w) is not None


def validate_feedback(guess: str, score: str, N: int) -> None:
    """
    Raise MalformedFeedback unless `guess` is N letters and `score` N marks.

    The messages are meant to be shown to a user as-is.
    """
    if not isinstance(guess, str) or len(guess) != N:
        raise MalformedFeedback(f"Word must be {N} letters.")
    if not is_valid_word(guess, N):
        raise MalformedFeedback("Word must only contain letters")
    if not isinstance(score, str) or len(score) != N:
        raise MalformedFeedback(f"Score must be {N} digits.")
    if any(ch not in MARKS for ch in score):
        raise MalformedFeedback("Score must only contain digits between 0 and 2")
