"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions (one digit per position):
  - '2' : correct letter in the correct position
  - '1' : correct letter in the wrong position
  - '0' : letter not present (or present fewer times than guessed)

This implementation is:
  - N-aware (any word length)
  - duplicate-safe (respects true letter multiplicities in the answer)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all exact hits and counts the remaining (unmatched)
     letters from the answer.
  2) Second pass marks present-elsewhere only if the letter still has
     remaining count.
"""

from collections import Counter
from typing import Literal

ABSENT = "0"
PRESENT = "1"
CORRECT = "2"

Mark = Literal["0", "1", "2"]
MARKS = frozenset((ABSENT, PRESENT, CORRECT))


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback string for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Returns:
      - string of length N composed only of '0', '1', '2'

    Examples:
      score("belle", "level") -> "02111"
      score("lemon", "level") -> "22000"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    assert len(guess) == len(answer), "Guess and answer must be the same length"

    n = len(guess)
    pattern = [ABSENT] * n

    # Pass 1: exact hits, and leftover answer letters for pass 2.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = CORRECT
        else:
            remaining[a] += 1

    # Pass 2: present-elsewhere capped by the answer's true multiplicity.
    for i, g in enumerate(guess):
        if pattern[i] == CORRECT:
            continue
        if remaining[g] > 0:
            pattern[i] = PRESENT
            remaining[g] -= 1

    return "".join(pattern)


def is_solved(pattern: str) -> bool:
    """True when every position is an exact hit."""
    return bool(pattern) and all(ch == CORRECT for ch in pattern)
