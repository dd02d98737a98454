"""
Dictionary index: (letter, position) -> words with that letter there.

Laid out as a fixed 26 x N table of frozensets, built once from the full
word list and never mutated afterwards. Everything the constraint filter
needs is a union or a single cell of this table:

  at(c, i)               words with c exactly at i
  containing(c)          words with c anywhere (union of the row)
  containing_except(c, i) words with c at some position other than i
  words                  the whole dictionary (union of every cell)
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Tuple

from packages.engine.validation import is_valid_word

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def letter_index(c: str) -> int:
    return ord(c) - ord("a")


class DictionaryIndex:
    def __init__(self, words: Iterable[str], N: int):
        if N < 1:
            raise ValueError(f"word length must be positive; got {N}")
        self.N = int(N)

        table = [[set() for _ in range(self.N)] for _ in ALPHABET]
        for w in words:
            if not is_valid_word(w, self.N) or w != w.strip().lower():
                raise ValueError(f"{w!r} is not a lowercase {self.N}-letter word")
            for i, ch in enumerate(w):
                table[letter_index(ch)][i].add(w)

        self._table: Tuple[Tuple[FrozenSet[str], ...], ...] = tuple(
            tuple(frozenset(cell) for cell in row) for row in table
        )
        self._rows: Tuple[FrozenSet[str], ...] = tuple(
            frozenset().union(*row) for row in self._table
        )
        self._words: FrozenSet[str] = frozenset().union(*self._rows)

    def at(self, c: str, i: int) -> FrozenSet[str]:
        return self._table[letter_index(c)][i]

    def containing(self, c: str) -> FrozenSet[str]:
        return self._rows[letter_index(c)]

    def containing_except(self, c: str, i: int) -> FrozenSet[str]:
        row = self._table[letter_index(c)]
        return frozenset().union(*(cell for j, cell in enumerate(row) if j != i))

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word) -> bool:
        return word in self._words
