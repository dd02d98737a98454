"""
Word-list I/O.

- read_lines / write_lines: plain UTF-8 line files.
- bundled_wordlist:          a word list shipped inside this package (data/).
- wordlist_path:             a path or bundled name resolved to a readable file.
- clean_words:               normalise raw lines into usable N-letter words.
- load_words:                resolve a path or bundled name into a clean,
                             de-duplicated list of N-letter words.

Loading is lenient: entries of the wrong length or with characters outside
a-z are skipped with a warning instead of silently corrupting the
per-position index. The strict, report-producing check lives in
`validator.validate_wordlist`.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from importlib import resources
from pathlib import Path
from typing import Iterable, Iterator, List

from packages.engine.errors import DictionaryUnavailable
from packages.engine.validation import is_valid_word

logger = logging.getLogger(__name__)

DATA_PACKAGE = "packages.datasets"


def default_wordlist_name(N: int) -> str:
    return f"words_{N}.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def bundled_wordlist(name: str):
    """Traversable for data/<name> inside this package (may not exist)."""
    return resources.files(DATA_PACKAGE).joinpath("data").joinpath(name)


@contextmanager
def wordlist_path(source: Path | str | None, N: int) -> Iterator[Path]:
    """
    Resolve a word source to a readable file path.

    An existing file wins; otherwise `source` names a bundled list under
    data/ (None means words_<N>.txt). Raises DictionaryUnavailable when
    neither exists.
    """
    if source is None:
        source = default_wordlist_name(N)
    p = Path(source)
    if p.is_file():
        yield p
        return
    res = bundled_wordlist(str(source))
    if not res.is_file():
        raise DictionaryUnavailable(f"word list not found: {source}")
    with resources.as_file(res) as fp:
        yield fp


def _read_source(source: Path | str, N: int) -> List[str]:
    """Raw lines of the resolved source; read failures become DictionaryUnavailable."""
    with wordlist_path(source, N) as p:
        try:
            return read_lines(p)
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryUnavailable(f"cannot read word list {source}: {e}") from e


def clean_words(lines: Iterable[str], N: int, label: str = "<words>") -> List[str]:
    """
    Lowercase, drop blanks and duplicates, skip anything that is not an
    N-letter a-z word (logged). Order of first appearance is kept.

    Raises DictionaryUnavailable if nothing usable is left.
    """
    words: List[str] = []
    seen = set()
    skipped = 0
    for raw in lines:
        w = raw.strip().lower()
        if not w:
            continue
        if not is_valid_word(w, N):
            skipped += 1
            logger.warning("skipping %r in %s: not a %d-letter a-z word", raw, label, N)
            continue
        if w not in seen:
            seen.add(w)
            words.append(w)

    if not words:
        raise DictionaryUnavailable(f"no valid {N}-letter words in {label}")

    logger.info("loaded %d words from %s (%d skipped)", len(words), label, skipped)
    return words


def load_words(source: Path | str | None, N: int) -> List[str]:
    """
    Load the dictionary for word length N.

    Args:
      source : path to a one-word-per-line file, the name of a bundled list,
               or None for the bundled default (words_<N>.txt)
      N      : required word length

    Returns:
      List[str] of lowercase words, first-seen order, no duplicates.

    Raises:
      DictionaryUnavailable if the source cannot be read or yields no word.
    """
    if source is None:
        source = default_wordlist_name(N)
    return clean_words(_read_source(source, N), N, label=str(source))
