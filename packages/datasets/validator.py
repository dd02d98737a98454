"""
Dataset validator for dictionary word lists.

What this module does:
- Validate a single word list (one word per line) for word length N.
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

The solver itself loads leniently (see io.load_words); this report is what
the batch CLI records so a run can be traced back to the exact list used.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "packages/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class ValidationReport:
    """Validation result for one word list."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have exact length N
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                invalid += 1
                continue
            wl = w.lower()
            # require already-lowercase & ascii-alphabetic & exact length
            if wl == w and wl.isascii() and wl.isalpha() and len(wl) == N:
                valid.append(wl)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(N: int, path: str | Path) -> Dict:
    """
    Validate a dictionary word list for length N.

    Parameters
    ----------
    N : int
        Word length (e.g., 5 or 6).
    path : str | Path
        Path to the word list (one word per line).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport) with counts,
        SHA-256, invalid/duplicate diagnostics, a strict `passed` flag
        (non-empty, no invalid lines, no duplicates) and `issues`.
    """
    p = Path(path)
    if not p.exists():
        rep = ValidationReport(N=N, path=str(path), exists=False, count=0,
                               unique_count=0, invalid_lines=0, sha256="",
                               issues=[f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    rep = ValidationReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
    )

    if rep.count == 0:
        rep.issues.append("word list contains 0 valid words")
    if invalid:
        rep.issues.append(f"word list has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        rep.issues.append("word list contains duplicate lines")

    rep.passed = not rep.issues
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=2309 (uniq=2309, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
