"""
Turn a raw word file into a bundled dictionary for the solver.

Features:
- Keeps only words of exactly --N letters a–z (case-folded to lowercase).
- Removes duplicates; stable order by default, alphabetical with --sort.
- Drops blank lines and anything with digits, hyphens, apostrophes, accents.
- Writes to --out (default: packages/datasets/data/words_<N>.txt).

Usage:
    python -m script.build_wordlist --in raw_words.txt --N 6 --sort
"""

import argparse
from pathlib import Path

from packages.datasets.io import read_lines, write_lines
from packages.engine.validation import is_valid_word


def build_wordlist(lines: list[str], N: int, sort: bool = False) -> list[str]:
    seen, out = set(), []
    for s in lines:
        w = s.strip().lower()
        if is_valid_word(w, N) and w not in seen:
            seen.add(w)
            out.append(w)
    return sorted(out) if sort else out


def main(argv=None):
    ap = argparse.ArgumentParser(description="Build an N-letter dictionary from a raw word file.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--N", type=int, default=5, help="word length to keep")
    ap.add_argument("--out", dest="out", help="output file (default: bundled words_<N>.txt)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (otherwise keep original order)")
    args = ap.parse_args(argv)

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else Path("packages/datasets/data") / f"words_{args.N}.txt"

    lines = read_lines(inp)
    out = build_wordlist(lines, args.N, sort=args.sort)
    if not out:
        raise SystemExit(f"No {args.N}-letter words found in {inp}")

    write_lines(out, outp)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {outp} ({len(out)} words)")


if __name__ == "__main__":
    main()
