# apps/cli/run.py
"""
CLI entry point for self-play runs over a dictionary.

This script:
  1) Validates the word list (prints counts + SHA, flags invalid/duplicate lines).
  2) Builds a Solver from it.
  3) Plays every word (or a seeded sample) as the hidden answer, always taking
     the solver's top recommendation, with a live progress indicator, and writes:
       - CSV:  per-case results + guess/score history columns
       - JSON: manifest with config, word-list hash, summary stats
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time

from tqdm import tqdm

from packages.datasets import validate_wordlist, pretty_summary, wordlist_path
from packages.harness import run_case, WORDLE_MAX_TURNS
from packages.harness.io import write_csv, write_manifest, report_paths, run_stamp
from packages.solver import Solver

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _validate(args) -> dict:
    """Validate the list the solver will load (file path or bundled name)."""
    with wordlist_path(args.words, args.N) as p:
        return validate_wordlist(args.N, p)


def main(argv=None):
    """
    Parse CLI args, validate the word list, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordle-assist — self-play over a dictionary")
    ap.add_argument("--N", type=int, default=5, help="word length (e.g., 5 or 6)")
    ap.add_argument("--words", help="word list path or bundled name (default: bundled words_<N>.txt)")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of words (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS,
                    help="logging level")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate word list and print a one-liner summary
    rep = _validate(args)
    print(pretty_summary(rep))

    # 2) Build the solver (DictionaryUnavailable propagates: nothing to play without words)
    solver = Solver(args.N, args.words)
    words = sorted(solver.index.words)

    # 3) Choose cases (deterministic sample by seed)
    if args.sample and args.sample < len(words):
        rng = random.Random(args.seed)
        pool = list(words)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = words

    total = len(cases)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Playing", unit="game") if mode == "bar" else cases

    # 5) Play
    for idx, ans in enumerate(iterator, 1):
        results.append(run_case(solver, ans, max_turns=WORDLE_MAX_TURNS))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 6) Write outputs (CSV + manifest)
    csv_path, manifest_path = report_paths(args.outdir, run_stamp())
    write_csv(results, csv_path, max_turns=WORDLE_MAX_TURNS, N=args.N)
    manifest = write_manifest(manifest_path, config=vars(args), wordlist=rep, results=results)

    print(f"Solved {manifest['solved']}/{manifest['num_cases']} "
          f"(mean {manifest['mean_guesses']} guesses)")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
