"""
Report files for self-play batches.

A batch produces two files sharing one UTC stamp:
  run_<stamp>.csv            one row per game, guesses and scores spread
                             over fixed turn columns
  run_<stamp>_manifest.json  CLI config, word-list report, batch summary

Score strings go out as "'00120": a bare 00120 would be read back by
spreadsheet apps as the number 120.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple
import csv
import datetime as dt
import json


def run_stamp() -> str:
    """UTC time as 20250820T024121Z, used to name one batch's files."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def report_paths(outdir: str | Path, stamp: str) -> Tuple[Path, Path]:
    """(csv, manifest) paths for a batch; creates `outdir`."""
    out = Path(outdir)
    out.mkdir(parents=True, exist_ok=True)
    return out / f"run_{stamp}.csv", out / f"run_{stamp}_manifest.json"


def summarize(results: List[Dict]) -> Dict:
    """Games played, games solved, mean guesses over the solved ones."""
    solved = [r for r in results if r["success"]]
    mean = sum(r["guesses"] for r in solved) / len(solved) if solved else 0.0
    return {"num_cases": len(results), "solved": len(solved), "mean_guesses": round(mean, 4)}


def write_csv(results: List[Dict], path: str | Path, max_turns: int, N: int) -> str:
    """
    One row per game: N, answer, success, guesses, time_ms, remaining
    (candidates left after the last turn), then guess_i / score_i for
    i = 1..max_turns, blank past the end of the game.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    turns = range(1, max_turns + 1)
    fields = ["N", "answer", "success", "guesses", "time_ms", "remaining"]
    fields += [f"{col}_{i}" for i in turns for col in ("guess", "score")]

    with p.open("w", newline="", encoding="utf-8") as f:
        out = csv.DictWriter(f, fieldnames=fields, restval="")
        out.writeheader()
        for r in results:
            row = {
                "N": N,
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "remaining": (r.get("remaining") or [""])[-1],
            }
            for i, (g, patt) in enumerate(r.get("history", [])[:max_turns], start=1):
                row[f"guess_{i}"] = g
                row[f"score_{i}"] = "'" + patt
            out.writerow(row)

    return str(p)


def write_manifest(path: str | Path, *, config: Dict, wordlist: Dict, results: List[Dict]) -> Dict:
    """Dump config + word-list report + batch summary as JSON; returns the manifest."""
    manifest = {"config": config, "wordlist": wordlist, **summarize(results)}
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return manifest
