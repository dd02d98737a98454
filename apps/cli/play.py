# apps/cli/play.py
"""
Interactive shell around the Solver.

Commands (case-insensitive, first letter is enough):
  q / quit                      stop
  h / help                      show the command list
  g / guess [exclude]           top suggestions, optionally avoiding letters
  f / feedback <guess> <score>  apply feedback, e.g. "f adieu 11020"
  r / reset                     start a new puzzle
  s / status                    remaining count and feedback so far

Example session:
    $ python -m apps.cli.play --N 5
    > g
    > f slate 01020
"""

from __future__ import annotations

import argparse
import logging
from typing import Dict, Tuple

from packages.engine import MalformedFeedback
from packages.solver import Solver, DEFAULT_MAX_RESULTS

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

HELP = (
    "\n(Q) Quit: Quit playing\n"
    "(H) Help: Show this menu\n"
    "(G) Guess: Show top guesses as \"{word} = ( {letterFrequencyScore}, {letterAtPositionFrequencyScore} )\"\n"
    "    Optionally pass letters to avoid, e.g. \"g xyz\"\n"
    "(F) Feedback: Give feedback on last guess. Example: \"f adieu 11020\"\n"
    "(R) Reset: Reset the solver state for a new puzzle\n"
    "(S) Status: Show remaining word count and feedback so far"
)


def feedback_help(N: int) -> str:
    return (
        f"Usage: \"feedback {{ guess }} {{ score }}\", where score is composed of {N} digits from 0 to 2.\n"
        "0: Wrong letter\n"
        "1: Correct letter, wrong position\n"
        "2: Correct letter, correct position\n"
        "Example: \"f adieu 11020\""
    )


def format_guesses(guesses: Dict[str, Tuple[float, float]]) -> str:
    if not guesses:
        return "No candidates left."
    return "\n".join(f"{w} = ( {f:.6g}, {p:.6g} )" for w, (f, p) in guesses.items())


def _cmd(token: str, *names: str) -> bool:
    return token.lower() in names


def handle(line: str, solver: Solver, top: int = DEFAULT_MAX_RESULTS) -> str | None:
    """
    Run one command line against `solver`; return the text to show, or None
    to quit.
    """
    parts = line.split()
    if not parts:
        return ""
    cmd = parts[0]

    if _cmd(cmd, "q", "quit"):
        return None
    if _cmd(cmd, "h", "help"):
        return HELP
    if _cmd(cmd, "g", "guess"):
        exclude = parts[1] if len(parts) > 1 else ""
        return format_guesses(solver.guess(exclude=exclude, max_results=top))
    if _cmd(cmd, "f", "feedback"):
        if len(parts) != 3:
            return feedback_help(solver.word_length)
        try:
            left = solver.update(parts[1], parts[2])
        except MalformedFeedback as e:
            return str(e)
        return f"{left} word(s) remain\n" + format_guesses(solver.guess(max_results=top))
    if _cmd(cmd, "r", "reset"):
        return f"{solver.reset()} word(s) remain"
    if _cmd(cmd, "s", "status"):
        lines = [f"{solver.remaining_count()} of {len(solver.index)} word(s) remain"]
        lines += [f"  {g} {s}" for g, s in solver.history]
        return "\n".join(lines)
    return "Invalid command"


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordle-assist — interactive solver")
    ap.add_argument("--N", type=int, default=5, help="word length (e.g., 5 or 6)")
    ap.add_argument("--words", help="word list path or bundled name (default: bundled words_<N>.txt)")
    ap.add_argument("--top", type=int, default=DEFAULT_MAX_RESULTS, help="suggestions to show")
    ap.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS,
                    help="logging level")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(levelname)s %(name)s: %(message)s")

    print("\n--- Welcome to Wordle Solver ---")
    solver = Solver(args.N, args.words)
    print(f"Loaded {len(solver.index)} words.")
    print(HELP)

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            break
        out = handle(line, solver, top=args.top)
        if out is None:
            break
        if out:
            print(out)
    print("Goodbye.")


if __name__ == "__main__":
    main()
