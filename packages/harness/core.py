"""
Self-play harness primitives.

- run_case:  play a single puzzle (one hidden answer) with a Solver, always
             taking its top recommendation and feeding back the true score.
- run_batch: run many puzzles in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or tests without changes.
"""

from __future__ import annotations
import time
from typing import Dict, List, Tuple
from packages.engine import score, is_solved

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6

def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")

def run_case(
        solver,
        answer: str,
        *,
        max_turns: int = WORDLE_MAX_TURNS,
        exclude: str = "",
) -> Dict:
    """
    Play one game until the solver wins, runs out of candidates, or the turn
    budget is exhausted.

    Args:
        solver:        a packages.solver.Solver (reset before the game starts)
        answer:        the hidden word for this case
        max_turns:     must be 6 (Wordle rule; enforced)
        exclude:       letters the solver must never suggest

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float), answer (str),
            history (list[(guess, score)]), remaining (list[int] after each turn)
    """
    _assert_wordle_turns(max_turns)
    answer = answer.strip().lower()

    solver.reset()

    history: List[Tuple[str, str]] = []
    remaining: List[int] = []
    success = False

    t0 = time.perf_counter()
    for _ in range(max_turns):
        top = solver.guess(exclude=exclude, max_results=1)
        if not top:
            # nothing consistent left (answer outside the dictionary)
            break
        guess = next(iter(top))

        patt = score(guess, answer)
        history.append((guess, patt))
        remaining.append(solver.update(guess, patt))

        if is_solved(patt):
            success = True
            break

    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history,
        "remaining": remaining,
    }

def run_batch(
        solver,
        answers: List[str],
        *,
        max_turns: int = WORDLE_MAX_TURNS,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K answers
    (after filtering to the solver's word length) are used to speed up quick
    experiments.
    """
    _assert_wordle_turns(max_turns)

    pool = [w for w in answers if len(w) == solver.word_length]
    if sample is not None:
        pool = pool[:sample]

    return [run_case(solver, ans, max_turns=max_turns) for ans in pool]
