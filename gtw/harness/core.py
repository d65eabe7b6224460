"""
Game harness core primitives.

- run_case:  play a single game (the engine's current goal) with a solver.
- run_batch: play many goals in sequence with one solver.
- Enforces the per-game try cap (MAX_TRIES) at the harness layer; running out
  of tries is a lost game, not an error.

These functions are UI-agnostic so they can be reused by the CLI, a notebook,
or tests without changes.
"""

from __future__ import annotations
import logging
import time
from typing import Dict, List, Iterable

from gtw.engine import (GameEngine, GuessRecord, LengthMismatchError, MalformedSignatureError,
                        filter_candidates, is_solved)

logger = logging.getLogger(__name__)

# Default per-game try budget.
MAX_TRIES = 6


def _check_max_tries(max_tries: int) -> None:
    if max_tries < 1:
        raise ValueError(f"max_tries must be a positive integer; got {max_tries}")


def run_case(
        solver,
        engine: GameEngine,
        *,
        allowed: Iterable[str],
        answers: Iterable[str] | None = None,
        max_tries: int = MAX_TRIES,
        seed: int | None = None,
) -> Dict:
    """
    Play one game against `engine`'s current goal until the solver wins or the
    try budget is exhausted.

    Args:
        solver:     an object implementing BaseSolver with next_guess(state)
        engine:     game engine holding the hidden goal
        allowed:    the master word list the solver guesses from
        answers:    goal pool handed to solver.reset (defaults to engine.corpus)
        max_tries:  per-game cap on guesses
        seed:       RNG seed to make solver tie-breaks reproducible

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[GuessRecord])
    """
    _check_max_tries(max_tries)
    N = engine.N
    allowed = [w for w in allowed if len(w) == N]
    answers = list(engine.corpus if answers is None else answers)

    # Fresh solver state for every game
    solver.reset(allowed=allowed, answers=answers, N=N, seed=seed)

    history: List[GuessRecord] = []
    candidates = filter_candidates(allowed, history, N)
    n_correct = 0
    success = False
    total_ms = 0.0

    for turn in range(1, max_tries + 1):
        state = {
            "turn": turn,
            "N": N,
            "candidates": candidates,
            "allowed": allowed,
            "history": list(history),
            "n_correct": n_correct,
        }
        t0 = time.perf_counter_ns()
        guess = solver.next_guess(state).strip().lower()
        total_ms += (time.perf_counter_ns() - t0) / 1_000_000.0

        signature, n_correct = engine.score(guess)
        history.append(GuessRecord(guess, signature))
        logger.debug("turn %d: %s %s (%d correct)", turn, guess, signature, n_correct)

        if is_solved(signature):
            success = True
            break

        # Recompute from the full history; a new record can reinterpret old ones
        candidates = filter_candidates(allowed, history, N)
        logger.debug("turn %d: %d candidates left", turn, len(candidates))

    if not success:
        logger.info("%s exhausted %d tries on %r", getattr(solver, "id", "?"), max_tries,
                    engine.cheat())

    return {
        "answer": engine.cheat(),
        "success": success,
        "guesses": len(history),
        "time_ms": total_ms,
        "history": history,
    }


def run_goal(solver, engine: GameEngine, goal: str, **kwargs) -> Dict:
    """
    Set `goal` on the engine and play it with run_case. Evaluation and filter
    errors end this game only: they are logged and the result carries an
    "error" key instead of propagating.
    """
    engine.new_fixed_game(goal)
    try:
        r = run_case(solver, engine, **kwargs)
    except (LengthMismatchError, MalformedSignatureError) as e:
        logger.error("game for %r aborted: %s", goal, e)
        r = {"answer": engine.cheat(), "success": False, "guesses": 0,
             "time_ms": 0.0, "history": [], "error": str(e)}
    r["solver_id"] = getattr(solver, "id", "?")
    return r


def run_batch(
        solver,
        goals: List[str],
        *,
        allowed: List[str],
        answers: List[str] | None = None,
        max_tries: int = MAX_TRIES,
        seed: int | None = None,
) -> List[Dict]:
    """
    Run many games back-to-back, one per goal, in order.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    _check_max_tries(max_tries)
    if not goals:
        return []
    engine = GameEngine(answers if answers else goals, seed=seed)

    out: List[Dict] = []
    for idx, goal in enumerate(goals, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_goal(solver, engine, goal, allowed=allowed, answers=answers,
                            max_tries=max_tries, seed=case_seed))
    return out
