"""
Run statistics over a list of per-game results (as returned by run_case).
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np


def summarize(results: List[Dict], max_tries: int) -> Dict:
    """
    Aggregate game results into a JSON-serializable summary.

    Keys:
      games, wins, losses, win_rate,
      mean_guesses / median_guesses (over wins only; None without wins),
      histogram: list where histogram[k-1] = number of wins in k guesses
    """
    games = len(results)
    win_guesses = np.array([r["guesses"] for r in results if r["success"]], dtype=int)
    wins = int(win_guesses.size)

    hist = np.bincount(win_guesses, minlength=max_tries + 1)[1:max_tries + 1] \
        if wins else np.zeros(max_tries, dtype=int)

    return {
        "games": games,
        "wins": wins,
        "losses": games - wins,
        "win_rate": (wins / games) if games else 0.0,
        "mean_guesses": float(win_guesses.mean()) if wins else None,
        "median_guesses": float(np.median(win_guesses)) if wins else None,
        "histogram": [int(x) for x in hist],
    }


def pretty_stats(summary: Dict, label: str = "") -> str:
    """
    One line for the console, e.g.
      letter_freq | games=100 wins=97 (97.0%) | mean=4.12 median=4.0 | hist=[0, 3, 30, 40, 20, 4]
    """
    mean = summary["mean_guesses"]
    median = summary["median_guesses"]
    mean_s = f"{mean:.2f}" if mean is not None else "n/a"
    median_s = f"{median:.1f}" if median is not None else "n/a"
    head = f"{label} | " if label else ""
    return (
        f"{head}games={summary['games']} wins={summary['wins']} "
        f"({100.0 * summary['win_rate']:.1f}%) "
        f"| mean={mean_s} median={median_s} | hist={summary['histogram']}"
    )
