"""
First-Candidate solver.

Strategy:
  - Guess the first word of the CURRENT candidate set (master list order,
    already filtered by every record in the history and with past guesses
    removed).
  - If the candidate set is empty (the goal is not in the master list), fall
    back to the first unguessed word of the master list.

Deterministic; no RNG involved.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class FirstCandidateSolver(BaseSolver):
    id = "first_candidate"
    name = "First Candidate"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        if candidates:
            return candidates[0]

        guessed = self.guessed(state)
        for w in state["allowed"]:
            if w not in guessed:
                return w
        return "a" * self.N
