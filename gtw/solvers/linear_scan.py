"""
Linear Scan solver.

Ignores feedback entirely: walks the master word list in file order and plays
the first word not yet guessed this game. A floor for every other solver.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class LinearScanSolver(BaseSolver):
    id = "linear_scan"
    name = "Linear Scan"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        allowed: List[str] = state["allowed"]
        guessed = self.guessed(state)
        for w in allowed:
            if len(w) == self.N and w not in guessed:
                return w
        return "a" * self.N
