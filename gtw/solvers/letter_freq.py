"""
Letter-Frequency Solver (distinct-letter coverage).

Idea:
  - On reset, build the relative frequency of each letter over the master
    word list (counts / total letters), as a numpy vector indexed a..z.
  - Each turn, score every unguessed candidate as the sum of its DISTINCT
    letters' relative frequencies. Pick the max; break ties with seeded RNG.

Notes:
  - Frequencies come from the whole word list, not the shrinking candidate
    set, so early and late turns use the same weights.
  - Repeated letters count once ('slate' beats 'sleet' on equal letters).
"""

from __future__ import annotations
from typing import List

import numpy as np

from .base import BaseSolver, register

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def relative_frequencies(words: List[str]) -> np.ndarray:
    """Length-26 vector of letter shares over `words` (sums to 1, or all zeros)."""
    counts = np.zeros(len(ALPHABET), dtype=float)
    for w in words:
        for ch in w:
            i = _INDEX.get(ch)
            if i is not None:
                counts[i] += 1.0
    total = counts.sum()
    return counts / total if total > 0 else counts


@register
class LetterFreqSolver(BaseSolver):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self.freqs = np.zeros(len(ALPHABET), dtype=float)

    def reset(self, *, allowed: List[str], answers: List[str], N: int,
              seed: int | None = None) -> None:
        super().reset(allowed=allowed, answers=answers, N=N, seed=seed)
        self.freqs = relative_frequencies(self.allowed)

    def _score_word(self, w: str) -> float:
        # sorted so anagrams sum in the same order and tie exactly
        idx = sorted({_INDEX[ch] for ch in w if ch in _INDEX})
        return float(self.freqs[idx].sum()) if idx else 0.0

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        allowed: List[str] = state["allowed"]
        guessed = self.guessed(state)

        pool = [w for w in candidates if w not in guessed]
        if not pool:
            pool = [w for w in allowed if w not in guessed]
        if not pool:
            return "a" * self.N  # degenerate; harness will score it and move on

        best_score = None
        best_words: List[str] = []
        for w in pool:
            s = self._score_word(w)
            if best_score is None or s > best_score:
                best_score = s
                best_words = [w]
            elif s == best_score:
                best_words.append(w)

        # Deterministic tie-break using the solver RNG.
        return best_words[self.rng.randrange(len(best_words))]
