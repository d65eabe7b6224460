"""
Game engine: owns the corpus, the RNG and the hidden goal word.

Strategies never see this object. They get the history and the candidate set;
the harness is the only thing that talks to the engine.
"""

from __future__ import annotations

import logging
import random
import time
from typing import List, Sequence, Tuple

from .errors import EmptyCorpusError
from .scoring import evaluate

logger = logging.getLogger(__name__)


class GameEngine:

    def __init__(self, corpus: Sequence[str], seed: int | None = None):
        if len(corpus) == 0:
            raise EmptyCorpusError("cannot build a game engine from an empty corpus")
        self._corpus: List[str] = [w.strip().lower() for w in corpus]
        self._rng = random.Random()
        self.set_seed(seed)
        self._goal = ""
        self.new_game()

    @property
    def corpus(self) -> List[str]:
        return self._corpus

    @property
    def N(self) -> int:
        return len(self._goal)

    def set_seed(self, seed: int | None) -> None:
        """None or a negative seed means "seed from the clock"."""
        if seed is None or seed < 0:
            seed = time.time_ns()
        self._rng.seed(seed)

    def new_game(self) -> str:
        """Pick a uniformly random goal from the corpus and return it."""
        self._goal = self._corpus[self._rng.randrange(len(self._corpus))]
        logger.debug("new goal selected (%d letters)", len(self._goal))
        return self._goal

    def new_fixed_game(self, word: str) -> str:
        """Set the goal explicitly. The word need not be in the corpus."""
        self._goal = word.strip().lower()
        return self._goal

    def cheat(self) -> str:
        return self._goal

    def score(self, guess: str) -> Tuple[str, int]:
        """(signature, n_correct) for `guess` against the current goal."""
        return evaluate(self._goal, guess)
