from __future__ import annotations
import random
from typing import Dict, List, Set, Type

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A guessing strategy. The harness calls reset() before every game, then
    next_guess(state) once per turn. `state` carries:

      - "turn":       1-based turn number
      - "N":          word length
      - "candidates": words still consistent with the history (List[str])
      - "allowed":    the master word list (List[str])
      - "history":    List[GuessRecord]; empty means a new game
      - "n_correct":  '+' count of the most recent guess (0 on turn 1)

    Anything a solver remembers between turns lives on the instance and is
    cleared by reset(); nothing is kept at module level.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 5
        self.allowed: List[str] = []
        self.answers: List[str] = []
        self.rng = random.Random()

    def reset(self, *, allowed: List[str], answers: List[str], N: int,
              seed: int | None = None) -> None:
        self.allowed = list(allowed)
        self.answers = list(answers)
        self.N = int(N)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")

    @staticmethod
    def guessed(state: dict) -> Set[str]:
        """Words already played this game."""
        return {g for g, _ in state.get("history", ())}
