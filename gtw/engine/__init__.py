from .errors import LengthMismatchError, EmptyCorpusError, MalformedSignatureError
from .scoring import (evaluate, humanize, is_solved,
                      LETTER_CORRECT, LETTER_IN_WORD, LETTER_WRONG)
from .constraints import GuessRecord, Constraints, build_constraints, filter_candidates
from .validation import validate_guess
from .game import GameEngine

__all__ = [
    "evaluate", "humanize", "is_solved",
    "LETTER_CORRECT", "LETTER_IN_WORD", "LETTER_WRONG",
    "GuessRecord", "Constraints", "build_constraints", "filter_candidates",
    "validate_guess", "GameEngine",
    "LengthMismatchError", "EmptyCorpusError", "MalformedSignatureError",
]
