"""
Error types raised by the engine.

All of them subclass ValueError so callers that only care about
"bad input" can catch one thing.
"""


class LengthMismatchError(ValueError):
    """Guess, goal or signature lengths disagree."""


class EmptyCorpusError(ValueError):
    """A game engine was built from a corpus with zero words."""


class MalformedSignatureError(ValueError):
    """A signature contains a character outside {'+', '*', '#'}."""
