"""
Lightweight guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess is valid iff:
  - it is a string
  - it is alphabetic only
  - it has exact length N
  - it exists in the provided `allowed` list/set (skipped when allowed is None)

Repeats are not rejected here; the candidate filter never offers a word that
was already guessed.
"""

from typing import Iterable, Optional, Set


def validate_guess(word: str, allowed: Optional[Iterable[str]], N: int) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Args:
      word    : proposed guess
      allowed : iterable of allowed words, or None for a shape-only check
      N       : required word length

    Notes:
      - A set passed as `allowed` is used as-is (must already be lowercase);
        any other iterable is normalized into a local set per call.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    # Shape/characters check
    if len(w) != N or not w.isalpha():
        return False

    if allowed is None:
        return True

    # Membership check (case-normalized)
    if isinstance(allowed, (set, frozenset)):
        return w in allowed
    allowed_set: Set[str] = {a.strip().lower() for a in allowed}
    return w in allowed_set
