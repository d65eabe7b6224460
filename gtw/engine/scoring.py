"""
Guess evaluation (feedback) for a single (goal, guess) pair.

Conventions (signature characters):
  - '+' : correct = right letter in the right position
  - '*' : present = letter is in the goal but not at this position
  - '#' : absent  = letter not in the goal (or present fewer times than guessed)

This implementation is:
  - N-aware (any word length)
  - duplicate-safe (respects true letter multiplicities in the goal)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass):
  1) First pass marks all exact matches and counts the remaining (unmatched)
     letters from the goal.
  2) Second pass marks '*' only if the letter still has remaining count.
"""

from collections import Counter
import logging
from typing import Literal, Tuple

from .errors import LengthMismatchError

logger = logging.getLogger(__name__)

LETTER_CORRECT = "+"
LETTER_IN_WORD = "*"
LETTER_WRONG = "#"
SIGNATURE_CHARS = frozenset((LETTER_CORRECT, LETTER_IN_WORD, LETTER_WRONG))

# Type alias for clarity; each signature character is one of '+', '*', '#'
SignatureChar = Literal["+", "*", "#"]


def evaluate(goal: str, guess: str) -> Tuple[str, int]:
    """
    Compute the feedback signature for `guess` against `goal`.

    Raises:
      LengthMismatchError if len(guess) != len(goal)

    Returns:
      (signature, n_correct): signature is a string of length N over
      '+', '*', '#'; n_correct is the number of '+' characters.

    Examples:
      evaluate("taken", "tater") -> ("++#+#", 3)
      evaluate("cross", "brush") -> ("#+#+#", 2)
    """
    # Case-insensitive; canonical form is lowercase
    goal = goal.strip().lower()
    guess = guess.strip().lower()
    if len(guess) != len(goal):
        raise LengthMismatchError(
            f"guess {guess!r} has length {len(guess)}, goal has length {len(goal)}")

    n = len(guess)
    signature = [LETTER_WRONG] * n
    n_correct = 0

    # Pass 1: exact matches claim their letter occurrence. Everything else in
    # the goal goes into the pool that pass 2 draws from.
    remaining = Counter()
    for i, (g, t) in enumerate(zip(guess, goal)):
        if g == t:
            signature[i] = LETTER_CORRECT
            n_correct += 1
        else:
            remaining[t] += 1

    # Pass 2: left to right, a letter is present only while the pool lasts.
    for i, g in enumerate(guess):
        if signature[i] == LETTER_CORRECT:
            continue
        if remaining[g] > 0:
            signature[i] = LETTER_IN_WORD
            remaining[g] -= 1

    return "".join(signature), n_correct


def is_solved(signature: str) -> bool:
    return bool(signature) and all(ch == LETTER_CORRECT for ch in signature)


def humanize(signature: str, guess: str) -> str:
    """
    Render a signature for people. Given "++##*" and "after" the result is
    "AF--r": A and F placed, T and E absent, r present elsewhere.

    Unknown signature characters are logged and shown as '?'.
    """
    if len(signature) != len(guess):
        raise LengthMismatchError(
            f"signature {signature!r} does not match guess {guess!r}")

    out = []
    for ch, letter in zip(signature, guess):
        if ch == LETTER_CORRECT:
            out.append(letter.upper())
        elif ch == LETTER_IN_WORD:
            out.append(letter)
        elif ch == LETTER_WRONG:
            out.append("-")
        else:
            logger.warning("humanizing signature: invalid character %r in %r", ch, signature)
            out.append("?")
    return "".join(out)
