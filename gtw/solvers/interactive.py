"""
Interactive solver: a person at the console is the strategy.

Each turn it reports the previous guess in humanized form, e.g.

    guess> tears
           --ers (0 letters in the correct place)

then prompts until it gets an N-letter alphabetic word. EOFError and
KeyboardInterrupt from the prompt propagate so the caller can stop the run.
"""

from __future__ import annotations

from typing import Callable, Optional

from gtw.engine import LETTER_CORRECT, humanize, validate_guess
from .base import BaseSolver, register

HELP = """
--------
After each guess, a signature will be displayed. In the signature,
the character '-' means the letter is not in the word. Lower case
letters are not in the right place, while upper case letters are
correctly placed. Example:

guess> tears
       --ers (0 letters in the correct place)
guess> cloud
       -l-u- (0 letters in the correct place)
guess> aural
       aURAL (4 letters in the correct place)
guess> rural

Success!
--------
"""


def feedback_line(guess: str, signature: str) -> str:
    """Feedback shown to the player for one guess (see HELP)."""
    n_correct = signature.count(LETTER_CORRECT)
    return f"       {humanize(signature, guess)} ({n_correct} letters in the correct place)"


@register
class InteractiveSolver(BaseSolver):
    id = "interactive"
    name = "Interactive (console)"
    version = "1.0.0"

    PROMPT = "guess> "

    # Only accept words from the master list (off: any N-letter word is fine).
    REQUIRE_KNOWN = False

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None,
                 print_fn: Optional[Callable[[str], None]] = None):
        super().__init__()
        self._input = input_fn or input
        self._print = print_fn or print

    def next_guess(self, state: dict) -> str:
        history = state["history"]
        if not history:
            self._print("New goal word selected")
        else:
            self._print(feedback_line(*history[-1]))

        allowed: Optional[set] = set(state["allowed"]) if self.REQUIRE_KNOWN else None
        while True:  # loop over illegal guesses
            text = self._input(self.PROMPT).strip().lower()
            if validate_guess(text, allowed, self.N):
                return text
            if allowed is not None and len(text) == self.N:
                self._print("not in the word list")
            else:
                self._print(f"{self.N}-letter words only")
