"""
Candidate filtering given game history.

Given:
  - a pool of words (e.g., the bot's master word list)
  - a history of (guess, signature) records
  - target word length N

Return:
  - words that are consistent with ALL feedback seen so far, minus the words
    already guessed.

The history is turned into an explicit constraint model:
  - fixed[i]      : letter that must sit at position i      ('+')
  - excluded[i]   : letters that cannot sit at position i   ('*' and '#')
  - min_count[ch] : candidate holds at least this many ch   ('+'/'*' per guess)
  - max_count[ch] : candidate holds at most this many ch    ('#' caps a guess)

A guess with a repeated letter and mixed outcomes (e.g. one '*' and one '#'
for the same letter) pins the count exactly: min == max == number of marks.
Every bound is combined with max/min/union, so the result does not depend on
the order of the records.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, NamedTuple, Set

from .errors import LengthMismatchError, MalformedSignatureError
from .scoring import LETTER_CORRECT, LETTER_IN_WORD, SIGNATURE_CHARS


class GuessRecord(NamedTuple):
    guess: str
    signature: str


# History is a sequence of (guess, signature) records produced by the engine.
History = Iterable[GuessRecord]


@dataclass
class Constraints:
    """Per-position and per-letter bounds derived from a history."""
    N: int
    fixed: Dict[int, str] = field(default_factory=dict)
    excluded: Dict[int, Set[str]] = field(default_factory=dict)
    min_count: Dict[str, int] = field(default_factory=dict)
    max_count: Dict[str, int] = field(default_factory=dict)
    guessed: Set[str] = field(default_factory=set)
    # positions where two records demand different letters; nothing can match
    conflicts: Set[int] = field(default_factory=set)

    def add(self, guess: str, signature: str) -> None:
        """Fold one (guess, signature) record into the bounds."""
        guess = guess.strip().lower()
        if len(guess) != self.N or len(signature) != self.N:
            raise LengthMismatchError(
                f"record ({guess!r}, {signature!r}) does not have length {self.N}")
        bad = set(signature) - SIGNATURE_CHARS
        if bad:
            raise MalformedSignatureError(
                f"signature {signature!r} has invalid character(s) {sorted(bad)}")

        self.guessed.add(guess)

        marked = Counter()   # '+'/'*' per letter, within this guess only
        wrong = set()        # letters with at least one '#' in this guess
        for i, (ch, s) in enumerate(zip(guess, signature)):
            if s == LETTER_CORRECT:
                if self.fixed.get(i, ch) != ch:
                    self.conflicts.add(i)
                self.fixed[i] = ch
                marked[ch] += 1
            elif s == LETTER_IN_WORD:
                self.excluded.setdefault(i, set()).add(ch)
                marked[ch] += 1
            else:
                # '#' still says "not here", whatever the count turns out to be
                self.excluded.setdefault(i, set()).add(ch)
                wrong.add(ch)

        for ch, k in marked.items():
            if k > self.min_count.get(ch, 0):
                self.min_count[ch] = k
        for ch in wrong:
            k = marked[ch]
            if ch not in self.max_count or k < self.max_count[ch]:
                self.max_count[ch] = k

    def matches(self, word: str) -> bool:
        """True if `word` satisfies every bound (guessed words excluded)."""
        if len(word) != self.N or word in self.guessed or self.conflicts:
            return False

        for i, ch in enumerate(word):
            want = self.fixed.get(i)
            if want is not None:
                if ch != want:
                    return False
            elif ch in self.excluded.get(i, ()):
                return False

        counts = Counter(word)
        for ch, k in self.min_count.items():
            if counts[ch] < k:
                return False
        for ch, k in self.max_count.items():
            if counts[ch] > k:
                return False
        return True


def build_constraints(history: History, N: int) -> Constraints:
    c = Constraints(N=N)
    for guess, signature in history:
        c.add(guess, signature)
    return c


def filter_candidates(words: Iterable[str], history: History, N: int) -> List[str]:
    """
    Keep only words (length == N) consistent with every record in `history`.

    Args:
      words   : iterable of candidate words (often the master word list)
      history : iterable of (guess, signature) seen so far
      N       : expected word length

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
      Words already guessed in `history` are never returned.
    """
    constraints = build_constraints(history, N)
    out: List[str] = []

    for w in words:
        w = w.strip().lower()

        # Basic hygiene: skip anything that isn't a clean N-letter alpha token
        if len(w) != N or not w.isalpha():
            continue

        if constraints.matches(w):
            out.append(w)

    return out
