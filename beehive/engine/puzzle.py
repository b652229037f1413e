"""
Puzzle definition: seven distinct letters, the first one is the center.

Construction rules (checked in this order, first failure wins):
  1) only letters A–Z / a–z          -> NonLetterCharacter
  2) no letter used twice            -> RepeatedLetter
  3) exactly 7 letters               -> WrongLength

The order is part of the contract: a string that breaks several rules always
reports the same single message.

A word "matches" a puzzle iff:
  - it has at least 4 letters
  - every letter is one of the 7 puzzle letters
  - it contains the center letter at least once
"""

from __future__ import annotations

import string
from collections import Counter
from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Tuple, Type

from beehive.errors import NonLetterCharacter, PuzzleError, RepeatedLetter, WrongLength

PUZZLE_SIZE = 7
MIN_WORD_LENGTH = 4

# Raw-character check; lowercasing first would let e.g. KELVIN SIGN pass as "k"
LETTERS: FrozenSet[str] = frozenset(string.ascii_letters)


def _has_non_letter(raw: str) -> bool:
    return any(ch not in LETTERS for ch in raw)


def _has_repeat(raw: str) -> bool:
    counts = Counter(raw.lower())
    return any(n > 1 for n in counts.values())


def _wrong_length(raw: str) -> bool:
    return len(raw) != PUZZLE_SIZE


# Ordered rule list: (violated?, error to raise)
PUZZLE_RULES: List[Tuple[Callable[[str], bool], Type[PuzzleError]]] = [
    (_has_non_letter, NonLetterCharacter),
    (_has_repeat, RepeatedLetter),
    (_wrong_length, WrongLength),
]


@dataclass(frozen=True)
class PuzzleSpec:
    """Validated, canonical (lowercase) puzzle letters."""
    letters: Tuple[str, ...]

    @classmethod
    def create(cls, raw: str) -> "PuzzleSpec":
        """
        Validate `raw` and build a PuzzleSpec.

        Raises:
          PuzzleError subclass for the first rule `raw` violates.

        Example:
          PuzzleSpec.create("AbCdEfG").letters -> ('a','b','c','d','e','f','g')
        """
        for violated, error in PUZZLE_RULES:
            if violated(raw):
                raise error()
        return cls(tuple(raw.lower()))

    @property
    def center(self) -> str:
        return self.letters[0]

    @property
    def letter_set(self) -> FrozenSet[str]:
        return frozenset(self.letters)

    def uses_only_puzzle_letters(self, word: str) -> bool:
        letters = self.letter_set
        return all(ch in LETTERS and ch.lower() in letters for ch in word)

    def contains_center(self, word: str) -> bool:
        return self.center in word.lower()

    def matches(self, word: str) -> bool:
        """Dictionary filter: long enough, puzzle letters only, uses center."""
        return (
            len(word) >= MIN_WORD_LENGTH
            and self.uses_only_puzzle_letters(word)
            and self.contains_center(word)
        )

    def is_pangram(self, word: str) -> bool:
        """
        True iff `word` uses all 7 letters.
        Assumes the word already matches, so counting distinct letters is enough.
        """
        return len(set(word.lower())) == PUZZLE_SIZE

    def __str__(self) -> str:
        return "".join(self.letters)
