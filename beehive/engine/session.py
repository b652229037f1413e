"""
One active puzzle: its word table plus the player's progress.

A session is created for a puzzle and thrown away when the player switches
puzzles; nothing carries over. Score and word count are always recomputed from
the `discovered` flags of the table entries, so they cannot drift from the
table itself.

Guess rules (checked in this order, first failure wins):
  1) fewer than 4 letters          -> TooShort
  2) letter outside the puzzle     -> InvalidLetter
  3) center letter missing         -> MissingCenterLetter
  4) not in the word table         -> NotInDictionary
  5) already discovered            -> AlreadyFound
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Tuple, Type

from beehive.errors import (
    AlreadyFound,
    GuessError,
    InvalidLetter,
    MissingCenterLetter,
    NotInDictionary,
    SourceUnavailable,
    TooShort,
)
from .puzzle import MIN_WORD_LENGTH, PuzzleSpec
from .wordlist import Dictionary, WordEntry, WordTable, load_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuessResult:
    """Outcome of an accepted guess, with the session totals right after it."""
    word: str
    score: int
    is_pangram: bool
    total_score: int
    word_count: int


@dataclass(frozen=True)
class SolveResult:
    entries: Tuple[WordEntry, ...]
    total_score: int
    word_count: int


def _too_short(session: "PuzzleSession", word: str) -> bool:
    return len(word) < MIN_WORD_LENGTH


def _invalid_letter(session: "PuzzleSession", word: str) -> bool:
    return not session.spec.uses_only_puzzle_letters(word)


def _missing_center(session: "PuzzleSession", word: str) -> bool:
    return not session.spec.contains_center(word)


def _not_in_dictionary(session: "PuzzleSession", word: str) -> bool:
    return word.lower() not in session.words


def _already_found(session: "PuzzleSession", word: str) -> bool:
    return session.words[word.lower()].discovered


# Ordered rule list; later rules may assume earlier ones passed.
GUESS_RULES: List[Tuple[Callable[["PuzzleSession", str], bool], Type[GuessError]]] = [
    (_too_short, TooShort),
    (_invalid_letter, InvalidLetter),
    (_missing_center, MissingCenterLetter),
    (_not_in_dictionary, NotInDictionary),
    (_already_found, AlreadyFound),
]


class PuzzleSession:
    def __init__(self, spec: PuzzleSpec, words: WordTable):
        self.spec = spec
        self.words = words

    @classmethod
    def from_source(cls, spec: PuzzleSpec, source: Dictionary) -> "PuzzleSession":
        return cls(spec, load_words(spec, source))

    @property
    def has_pangram(self) -> bool:
        return any(e.is_pangram for e in self.words.values())

    # ---- Player actions ----

    def check_guess(self, word: str) -> GuessResult:
        """
        Validate a guess and, if accepted, mark it discovered.

        Raises:
          GuessError subclass for the first failing rule. The table is left
          untouched on failure.
        """
        # Rules see the raw characters; table keys are lowercase
        w = word.strip()
        for violated, error in GUESS_RULES:
            if violated(self, w):
                raise error()

        entry = self.words[w.lower()]
        entry.discovered = True
        return GuessResult(
            word=entry.word,
            score=entry.score,
            is_pangram=entry.is_pangram,
            total_score=self.current_score(),
            word_count=self.current_word_count(),
        )

    def solve_all(self) -> SolveResult:
        """Reveal every word. After this, every valid guess is AlreadyFound."""
        for entry in self.words.values():
            entry.discovered = True
        return SolveResult(
            entries=tuple(self.words.values()),
            total_score=self.total_score(),
            word_count=self.total_word_count(),
        )

    # ---- Read-only derivations ----

    def found_words(self) -> List[WordEntry]:
        """Discovered entries in table order."""
        return [e for e in self.words.values() if e.discovered]

    def current_score(self) -> int:
        return sum(e.score for e in self.words.values() if e.discovered)

    def current_word_count(self) -> int:
        return sum(1 for e in self.words.values() if e.discovered)

    def total_score(self) -> int:
        return sum(e.score for e in self.words.values())

    def total_word_count(self) -> int:
        return len(self.words)

    def remaining_word_count(self) -> int:
        return self.total_word_count() - self.current_word_count()

    def is_solved(self) -> bool:
        return all(e.discovered for e in self.words.values())


def create_puzzle(raw: str, dictionary: Dictionary) -> PuzzleSession:
    """
    Build a fresh session for the puzzle string `raw`.

    Args:
      raw        : player-supplied puzzle letters (center first)
      dictionary : path to a word file, or an iterable of word tokens

    Raises:
      PuzzleError if `raw` is not a valid puzzle.

    A dictionary file that cannot be read is a soft failure: the puzzle is
    still created, with an empty word table.
    """
    spec = PuzzleSpec.create(raw)

    try:
        words = load_words(spec, dictionary)
    except SourceUnavailable as e:
        logger.warning("%s; puzzle %s has no words", e, spec)
        words = {}

    return PuzzleSession(spec, words)
