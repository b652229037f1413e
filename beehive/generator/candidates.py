"""
Sampling new candidate puzzles.

A "good" candidate:
  - is a legal puzzle (7 distinct letters)
  - admits at least one pangram under the dictionary
  - has a playable word count within [min_words, max_words]

This samples letter sets at random; it does not enumerate the full
26 * C(25, 6) space.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence

from beehive.engine.puzzle import PUZZLE_SIZE, PuzzleSpec
from beehive.engine.wordlist import WordTable, load_words

MIN_WORDS = 21
MAX_WORDS = 81


@dataclass(frozen=True)
class Candidate:
    spec: PuzzleSpec
    word_count: int
    pangrams: int

    def record(self) -> str:
        """Line for a candidate file: puzzle first, annotations after."""
        return f"{self.spec} {self.word_count} {self.pangrams}"


def is_good_candidate(table: WordTable, min_words: int = MIN_WORDS, max_words: int = MAX_WORDS) -> bool:
    if not min_words <= len(table) <= max_words:
        return False
    return any(e.is_pangram for e in table.values())


def _pangram_letter_sets(words: Sequence[str]) -> List[frozenset]:
    """Distinct 7-letter sets that some lowercase dictionary word uses exactly."""
    seen = set()
    out: List[frozenset] = []
    for w in words:
        if w != w.lower() or not (w.isascii() and w.isalpha()):
            continue
        s = frozenset(w)
        if len(s) == PUZZLE_SIZE and s not in seen:
            seen.add(s)
            out.append(s)
    return out


def iter_candidates(
        words: Sequence[str],
        rng: random.Random,
        *,
        center: str | None = None,
        min_words: int = MIN_WORDS,
        max_words: int = MAX_WORDS,
        exclude: Iterable[str] = (),
        max_tries: int = 100_000,
) -> Iterator[Candidate]:
    """
    Yield good candidates until `max_tries` draws have been made.

    Letter sets are drawn from dictionary pangrams rather than the raw
    alphabet, since a puzzle without a pangram is never good. `exclude`
    holds puzzle strings already in the list; a puzzle is identified by its
    center plus its letter set, so reordering the outer letters is not new.
    """
    letter_sets = _pangram_letter_sets(words)
    if center:
        letter_sets = [s for s in letter_sets if center.lower() in s]
    if not letter_sets:
        return

    seen = {(e[0].lower(), frozenset(e.lower())) for e in exclude if e}
    for _ in range(max_tries):
        s = rng.choice(letter_sets)
        c = center.lower() if center else rng.choice(sorted(s))
        key = (c, s)
        if key in seen:
            continue
        seen.add(key)

        rest = sorted(s - {c})
        rng.shuffle(rest)
        spec = PuzzleSpec.create(c + "".join(rest))
        table = load_words(spec, words)
        if is_good_candidate(table, min_words, max_words):
            yield Candidate(spec, len(table), sum(1 for e in table.values() if e.is_pangram))
