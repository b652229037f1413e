"""
Word table construction and scoring.

Given a PuzzleSpec and a dictionary (a word file, or any iterable of word
tokens in file order), keep the words that match the puzzle and attach their score and
pangram flag. The resulting mapping keeps dictionary scan order, which is the
order a solved word list is displayed in.

Scoring:
  - 4-letter word        -> 1 point
  - longer word          -> 1 point per letter
  - pangram (all 7 used) -> +7 bonus
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Union

from beehive.datasets.io import read_words
from .puzzle import MIN_WORD_LENGTH, PuzzleSpec

logger = logging.getLogger(__name__)

PANGRAM_BONUS = 7

# word -> entry, insertion order == dictionary order
WordTable = Dict[str, "WordEntry"]

# A dictionary is either a file to read or tokens already in memory.
Dictionary = Union[str, Path, Iterable[str]]


@dataclass
class WordEntry:
    word: str
    score: int
    is_pangram: bool
    discovered: bool = False


def score_word(word: str, is_pangram: bool) -> int:
    base = 1 if len(word) == MIN_WORD_LENGTH else len(word)
    return base + (PANGRAM_BONUS if is_pangram else 0)


def load_words(spec: PuzzleSpec, source: Dictionary) -> WordTable:
    """
    Filter `source` down to the words playable on `spec`.

    Args:
      spec   : the active puzzle
      source : path to a word file, or word tokens in dictionary order

    Returns:
      Ordered dict word -> WordEntry (all undiscovered).

    Raises:
      SourceUnavailable if `source` is a path that can't be read.

    Notes:
      - Only lowercase tokens are kept; capitalized entries (proper nouns,
        acronyms) are not playable words.
      - A token seen twice keeps its first position.
    """
    if isinstance(source, (str, Path)):
        source = read_words(source)

    table: WordTable = {}
    scanned = 0

    for token in source:
        scanned += 1
        word = token.strip()
        if word != word.lower() or not spec.matches(word):
            continue
        if word in table:
            continue

        pangram = spec.is_pangram(word)
        table[word] = WordEntry(word=word, score=score_word(word, pangram), is_pangram=pangram)

    logger.debug("puzzle %s: kept %d of %d dictionary tokens", spec, len(table), scanned)
    return table
