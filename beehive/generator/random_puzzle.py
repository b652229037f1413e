"""
Random puzzle selection.

Strategy:
  - Read a precomputed list of known-good puzzles (each is a legal PuzzleSpec
    that admits at least one pangram under the target dictionary).
  - Choose uniformly at random from it.
  - If the list can't be read, callers may fall back to DEFAULT_PUZZLE.

Notes:
  - Deterministic across runs with the same seeded RNG.
  - The shipped candidate list was built with a fixed center letter, so every
    generated puzzle shares that center. apps/cli/build_candidates.py can grow
    the list with other centers.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, List, Union

from beehive.datasets.io import read_candidates, split_candidates
from beehive.engine.puzzle import PuzzleSpec
from beehive.errors import SourceUnavailable

logger = logging.getLogger(__name__)

DEFAULT_PUZZLE = "acegiop"

# Candidate source: a file path or records already in memory.
CandidateSource = Union[str, Path, Iterable[str]]


def _records(source: CandidateSource) -> List[str]:
    if isinstance(source, (str, Path)):
        return read_candidates(source)
    return [puzzle for chunk in source for puzzle in split_candidates(chunk)]


def generate_random_puzzle(source: CandidateSource, rng: random.Random | None = None) -> PuzzleSpec:
    """
    Pick one puzzle uniformly at random from `source`.

    Raises:
      SourceUnavailable if the source can't be read or holds no records.
      PuzzleError if the chosen record is not a legal puzzle.
    """
    rng = rng or random.Random()
    records = _records(source)
    if not records:
        raise SourceUnavailable("Candidate list is empty.")

    choice = records[rng.randrange(len(records))]
    return PuzzleSpec.create(choice)


def random_puzzle_or_default(source: CandidateSource, rng: random.Random | None = None) -> PuzzleSpec:
    """generate_random_puzzle, falling back to DEFAULT_PUZZLE when the source is unavailable."""
    try:
        return generate_random_puzzle(source, rng)
    except SourceUnavailable as e:
        logger.warning("%s; using default puzzle %s", e, DEFAULT_PUZZLE)
        return PuzzleSpec.create(DEFAULT_PUZZLE)
