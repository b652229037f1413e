"""
Board shuffle.

Only the display order changes: the center letter stays at position 0 and the
other six letters are permuted. Matching is order-independent, so the word
table is unaffected.
"""

from __future__ import annotations

import random
from typing import Union

from beehive.engine.puzzle import PuzzleSpec


def shuffle_letters(letters: Union[str, PuzzleSpec], rng: random.Random | None = None) -> str:
    """
    Return a new arrangement of `letters` with the first letter fixed.

    Args:
      letters : current display string (center first) or a PuzzleSpec
      rng     : optional seeded RNG for reproducible shuffles
    """
    rng = rng or random.Random()
    s = str(letters)
    if not s:
        return s

    center, rest = s[0], list(s[1:])
    rng.shuffle(rest)
    return center + "".join(rest)


def shuffle_spec(spec: PuzzleSpec, rng: random.Random | None = None) -> PuzzleSpec:
    """Same as shuffle_letters, but stays a PuzzleSpec (same center, same set)."""
    return PuzzleSpec(tuple(shuffle_letters(spec, rng)))
