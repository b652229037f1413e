# apps/cli/build_candidates.py
"""
Grow the known-good puzzle list used by `random`.

This script:
  1) Loads the dictionary and the existing candidate list (if any).
  2) Samples puzzles built from dictionary pangrams, keeping those with a word
     count in [--min-words, --max-words], with a tqdm progress bar.
  3) Appends new records ("letters words pangrams") to the candidate file and
     prints a validation summary of the result.

Sampling is random, not exhaustive; run it again to add more.
"""

from __future__ import annotations

import argparse
import itertools
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from beehive.datasets import append_lines, pretty_summary, read_candidates, read_words, validate_candidates
from beehive.generator.candidates import MAX_WORDS, MIN_WORDS, iter_candidates

logger = logging.getLogger("build_candidates")


def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser(description="beehive — sample new candidate puzzles")
    ap.add_argument("--dictionary", default="data/EnglishWords.txt", help="word list")
    ap.add_argument("--out", default="data/ExhaustiveList.txt", help="candidate file to append to")
    ap.add_argument("--count", type=int, default=50, help="number of new puzzles to add")
    ap.add_argument("--center", help="pin the center letter (default: any)")
    ap.add_argument("--min-words", type=int, default=MIN_WORDS)
    ap.add_argument("--max-words", type=int, default=MAX_WORDS)
    ap.add_argument("--seed", type=int, default=123, help="RNG seed (for reproducibility)")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # SourceUnavailable propagates: without a dictionary there is nothing to sample
    words = read_words(args.dictionary)
    out = Path(args.out)
    existing = read_candidates(out) if out.exists() else []
    logger.info("dictionary: %d tokens | existing candidates: %d", len(words), len(existing))

    rng = random.Random(args.seed)
    found = iter_candidates(
        words, rng,
        center=args.center,
        min_words=args.min_words,
        max_words=args.max_words,
        exclude=existing,
    )

    records = []
    for cand in tqdm(itertools.islice(found, args.count), total=args.count,
                     ncols=80, desc="Sampling", unit="puzzle"):
        records.append(cand.record())

    if len(records) < args.count:
        logger.warning("only found %d of %d requested puzzles", len(records), args.count)

    if records:
        append_lines(records, out)
        print(f"Wrote: {out} (+{len(records)})")

    print(pretty_summary(validate_candidates(str(out))))


if __name__ == "__main__":
    main()
