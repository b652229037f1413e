# apps/cli/play.py
"""
Terminal front end for the spelling bee engine.

Commands (one per line):
  puzzle <letters>   start a new puzzle (center letter first)
  random             start a random puzzle from the candidate list
  shuffle            reshuffle the outer letters
  solve              reveal every remaining word
  score              show words found / points
  guess <word>       guess a word, including one spelled like a command
  quit               exit
A single word on its own line is a guess; a line with more words is rejected.

All game rules live in beehive.engine; this loop only turns lines into engine
calls and engine results/errors into text.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import TextIO

from beehive.engine import BeehiveError, GuessError, GuessResult, PuzzleSession, create_puzzle
from beehive.generator import DEFAULT_PUZZLE, random_puzzle_or_default, shuffle_letters

DEFAULT_DICTIONARY = "data/EnglishWords.txt"
DEFAULT_CANDIDATES = "data/ExhaustiveList.txt"


def _word_line(word: str, score: int, is_pangram: bool) -> str:
    """`word (score)`, pangrams starred."""
    return f"{word} ({score}){' *' if is_pangram else ''}"


def _totals_line(words: int, points: int) -> str:
    return f"{words} words; {points} points"


def _one_word(tokens: list[str]) -> str:
    if len(tokens) != 1:
        raise GuessError("Guess one word at a time.")
    return tokens[0]


class Game:
    """Owns the active session and display letters; replaced wholesale on a new puzzle."""

    def __init__(self, *, dictionary: str, candidates: str, rng: random.Random, out: TextIO):
        self.dictionary = dictionary
        self.candidates = candidates
        self.rng = rng
        self.out = out
        self.session: PuzzleSession | None = None
        self.board = ""

    def say(self, msg: str) -> None:
        print(msg, file=self.out)

    def new_puzzle(self, raw: str) -> None:
        self.session = create_puzzle(raw, self.dictionary)
        self.board = str(self.session.spec)
        self.say(f"Puzzle: {self.board.upper()}  ({self.session.total_word_count()} words)")

    def random_puzzle(self) -> None:
        spec = random_puzzle_or_default(self.candidates, self.rng)
        self.new_puzzle(str(spec))

    def shuffle(self) -> None:
        self.board = shuffle_letters(self.board, self.rng)
        self.say(f"Puzzle: {self.board.upper()}")

    def guess(self, word: str) -> None:
        r: GuessResult = self._session().check_guess(word)
        self.say(_word_line(r.word, r.score, r.is_pangram))
        self.say(_totals_line(r.word_count, r.total_score))

    def solve(self) -> None:
        r = self._session().solve_all()
        for e in r.entries:
            self.say(_word_line(e.word, e.score, e.is_pangram))
        self.say(_totals_line(r.word_count, r.total_score))

    def score(self) -> None:
        s = self._session()
        self.say(_totals_line(s.current_word_count(), s.current_score()))

    def _session(self) -> PuzzleSession:
        if self.session is None:
            raise BeehiveError("No puzzle yet; try `puzzle <letters>` or `random`.")
        return self.session

    def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the player quits."""
        tokens = line.split()
        if not tokens:
            return True
        cmd, args = tokens[0].lower(), tokens[1:]
        if cmd in ("quit", "exit"):
            return False

        try:
            if cmd == "puzzle":
                self.new_puzzle(line.strip()[len(tokens[0]):].strip())
            elif cmd == "random":
                self.random_puzzle()
            elif cmd == "shuffle":
                self.shuffle()
            elif cmd == "solve":
                self.solve()
            elif cmd == "score":
                self.score()
            elif cmd == "guess":
                self.guess(_one_word(args))
            else:
                self.guess(_one_word(tokens))
        except BeehiveError as e:
            self.say(str(e))
        return True


def main(argv: list[str] | None = None):
    """
    Parse CLI args, start on the requested (or default) puzzle, then read commands from stdin.
    """
    ap = argparse.ArgumentParser(description="beehive — play the seven-letter word puzzle")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help="word list (whitespace-separated tokens)")
    ap.add_argument("--candidates", default=DEFAULT_CANDIDATES,
                    help="known-good puzzle list for `random`")
    ap.add_argument("--puzzle", default=DEFAULT_PUZZLE, help="starting puzzle (center letter first)")
    ap.add_argument("--seed", type=int, help="RNG seed for random puzzles and shuffles")
    ap.add_argument("-v", "--verbose", action="store_true", help="log debug details to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    game = Game(
        dictionary=args.dictionary,
        candidates=args.candidates,
        rng=random.Random(args.seed),
        out=sys.stdout,
    )
    game.handle(f"puzzle {args.puzzle}")

    for line in sys.stdin:
        if not game.handle(line):
            break


if __name__ == "__main__":
    main()
