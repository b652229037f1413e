from beehive.errors import (
    BeehiveError,
    PuzzleError, NonLetterCharacter, RepeatedLetter, WrongLength,
    GuessError, TooShort, InvalidLetter, MissingCenterLetter, NotInDictionary, AlreadyFound,
    SourceError, SourceUnavailable,
)
from .puzzle import PuzzleSpec, PUZZLE_SIZE, MIN_WORD_LENGTH
from .wordlist import WordEntry, load_words, score_word, PANGRAM_BONUS
from .session import PuzzleSession, GuessResult, SolveResult, create_puzzle

__all__ = [
    "PuzzleSpec", "PuzzleSession", "WordEntry", "GuessResult", "SolveResult",
    "create_puzzle", "load_words", "score_word",
    "PUZZLE_SIZE", "MIN_WORD_LENGTH", "PANGRAM_BONUS",
    "BeehiveError", "PuzzleError", "NonLetterCharacter", "RepeatedLetter", "WrongLength",
    "GuessError", "TooShort", "InvalidLetter", "MissingCenterLetter", "NotInDictionary",
    "AlreadyFound", "SourceError", "SourceUnavailable",
]
