"""
Exception taxonomy for the game engine.

Every error here is a recoverable, user-facing condition. The message text is
what a UI shows to the player, so it is kept short and stable.

  BeehiveError
    ├── PuzzleError   (bad puzzle string)
    ├── GuessError    (rejected guess)
    └── SourceError   (dictionary / candidate list could not be read)
"""

from __future__ import annotations


class BeehiveError(Exception):
    """Base class; `message` is the player-facing text."""
    message = "Something went wrong."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


# ---- Puzzle construction ----

class PuzzleError(BeehiveError):
    message = "Input string does not match the expected pattern."


class NonLetterCharacter(PuzzleError):
    message = "Input string contains non-letter symbols."


class RepeatedLetter(PuzzleError):
    message = "Input string contains repeated letters."


class WrongLength(PuzzleError):
    message = "Input string does not contain exactly 7 characters."


# ---- Guess validation ----

class GuessError(BeehiveError):
    message = "Invalid guess."


class TooShort(GuessError):
    message = "Not enough letters."


class InvalidLetter(GuessError):
    message = "Word uses invalid letter."


class MissingCenterLetter(GuessError):
    message = "Word does not use center letter."


class NotInDictionary(GuessError):
    message = "Word was not found in dictionary."


class AlreadyFound(GuessError):
    message = "Already found."


# ---- Data sources ----

class SourceError(BeehiveError):
    message = "Data source error."


class SourceUnavailable(SourceError):
    message = "Source could not be read."
