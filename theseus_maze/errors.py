"""Board parsing errors.

Every failure is its own ``BoardError`` subclass so callers can branch on the
class (or on ``kind``) instead of the message text.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional


class BoardErrorKind(Enum):
    INVALID_CHARACTER = auto()
    INVALID_SIZE = auto()
    NO_MINOTAUR = auto()
    NO_THESEUS = auto()
    NO_GOAL = auto()
    MULTIPLE_MINOTAUR = auto()
    MULTIPLE_THESEUS = auto()
    MULTIPLE_GOAL = auto()


class BoardError(ValueError):
    kind: BoardErrorKind
    message = "Invalid board"

    def __init__(self, char: Optional[str] = None):
        self.char = char
        super().__init__(self.describe())

    def describe(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardError):
            return NotImplemented
        return self.kind == other.kind and self.char == other.char

    def __hash__(self) -> int:
        return hash((self.kind, self.char))

    def __repr__(self) -> str:
        if self.char is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.char!r})"


class InvalidCharacter(BoardError):
    kind = BoardErrorKind.INVALID_CHARACTER

    def __init__(self, char: str):
        super().__init__(char)

    def describe(self) -> str:
        return f"Invalid character: {self.char}"


class InvalidSize(BoardError):
    kind = BoardErrorKind.INVALID_SIZE
    message = "Invalid size"


class NoMinotaur(BoardError):
    kind = BoardErrorKind.NO_MINOTAUR
    message = "No minotaur"


class NoTheseus(BoardError):
    kind = BoardErrorKind.NO_THESEUS
    message = "No theseus"


class NoGoal(BoardError):
    kind = BoardErrorKind.NO_GOAL
    message = "No goal"


class MultipleMinotaur(BoardError):
    kind = BoardErrorKind.MULTIPLE_MINOTAUR
    message = "Multiple minotaur"


class MultipleTheseus(BoardError):
    kind = BoardErrorKind.MULTIPLE_THESEUS
    message = "Multiple theseus"


class MultipleGoal(BoardError):
    kind = BoardErrorKind.MULTIPLE_GOAL
    message = "Multiple goal"
