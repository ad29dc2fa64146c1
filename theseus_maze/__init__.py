"""Theseus and the Minotaur game engine.

Exposes public APIs for parsing boards and playing turns.
"""

from .types import (
    Command,
    GameStatus,
    Position,
    TileType,
)
from .errors import (
    BoardError,
    BoardErrorKind,
    InvalidCharacter,
    InvalidSize,
    MultipleGoal,
    MultipleMinotaur,
    MultipleTheseus,
    NoGoal,
    NoMinotaur,
    NoTheseus,
)
from .game import Game, TurnResult
from .board import parse_board, load_board_from_file

__all__ = [
    "Command",
    "GameStatus",
    "Position",
    "TileType",
    "BoardError",
    "BoardErrorKind",
    "InvalidCharacter",
    "InvalidSize",
    "MultipleGoal",
    "MultipleMinotaur",
    "MultipleTheseus",
    "NoGoal",
    "NoMinotaur",
    "NoTheseus",
    "Game",
    "TurnResult",
    "parse_board",
    "load_board_from_file",
]
