from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple


class TileType(Enum):
    WALL = auto()
    EMPTY = auto()
    THESEUS = auto()
    MINOTAUR = auto()
    GOAL = auto()


class GameStatus(Enum):
    WIN = auto()
    LOSE = auto()
    CONTINUE = auto()


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def move(self, dr: int, dc: int) -> "Position":
        return Position(self.row + dr, self.col + dc)


# Movement deltas as (row, col)
UP = (-1, 0)
DOWN = (1, 0)
LEFT = (0, -1)
RIGHT = (0, 1)
STAY = (0, 0)


class Command(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SKIP = auto()

    @property
    def delta(self) -> Tuple[int, int]:
        return COMMAND_DELTAS[self]


COMMAND_DELTAS = {
    Command.UP: UP,
    Command.DOWN: DOWN,
    Command.LEFT: LEFT,
    Command.RIGHT: RIGHT,
    Command.SKIP: STAY,
}
