from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Type

from .errors import (
    BoardError,
    InvalidCharacter,
    InvalidSize,
    MultipleGoal,
    MultipleMinotaur,
    MultipleTheseus,
    NoGoal,
    NoMinotaur,
    NoTheseus,
)
from .game import Game
from .types import Position, TileType


CHAR_TO_TILE: Dict[str, TileType] = {
    " ": TileType.EMPTY,
    "X": TileType.WALL,
    "M": TileType.MINOTAUR,
    "T": TileType.THESEUS,
    "G": TileType.GOAL,
}

# Marker checks run in this order; the first failing marker is reported.
MARKER_CHECKS = (
    (TileType.MINOTAUR, NoMinotaur, MultipleMinotaur),
    (TileType.THESEUS, NoTheseus, MultipleTheseus),
    (TileType.GOAL, NoGoal, MultipleGoal),
)


def _single_marker(
    found: List[Position],
    missing: Type[BoardError],
    duplicated: Type[BoardError],
) -> Position:
    if not found:
        raise missing()
    if len(found) > 1:
        raise duplicated()
    return found[0]


def _board_lines(text: str) -> List[str]:
    # Only "\n" (optionally preceded by "\r") ends a row; other line
    # separators are cell characters and fail the character scan.
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_board(text: str) -> Game:
    """Parse board text into a ``Game``.

    One character per cell, one line per row. Checks run in a fixed order:
    unknown characters (first one in row-major order), then the board shape
    (empty or ragged), then the Minotaur, Theseus and Goal marker counts.
    """
    grid: List[List[TileType]] = []
    markers: Dict[TileType, List[Position]] = {tile: [] for tile, _, _ in MARKER_CHECKS}

    for row, line in enumerate(_board_lines(text)):
        tiles: List[TileType] = []
        for col, ch in enumerate(line):
            tile = CHAR_TO_TILE.get(ch)
            if tile is None:
                raise InvalidCharacter(ch)
            if tile in markers:
                markers[tile].append(Position(row, col))
            tiles.append(tile)
        grid.append(tiles)

    if not grid or any(len(r) != len(grid[0]) for r in grid) or not grid[0]:
        raise InvalidSize()

    minotaur, theseus, goal = (
        _single_marker(markers[tile], missing, duplicated)
        for tile, missing, duplicated in MARKER_CHECKS
    )
    return Game(grid=grid, theseus=theseus, minotaur=minotaur, goal=goal)


def load_board_from_file(path: str | Path) -> Game:
    text = Path(path).read_text(encoding="utf-8")
    return parse_board(text)
