"""
Game state for Theseus and the Minotaur.

A ``Game`` owns the tile grid and the three tracked positions. Each turn the
player's command moves Theseus one cell, then the Minotaur takes one greedy
step toward him:

- Theseus and the Minotaur share one single-step primitive; walls and
  off-grid targets block it and the mover stays put.
- The Minotaur closes the column gap before the row gap and never moves away
  from Theseus. It can get stuck behind walls.
- The Minotaur catching Theseus is a loss even if they meet on the goal.

The goal cell is kept as a position. Entity markers may cover it in the grid,
and it is restored when the cell is vacated. While both entities share a cell
(the capture that ends the game) the grid holds the marker of whoever moved
last, so only one of ``is_theseus`` and ``is_minotaur`` is true there.

Usage:
    from theseus_maze import parse_board, Command

    game = parse_board(open('boards/classic.txt').read())
    result = game.play_turn(Command.DOWN)
    print(result.status)
"""
from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .types import Command, GameStatus, Position, TileType, DOWN, LEFT, RIGHT, UP

logger = logging.getLogger(__name__)


@dataclass
class TurnResult:
    command: Command
    theseus_moved: bool
    minotaur_moved: bool
    theseus: Position
    minotaur: Position
    status: GameStatus

    @property
    def done(self) -> bool:
        return self.status != GameStatus.CONTINUE


class Game:
    def __init__(self, grid: List[List[TileType]], theseus: Position, minotaur: Position, goal: Position):
        self.grid = grid
        self.theseus = theseus
        self.minotaur = minotaur
        self.goal = goal

    @classmethod
    def from_board(cls, text: str) -> 'Game':
        from .board import parse_board  # import here to avoid circulars
        return parse_board(text)

    def copy(self) -> 'Game':
        return deepcopy(self)

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < len(self.grid) and 0 <= pos.col < len(self.grid[pos.row])

    def tile_at(self, row: int, col: int) -> Optional[TileType]:
        pos = Position(row, col)
        if not self.in_bounds(pos):
            return None
        return self.grid[row][col]

    def iter_tiles(self) -> Iterator[Tuple[Position, TileType]]:
        for r, line in enumerate(self.grid):
            for c, tile in enumerate(line):
                yield Position(r, c), tile

    # queries
    def is_wall(self, row: int, col: int) -> bool:
        return self.tile_at(row, col) == TileType.WALL

    def is_empty(self, row: int, col: int) -> bool:
        return self.tile_at(row, col) == TileType.EMPTY

    def is_theseus(self, row: int, col: int) -> bool:
        return self.tile_at(row, col) == TileType.THESEUS

    def is_minotaur(self, row: int, col: int) -> bool:
        return self.tile_at(row, col) == TileType.MINOTAUR

    def is_goal(self, row: int, col: int) -> bool:
        # Checked against the stored position so it holds while occupied
        return self.goal == Position(row, col)

    # movement
    def _blocked(self, pos: Position) -> bool:
        return not self.in_bounds(pos) or self.grid[pos.row][pos.col] == TileType.WALL

    def _vacated_tile(self, pos: Position, other: Position, other_tile: TileType) -> TileType:
        if pos == other:
            return other_tile
        if pos == self.goal:
            return TileType.GOAL
        return TileType.EMPTY

    def move_theseus(self, dr: int, dc: int) -> bool:
        src = self.theseus
        dst = src.move(dr, dc)
        if dst == src:
            return False
        if self._blocked(dst):
            logger.debug("theseus blocked at %s moving (%d, %d)", src.as_tuple(), dr, dc)
            return False
        self.grid[src.row][src.col] = self._vacated_tile(src, self.minotaur, TileType.MINOTAUR)
        self.grid[dst.row][dst.col] = TileType.THESEUS
        self.theseus = dst
        return True

    def move_minotaur(self, dr: int, dc: int) -> bool:
        src = self.minotaur
        dst = src.move(dr, dc)
        if dst == src:
            return False
        if self._blocked(dst):
            logger.debug("minotaur blocked at %s moving (%d, %d)", src.as_tuple(), dr, dc)
            return False
        self.grid[src.row][src.col] = self._vacated_tile(src, self.theseus, TileType.THESEUS)
        self.grid[dst.row][dst.col] = TileType.MINOTAUR
        self.minotaur = dst
        return True

    def theseus_move(self, command: Command) -> bool:
        if command == Command.SKIP:
            return False
        return self.move_theseus(*command.delta)

    def minotaur_move(self) -> bool:
        m = self.minotaur
        t = self.theseus
        # Columns first; a blocked horizontal step falls through to rows
        if m.col < t.col:
            if self.move_minotaur(*RIGHT):
                return True
        elif m.col > t.col:
            if self.move_minotaur(*LEFT):
                return True

        if m.row < t.row:
            if self.move_minotaur(*DOWN):
                return True
        elif m.row > t.row:
            if self.move_minotaur(*UP):
                return True

        return False

    def status(self) -> GameStatus:
        if self.minotaur == self.theseus:
            return GameStatus.LOSE
        if self.is_goal(self.theseus.row, self.theseus.col):
            return GameStatus.WIN
        return GameStatus.CONTINUE

    def play_turn(self, command: Command) -> TurnResult:
        """Apply one full turn: Theseus moves, the Minotaur chases, then status."""
        theseus_moved = self.theseus_move(command)
        minotaur_moved = self.minotaur_move()
        status = self.status()
        if status != GameStatus.CONTINUE:
            logger.info("game over: %s", status.name)
        return TurnResult(
            command=command,
            theseus_moved=theseus_moved,
            minotaur_moved=minotaur_moved,
            theseus=self.theseus,
            minotaur=self.minotaur,
            status=status,
        )
