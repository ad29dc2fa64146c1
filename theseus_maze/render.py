"""
render.py

Turn a ``Game`` into printable text, one line per grid row.

Glyphs (overridable through ``symbols``):
- wall '█', empty ' ', goal 'G', Theseus 'T', Minotaur 'M'

An entity standing on the goal is drawn instead of the goal; the goal glyph
comes back once the cell is vacated.

Usage:
    from theseus_maze.render import board_to_text

    print(board_to_text(game))
    print(board_to_text(game, symbols={TileType.WALL: '#'}))
"""
from typing import Dict, List, Optional

from .game import Game
from .types import TileType

DEFAULT_SYMBOLS: Dict[TileType, str] = {
    TileType.WALL: '█',
    TileType.EMPTY: ' ',
    TileType.GOAL: 'G',
    TileType.THESEUS: 'T',
    TileType.MINOTAUR: 'M',
}


def board_to_text(game: Game, symbols: Optional[Dict[TileType, str]] = None) -> str:
    syms = dict(DEFAULT_SYMBOLS)
    if symbols:
        syms.update(symbols)

    lines: List[str] = []
    for line in game.grid:
        lines.append(''.join(syms[tile] for tile in line))
    return '\n'.join(lines)
