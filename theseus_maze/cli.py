from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, TextIO

from .board import load_board_from_file
from .errors import BoardError
from .game import Game
from .render import board_to_text
from .types import Command, GameStatus, TileType

logger = logging.getLogger(__name__)

# Matched case-sensitively after trimming; a blank line is the " " entry.
COMMAND_WORDS: Dict[str, Command] = {
    "w": Command.UP,
    "up": Command.UP,
    "a": Command.LEFT,
    "left": Command.LEFT,
    "s": Command.DOWN,
    "down": Command.DOWN,
    "d": Command.RIGHT,
    "right": Command.RIGHT,
    "": Command.SKIP,
    "skip": Command.SKIP,
}

QUIT_WORDS = {"q", "quit"}

PROMPT = "Move (w/a/s/d, up/down/left/right, skip, q to quit): "


def parse_command(line: str) -> Optional[Command]:
    return COMMAND_WORDS.get(line.strip())


def play(game: Game, stdin: TextIO, stdout: TextIO, symbols: Optional[Dict[TileType, str]] = None) -> GameStatus:
    """Run the interactive loop until Win, Lose, quit or end of input."""
    print(board_to_text(game, symbols), file=stdout)
    while True:
        print(PROMPT, end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            print(file=stdout)
            return game.status()
        if line.strip() in QUIT_WORDS:
            return game.status()
        command = parse_command(line)
        if command is None:
            print(f"Unknown command: {line.strip()!r}", file=stdout)
            continue

        result = game.play_turn(command)
        print(board_to_text(game, symbols), file=stdout)
        if result.status == GameStatus.WIN:
            print("Theseus escaped. You win!", file=stdout)
            return result.status
        if result.status == GameStatus.LOSE:
            print("The Minotaur caught Theseus. You lose.", file=stdout)
            return result.status


def run_moves(game: Game, moves: List[str], stdout: TextIO, symbols: Optional[Dict[TileType, str]] = None) -> GameStatus:
    """Apply a fixed sequence of commands and print a JSON summary."""
    turns = 0
    for raw in moves:
        command = parse_command(raw)
        if command is None:
            print(f"# skipping unknown command: {raw!r}", file=stdout)
            continue
        result = game.play_turn(command)
        turns += 1
        print(f"\n=== {command.name} ===", file=stdout)
        print(board_to_text(game, symbols), file=stdout)
        if result.done:
            break

    summary = {
        "theseus": list(game.theseus.as_tuple()),
        "minotaur": list(game.minotaur.as_tuple()),
        "goal": list(game.goal.as_tuple()),
        "status": game.status().name,
        "turns": turns,
    }
    print("\n# summary:", file=stdout)
    print(json.dumps(summary, indent=2), file=stdout)
    return game.status()


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play Theseus and the Minotaur on an ASCII board.")
    parser.add_argument("board", type=str, help="Path to board file")
    parser.add_argument("--moves", nargs="+", default=None, help="Apply these commands instead of playing interactively")
    parser.add_argument("--wall-glyph", type=str, default=None, help="Character used to draw walls")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    symbols = {TileType.WALL: args.wall_glyph} if args.wall_glyph else None

    try:
        game = load_board_from_file(Path(args.board))
    except BoardError as e:
        logger.error("could not load board %s: %r", args.board, e)
        print(f"Invalid board: {e}", file=sys.stderr)
        return 2

    if args.moves is not None:
        status = run_moves(game, args.moves, sys.stdout, symbols)
    else:
        status = play(game, sys.stdin, sys.stdout, symbols)
    return 1 if status == GameStatus.LOSE else 0


if __name__ == "__main__":
    raise SystemExit(main())
