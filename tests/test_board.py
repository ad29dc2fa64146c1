import os
import sys

import pytest

# Ensure repo root on path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from theseus_maze import (
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
    Position,
    TileType,
    parse_board,
    load_board_from_file,
)

CLASSIC = "\n".join([
    "XXXXX",
    "XT  X",
    "X  MX",
    "X  GX",
    "XXXXX",
])


def test_classic_board_positions():
    g = parse_board(CLASSIC)
    assert g.theseus == Position(1, 1)
    assert g.minotaur == Position(2, 3)
    assert g.goal == Position(3, 3)
    assert g.rows == 5 and g.cols == 5


@pytest.mark.parametrize("text", [
    "TMG",
    "G  \nT M",
    "XXXX\nXG X\nX MX\nXTXX",
    "M\nT\nG",
])
def test_marker_positions_match_source_text(text):
    g = parse_board(text)
    lines = text.splitlines()
    expected = {}
    for r, line in enumerate(lines):
        for c, ch in enumerate(line):
            if ch in "TMG":
                expected[ch] = (r, c)
    assert g.theseus.as_tuple() == expected["T"]
    assert g.minotaur.as_tuple() == expected["M"]
    assert g.goal.as_tuple() == expected["G"]


def test_grid_tiles_follow_characters():
    g = parse_board("X T\nMG ")
    assert g.grid == [
        [TileType.WALL, TileType.EMPTY, TileType.THESEUS],
        [TileType.MINOTAUR, TileType.GOAL, TileType.EMPTY],
    ]


def test_trailing_newline_does_not_add_row():
    g = parse_board("TMG\n")
    assert g.rows == 1


@pytest.mark.parametrize("text, bad", [
    ("XTMGQ", "Q"),
    ("T?M\nG!X", "?"),
    ("TMG\n.  ", "."),
    ("tMG", "t"),
    ("TM\tG", "\t"),
])
def test_invalid_character_carries_first_offender(text, bad):
    with pytest.raises(InvalidCharacter) as exc:
        parse_board(text)
    assert exc.value.char == bad
    assert exc.value.kind == BoardErrorKind.INVALID_CHARACTER
    assert str(exc.value) == f"Invalid character: {bad}"


@pytest.mark.parametrize("sep", ["\r", "\x0b", "\x0c", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029"])
def test_line_separators_other_than_newline_are_invalid_characters(sep):
    with pytest.raises(InvalidCharacter) as exc:
        parse_board("T" + sep + "M\nG ")
    assert exc.value.char == sep

    with pytest.raises(InvalidCharacter) as exc:
        parse_board("TMG" + sep + "XXX")
    assert exc.value.char == sep


def test_crlf_line_endings():
    g = parse_board("XXX\r\nTMG\r\n")
    assert g.rows == 2 and g.cols == 3
    assert g.goal == Position(1, 2)


def test_invalid_character_reported_before_size():
    with pytest.raises(InvalidCharacter):
        parse_board("TMG\nX#XX")


@pytest.mark.parametrize("text", ["", "\n\n", "TMG\nXX", "TMG\n\nXXX"])
def test_invalid_size(text):
    with pytest.raises(InvalidSize):
        parse_board(text)


def test_size_reported_before_marker_counts():
    with pytest.raises(InvalidSize):
        parse_board("X\nXX")


@pytest.mark.parametrize("text, error", [
    ("TG", NoMinotaur),
    ("TMMG", MultipleMinotaur),
    ("MG", NoTheseus),
    ("MTTG", MultipleTheseus),
    ("MT", NoGoal),
    ("MTGG", MultipleGoal),
])
def test_marker_count_errors(text, error):
    with pytest.raises(error):
        parse_board(text)


@pytest.mark.parametrize("text, error", [
    # Minotaur is checked first, then Theseus, then Goal
    ("   ", NoMinotaur),
    ("G", NoMinotaur),
    ("MM", MultipleMinotaur),
    ("M", NoTheseus),
    ("MTT", MultipleTheseus),
    ("MMTT", MultipleMinotaur),
    ("MTTGG", MultipleTheseus),
])
def test_error_order_when_several_conditions_fail(text, error):
    with pytest.raises(error):
        parse_board(text)


def test_errors_are_value_errors_and_compare_structurally():
    with pytest.raises(ValueError):
        parse_board("TG")
    assert InvalidCharacter("Q") == InvalidCharacter("Q")
    assert InvalidCharacter("Q") != InvalidCharacter("R")
    assert NoGoal() == NoGoal()
    assert NoGoal() != MultipleGoal()
    assert isinstance(MultipleGoal(), BoardError)
    assert str(NoMinotaur()) == "No minotaur"


def test_load_board_from_file(tmp_path):
    p = tmp_path / "board.txt"
    p.write_text(CLASSIC + "\n", encoding="utf-8")
    g = load_board_from_file(p)
    assert g.theseus == Position(1, 1)


def test_bundled_boards_parse():
    boards_dir = os.path.join(os.path.dirname(__file__), '..', 'boards')
    names = sorted(os.listdir(boards_dir))
    assert names
    for name in names:
        load_board_from_file(os.path.join(boards_dir, name))
