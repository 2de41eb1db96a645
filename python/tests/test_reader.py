"""Puzzle reader tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from backend.engine.gamereader import PuzzleFormatError, parse_puzzle, read_puzzle
from backend.models.board import Board, InvalidBoardError


def test_parse_grid_text() -> None:
    board = parse_puzzle("3\n 1  2  3\n 4  0  6\n 7  5  8\n")
    assert board == Board([[1, 2, 3], [4, 0, 6], [7, 5, 8]])


def test_parse_ignores_layout() -> None:
    assert parse_puzzle("2 1 2 0 3") == Board([[1, 2], [0, 3]])


def test_parse_round_trips_board_text() -> None:
    board = Board([[5, 1, 3, 4], [2, 0, 7, 8], [9, 6, 10, 12], [13, 14, 11, 15]])
    assert parse_puzzle(str(board)) == board


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   \n",
        "3\n1 2 x\n",
        "2\n1 2 3\n",
        "2\n1 2 3 0 4\n",
        "0\n",
        "-2\n",
        "2\n1 2 3 0_0\n",
        "2\n1 2 \u0663 0\n",
        "2\n+1 2 3 0\n",
        "2\n1.0 2 3 0\n",
    ],
    ids=[
        "empty", "blank", "not-integer", "too-few", "too-many", "zero", "negative",
        "underscore", "arabic-indic-digit", "plus-sign", "decimal-point",
    ],
)
def test_parse_rejects_malformed_text(text: str) -> None:
    with pytest.raises(PuzzleFormatError):
        parse_puzzle(text)


def test_parse_rejects_bad_tiles() -> None:
    with pytest.raises(InvalidBoardError):
        parse_puzzle("2\n1 2 3 3\n")


def test_format_error_is_a_value_error() -> None:
    assert issubclass(PuzzleFormatError, ValueError)


def test_read_puzzle_file(tmp_path: Path) -> None:
    path = tmp_path / "puzzle04.txt"
    path.write_text("3\n 0  1  3\n 4  2  5\n 7  8  6\n")
    assert read_puzzle(path) == Board([[0, 1, 3], [4, 2, 5], [7, 8, 6]])


def test_read_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_puzzle(tmp_path / "missing.txt")
