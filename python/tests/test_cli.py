"""Command-line tests, driven through typer's ``CliRunner``."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from main import app

runner = CliRunner()

_TWO_MOVES = "3\n1 2 3\n4 0 6\n7 5 8\n"

_EXPECTED_REPORT = (
    "Minimum number of moves = 2\n"
    "3\n1 2 3\n4 0 6\n7 5 8\n"
    "\n"
    "3\n1 2 3\n4 5 6\n7 0 8\n"
    "\n"
    "3\n1 2 3\n4 5 6\n7 8 0\n"
)


@pytest.fixture()
def puzzle_file(tmp_path: Path) -> Path:
    path = tmp_path / "puzzle02.txt"
    path.write_text(_TWO_MOVES)
    return path


def test_solves_puzzle_file(puzzle_file: Path) -> None:
    result = runner.invoke(app, [str(puzzle_file)])
    assert result.exit_code == 0, result.output
    assert result.stdout == _EXPECTED_REPORT


def test_reads_stdin() -> None:
    result = runner.invoke(app, [], input=_TWO_MOVES)
    assert result.exit_code == 0, result.output
    assert result.stdout == _EXPECTED_REPORT


def test_dash_means_stdin() -> None:
    result = runner.invoke(app, ["-", "--closed-set"], input=_TWO_MOVES)
    assert result.exit_code == 0, result.output
    assert result.stdout == _EXPECTED_REPORT


def test_unsolvable_puzzle(tmp_path: Path) -> None:
    path = tmp_path / "unsolvable.txt"
    path.write_text("3\n2 1 3\n4 0 6\n7 5 8\n")
    result = runner.invoke(app, [str(path)])
    assert result.exit_code == 0, result.output
    assert result.stdout == "No solution possible\n"


def test_invalid_puzzle_exits_with_one(tmp_path: Path) -> None:
    path = tmp_path / "broken.txt"
    path.write_text("3\n1 2 3\n4 4 6\n7 5 8\n")
    result = runner.invoke(app, [str(path)])
    assert result.exit_code == 1


def test_missing_file_exits_with_one(tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "nope.txt")])
    assert result.exit_code == 1


def test_budget_from_environment_exits_with_two(tmp_path: Path) -> None:
    path = tmp_path / "hard.txt"
    path.write_text("3\n8 6 7\n2 5 4\n3 0 1\n")
    result = runner.invoke(app, [str(path)], env={"NPUZZLE_MAX_EXPANSIONS": "5"})
    assert result.exit_code == 2


def test_rich_frontend(puzzle_file: Path) -> None:
    result = runner.invoke(app, [str(puzzle_file), "-f", "rich"])
    assert result.exit_code == 0, result.output
    assert "Minimum number of moves = 2" in result.stdout
    assert "Move 2" in result.stdout


def test_rich_frontend_unsolvable(tmp_path: Path) -> None:
    path = tmp_path / "unsolvable.txt"
    path.write_text("2\n2 1\n3 0\n")
    result = runner.invoke(app, [str(path), "--frontend", "rich"])
    assert result.exit_code == 0, result.output
    assert "No solution possible" in result.stdout


def test_random_board_with_seed() -> None:
    first = runner.invoke(app, ["--random", "2", "--seed", "5"])
    second = runner.invoke(app, ["-r", "2", "--seed", "5"])
    assert first.exit_code == 0, first.output
    assert first.stdout.startswith("Minimum number of moves = ")
    assert first.stdout == second.stdout


def test_verbose_logging_still_reports() -> None:
    result = runner.invoke(app, ["-r", "3", "--seed", "2", "-v", "--closed-set"])
    assert result.exit_code == 0, result.output
    assert "Minimum number of moves = " in result.output


def test_random_size_out_of_range() -> None:
    result = runner.invoke(app, ["-r", "1"])
    assert result.exit_code != 0


@pytest.mark.parametrize("source", ["file", "-"])
def test_random_with_puzzle_source_is_rejected(puzzle_file: Path, source: str) -> None:
    arg = str(puzzle_file) if source == "file" else "-"
    result = runner.invoke(app, [arg, "-r", "3"], input=_TWO_MOVES)
    assert result.exit_code == 2
    assert "Minimum number of moves" not in result.stdout
