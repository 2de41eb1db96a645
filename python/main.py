#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py puzzle.txt              # solve a puzzle file
    cat puzzle.txt | python main.py        # read the puzzle from stdin
    python main.py -r 3 --seed 7 -f rich   # random 3×3, Rich output
    python main.py puzzle.txt --closed-set --max-expansions 500000
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamereader import parse_puzzle, read_puzzle  # noqa: E402
from backend.engine.gamesolver import SearchBudgetExceeded, Solver  # noqa: E402
from backend.models.board import Board  # noqa: E402

logger = logging.getLogger("npuzzle")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_board(puzzle: Optional[Path], size: Optional[int], seed: Optional[int]) -> Board:
    if size is not None:
        board = GameGenerator.generate(size, seed=seed)
        logger.debug("Generated random %d×%d board", size, size)
        return board
    if puzzle is None or str(puzzle) == "-":
        return parse_puzzle(sys.stdin.read())
    return read_puzzle(puzzle)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    puzzle: Optional[Path] = typer.Argument(
        None,
        help="Puzzle file (N, then N×N tiles). Omit or pass '-' for stdin.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to print the result.",
    ),
    size: Optional[int] = typer.Option(
        None, "-r", "--random",
        min=2, max=8,
        help="Solve a random solvable board of this size instead of reading one.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
    closed_set: bool = typer.Option(
        False, "--closed-set",
        help="Remember every expanded board instead of checking ancestors only.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=1,
        envvar="NPUZZLE_MAX_EXPANSIONS",
        help="Give up after expanding this many nodes.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Sliding Puzzle Solver."""
    _configure_logging(verbose)

    if size is not None and puzzle is not None:
        raise typer.BadParameter(
            "cannot be combined with a puzzle file.", param_hint="'-r' / '--random'"
        )

    try:
        board = _load_board(puzzle, size, seed)
    except (OSError, ValueError) as exc:
        logger.error("Cannot load puzzle: %s", exc)
        raise typer.Exit(code=1) from exc

    try:
        solver = Solver(board, closed_set=closed_set, max_expansions=max_expansions)
    except SearchBudgetExceeded as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=2) from exc

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(solver)


if __name__ == "__main__":
    app()
