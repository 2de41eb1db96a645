"""Reads puzzles in the plain-text format: N, then N² tile labels."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from backend.models.board import Board

logger = logging.getLogger(__name__)

# Plain ASCII decimal integers, optionally negative.
_INTEGER = re.compile(r"-?[0-9]+")


class PuzzleFormatError(ValueError):
    """Raised when puzzle text cannot be parsed into N and N² integers."""


def parse_puzzle(text: str) -> Board:
    """Parse whitespace-separated puzzle text into a :class:`Board`.

    Example::

        parse_puzzle("3\\n1 2 3\\n4 0 6\\n7 5 8\\n")

    Tile validation (permutation, blank present) is left to :class:`Board`.
    """
    tokens = text.split()
    if not tokens:
        raise PuzzleFormatError("Puzzle input is empty.")
    for t in tokens:
        if not _INTEGER.fullmatch(t):
            raise PuzzleFormatError(f"Puzzle input must contain only integers, got {t!r}.")
    numbers = [int(t) for t in tokens]

    size, flat = numbers[0], numbers[1:]
    if size < 1:
        raise PuzzleFormatError(f"Board size must be positive, got {size}.")
    if len(flat) != size * size:
        raise PuzzleFormatError(
            f"Expected {size * size} tiles after size {size}, got {len(flat)}."
        )
    logger.debug("Parsed %d×%d puzzle", size, size)
    return Board.from_flat(size, flat)


def read_puzzle(path: Path) -> Board:
    """Read and parse the puzzle file at *path*."""
    return parse_puzzle(Path(path).read_text())
