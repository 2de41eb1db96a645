"""Generates sliding puzzle boards for the CLI and the test suite."""

from __future__ import annotations

import random
from typing import Optional

from backend.models.board import Board

# A scramble walks the blank this many steps per cell.
DEFAULT_SHUFFLES_PER_CELL = 100


class GameGenerator:
    """Creates puzzles by random blank walks from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def scramble(
        board: Board,
        shuffles: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> Board:
        """Return *board* after *shuffles* random slides with no immediate backtrack."""
        rng = rng or random.Random()
        if shuffles is None:
            shuffles = board.dimension() ** 2 * DEFAULT_SHUFFLES_PER_CELL

        prev: Optional[Board] = None
        for _ in range(shuffles):
            neighbors = list(board.neighbors())
            if prev in neighbors and len(neighbors) > 1:
                neighbors.remove(prev)
            prev, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(
        size: int,
        shuffles: Optional[int] = None,
        seed: Optional[int] = None,
        solvable: bool = True,
    ) -> Board:
        """Return a random, not yet solved board of the given size.

        Unsolvable boards are the twin of a scrambled solvable one.
        """
        if size < 2:
            raise ValueError(f"Cannot scramble a {size}×{size} board.")
        if shuffles is not None and shuffles < 1:
            raise ValueError(f"Need at least one shuffle, got {shuffles}.")
        rng = random.Random(seed)
        board = GameGenerator.scramble(GameGenerator.solved(size), shuffles, rng)
        # A walk can close a cycle back onto the goal; keep sliding off it.
        while board.is_goal():
            board = rng.choice(list(board.neighbors()))
        if not solvable:
            board = board.twin()
        return board

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state, by inversion parity."""
        n = board.dimension()
        flat = [v for v in board.flat if v != 0]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        if n % 2 == 1:
            return inversions % 2 == 0
        blank_row_from_bottom = n - 1 - board.blank_pos[0]
        return (inversions + blank_row_from_bottom) % 2 == 0
