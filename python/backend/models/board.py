"""Immutable board model for the sliding puzzle.

A :class:`Board` caches its Hamming and Manhattan distances.  Boards derived
from another board by a single swap (neighbours, twins, slides) update those
caches from the two touched cells only, so producing a successor costs O(N²)
for the tuple copy but never a full heuristic recount.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import StrEnum


class InvalidBoardError(ValueError):
    """Raised when a grid does not describe a valid sliding puzzle."""


class IllegalMoveError(ValueError):
    """Raised when a slide would move a tile off the board."""


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# The offset points to the tile that will slide into the blank.
# UP   → tile at (br+1, bc) moves up    → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}

# Blank moves up, down, left, right.
_BLANK_STEPS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _distance(value: int, row: int, col: int, size: int) -> int:
    """Manhattan distance from (row, col) to the goal cell of *value*."""
    goal_row, goal_col = divmod(value - 1, size)
    return abs(row - goal_row) + abs(col - goal_col)


class Board:
    """An N×N sliding puzzle state.  0 represents the blank space.

    Instances never change after construction.  Use :meth:`neighbors`,
    :meth:`twin` or :meth:`slide` to obtain related boards.
    """

    __slots__ = ("_size", "_tiles", "_blank", "_hamming", "_manhattan")

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        size = len(grid)
        if size == 0:
            raise InvalidBoardError("A board needs at least one row.")
        flat: list[int] = []
        for r, row in enumerate(grid):
            if len(row) != size:
                raise InvalidBoardError(
                    f"Row {r} has {len(row)} tiles; expected {size} for a "
                    f"{size}×{size} board."
                )
            flat.extend(row)
        self._init_from_flat(size, flat)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size < 1:
            raise InvalidBoardError(f"Board size must be positive, got {size}.")
        if len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        obj = object.__new__(cls)
        obj._init_from_flat(size, list(flat))
        return obj

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the goal board (all tiles in order, blank bottom-right)."""
        return cls.from_flat(size, [*range(1, size * size), 0])

    def _init_from_flat(self, size: int, flat: list[int]) -> None:
        for v in flat:
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidBoardError(f"Tile labels must be integers, got {v!r}.")
        if sorted(flat) != list(range(size * size)):
            raise InvalidBoardError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )

        hamming = 0
        manhattan = 0
        blank = 0
        for i, v in enumerate(flat):
            if v == 0:
                blank = i
                continue
            r, c = divmod(i, size)
            dist = _distance(v, r, c, size)
            if dist:
                hamming += 1
                manhattan += dist

        self._fill(size, tuple(flat), blank, hamming, manhattan)

    def _fill(
        self, size: int, tiles: tuple[int, ...], blank: int, hamming: int, manhattan: int
    ) -> None:
        set_ = object.__setattr__
        set_(self, "_size", size)
        set_(self, "_tiles", tiles)
        set_(self, "_blank", blank)
        set_(self, "_hamming", hamming)
        set_(self, "_manhattan", manhattan)

    def _swapped(self, p: int, q: int) -> Board:
        """Return a new board with cells *p* and *q* exchanged.

        Only the two touched cells contribute to the heuristic delta.
        """
        n = self._size
        tiles = list(self._tiles)
        tiles[p], tiles[q] = tiles[q], tiles[p]

        hamming = self._hamming
        manhattan = self._manhattan
        blank = self._blank
        # Each cell now holds the tile that used to sit in the other one.
        for now, before in ((p, q), (q, p)):
            v = tiles[now]
            if v == 0:
                blank = now
                continue
            r, c = divmod(now, n)
            pr, pc = divmod(before, n)
            new_dist = _distance(v, r, c, n)
            old_dist = _distance(v, pr, pc, n)
            manhattan += new_dist - old_dist
            if new_dist == 0:
                hamming -= 1
            elif old_dist == 0:
                hamming += 1

        obj = object.__new__(type(self))
        obj._fill(n, tuple(tiles), blank, hamming, manhattan)
        return obj

    # -- queries --------------------------------------------------------------

    def dimension(self) -> int:
        return self._size

    def hamming(self) -> int:
        """Number of numbered tiles out of place."""
        return self._hamming

    def manhattan(self) -> int:
        """Sum of Manhattan distances between tiles and their goal cells."""
        return self._manhattan

    def is_goal(self) -> bool:
        return self._hamming == 0

    @property
    def flat(self) -> tuple[int, ...]:
        return self._tiles

    @property
    def tiles(self) -> list[list[int]]:
        """Rows of the board as a freshly built list of lists."""
        n = self._size
        return [list(self._tiles[r * n : (r + 1) * n]) for r in range(n)]

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self._blank, self._size)

    def get_tile(self, row: int, col: int) -> int:
        return self._tiles[row * self._size + col]

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == 0:
            return row == self._size - 1 and col == self._size - 1
        return _distance(val, row, col, self._size) == 0

    # -- successors -----------------------------------------------------------

    def neighbors(self) -> Iterator[Board]:
        """Yield every board reachable by sliding one tile into the blank."""
        n = self._size
        br, bc = divmod(self._blank, n)
        for dr, dc in _BLANK_STEPS:
            nr, nc = br + dr, bc + dc
            if 0 <= nr < n and 0 <= nc < n:
                yield self._swapped(self._blank, nr * n + nc)

    def twin(self) -> Board:
        """Return the board with two adjacent same-row tiles exchanged.

        Row 0 is used unless it holds the blank, in which case row 1 is used.
        """
        n = self._size
        if n < 2:
            raise InvalidBoardError("A 1×1 board has no tiles to swap.")
        row = 1 if self._blank // n == 0 else 0
        return self._swapped(row * n, row * n + 1)

    def slide(self, direction: Direction) -> Board:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        """
        n = self._size
        br, bc = divmod(self._blank, n)
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < n and 0 <= tc < n):
            raise IllegalMoveError(
                f"Cannot slide {direction.value}: no tile at ({tr}, {tc})."
            )
        return self._swapped(self._blank, tr * n + tc)

    def direction_to(self, other: Board) -> Direction:
        """Return the slide that turns this board into *other*."""
        if other._size == self._size:
            br, bc = self.blank_pos
            for direction, (dr, dc) in _OFFSETS.items():
                if other.blank_pos != (br + dr, bc + dc):
                    continue
                if self.slide(direction) == other:
                    return direction
        raise IllegalMoveError("Boards are not one slide apart.")

    # -- value semantics ------------------------------------------------------

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Board is immutable; cannot set {name!r}.")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Board is immutable; cannot delete {name!r}.")

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Board):
            return NotImplemented
        if self._size != other._size:
            return False
        if self._hamming != other._hamming or self._manhattan != other._manhattan:
            return False
        return self._tiles == other._tiles

    def __hash__(self) -> int:
        return hash(self._tiles)

    def __repr__(self) -> str:
        return f"Board.from_flat({self._size}, {list(self._tiles)})"

    def __str__(self) -> str:
        n = self._size
        width = len(str(n * n - 1))
        lines = [str(n)]
        for r in range(n):
            row = self._tiles[r * n : (r + 1) * n]
            lines.append(" ".join(f"{v:>{width}}" for v in row))
        return "\n".join(lines) + "\n"
