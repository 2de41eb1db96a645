"""Search-tree nodes for the A* solver."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

from backend.models.board import Board


@dataclass(frozen=True, eq=False)
class SearchNode:
    """A board reached after *moves* slides, linked back to its predecessor."""

    board: Board
    moves: int
    previous: Optional[SearchNode] = field(default=None, repr=False)
    priority: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "priority", self.moves + self.board.manhattan())

    def child(self, board: Board) -> SearchNode:
        return SearchNode(board=board, moves=self.moves + 1, previous=self)

    def lineage(self) -> Iterator[SearchNode]:
        """Yield this node, then each predecessor back to the root."""
        node: Optional[SearchNode] = self
        while node is not None:
            yield node
            node = node.previous

    def has_ancestor(self, board: Board) -> bool:
        """True if *board* appears anywhere on this node's path, itself included."""
        return any(node.board == board for node in self.lineage())

    def path(self) -> list[Board]:
        """Boards from the root to this node, inclusive."""
        boards = [node.board for node in self.lineage()]
        boards.reverse()
        return boards
