"""Sliding puzzle solver.

A* over the move graph with priority ``moves + manhattan``.  Solvability is
decided without a parity formula: the board and its twin are searched in
lock-step, and exactly one of them can reach the goal.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Optional

from backend.engine.gamesolver.node import SearchNode
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)

# Emit a progress line every this many expansions (both frontiers combined).
PROGRESS_EVERY = 10_000


class SearchBudgetExceeded(RuntimeError):
    """Raised when a solve expands more nodes than the caller allowed."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Search exceeded the budget of {limit} expanded nodes.")
        self.limit = limit


class _Frontier:
    """One best-first search: an open heap plus duplicate filtering.

    By default a neighbour is rejected when it already appears on the
    expanding node's own path.  With *closed_set* every expanded board is
    remembered instead, so a board is expanded at most once.
    """

    def __init__(self, root: Board, closed_set: bool) -> None:
        self._heap: list[tuple[int, int, SearchNode]] = []
        self._counter = itertools.count()
        self._closed: Optional[set[Board]] = set() if closed_set else None
        self._push(SearchNode(board=root, moves=0))

    @property
    def exhausted(self) -> bool:
        return not self._heap

    def _push(self, node: SearchNode) -> None:
        # Equal priorities pop in insertion order.
        heapq.heappush(self._heap, (node.priority, next(self._counter), node))

    def step(self) -> tuple[bool, Optional[SearchNode]]:
        """Expand the cheapest open node.

        Returns ``(expanded, goal)``.  *expanded* is False when the popped
        node had already been expanded through another path.  *goal* is the
        node wrapping a goal neighbour, or ``None``.
        """
        _, _, node = heapq.heappop(self._heap)
        closed = self._closed
        if closed is not None:
            if node.board in closed:
                return False, None
            closed.add(node.board)

        for board in node.board.neighbors():
            if board.is_goal():
                return True, node.child(board)
            if closed is not None:
                if board in closed:
                    continue
            elif node.has_ancestor(board):
                continue
            self._push(node.child(board))
        return True, None


class Solver:
    """Finds a shortest solution for a board, or proves there is none.

    The whole search runs in the constructor; afterwards the result is
    available through :meth:`is_solvable`, :meth:`moves`, :meth:`solution`
    and :meth:`directions`.
    """

    def __init__(
        self,
        initial: Board,
        *,
        closed_set: bool = False,
        max_expansions: Optional[int] = None,
    ) -> None:
        self.initial = initial
        self.expanded: int = 0
        self._max_expansions = max_expansions
        self._goal: Optional[SearchNode] = None

        logger.debug(
            "Solving %d×%d board (hamming=%d, manhattan=%d, closed_set=%s)",
            initial.dimension(), initial.dimension(),
            initial.hamming(), initial.manhattan(), closed_set,
        )

        if initial.is_goal():
            self._goal = SearchNode(board=initial, moves=0)
            logger.debug("Board is already solved")
            return

        twin = initial.twin()
        if twin.is_goal():
            logger.debug("Twin is the goal; board is unsolvable")
            return

        self._goal = self._search(
            _Frontier(initial, closed_set), _Frontier(twin, closed_set)
        )
        if self._goal is None:
            logger.debug("No solution after %d expansions", self.expanded)
        else:
            logger.debug(
                "Solved in %d moves after %d expansions",
                self._goal.moves, self.expanded,
            )

    # -- search ---------------------------------------------------------------

    def _search(
        self, primary: _Frontier, shadow: _Frontier
    ) -> Optional[SearchNode]:
        while True:
            if primary.exhausted:
                return None
            expanded, goal = primary.step()
            self._count(expanded)
            if goal is not None:
                return goal

            # An exhausted shadow only means the twin's component has no goal.
            if shadow.exhausted:
                continue
            expanded, goal = shadow.step()
            self._count(expanded)
            if goal is not None:
                return None

    def _count(self, expanded: bool) -> None:
        if not expanded:
            return
        self.expanded += 1
        if self._max_expansions is not None and self.expanded > self._max_expansions:
            raise SearchBudgetExceeded(self._max_expansions)
        if self.expanded % PROGRESS_EVERY == 0:
            logger.debug("Expanded %d nodes", self.expanded)

    # -- results --------------------------------------------------------------

    def is_solvable(self) -> bool:
        return self._goal is not None

    def moves(self) -> int:
        """Minimum number of moves to solve the board; -1 if unsolvable."""
        return self._goal.moves if self._goal is not None else -1

    def solution(self) -> list[Board]:
        """Boards of a shortest solution, start to goal; ``[]`` if unsolvable."""
        if self._goal is None:
            return []
        return self._goal.path()

    def directions(self) -> list[Direction]:
        """The solution as tile slides; ``[]`` if solved or unsolvable."""
        return [a.direction_to(b) for a, b in itertools.pairwise(self.solution())]
