"""Vanilla terminal frontend — no third-party dependencies.

Prints the result in the plain puzzle text format so the output can be
piped into other tools or diffed against expected solutions.
"""

from __future__ import annotations

from backend.engine.gamesolver import Solver


def render(solver: Solver) -> str:
    """Return the full report for a finished solve."""
    if not solver.is_solvable():
        return "No solution possible\n"
    lines = [f"Minimum number of moves = {solver.moves()}"]
    for board in solver.solution():
        lines.append(str(board))
    return "\n".join(lines)


def run(solver: Solver) -> None:
    print(render(solver), end="")
