"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output of the same report the vanilla
frontend prints: the move count, then every board of the solution with the
slide that produced it.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import Solver
from backend.models.board import Board, Direction

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    n = board.dimension()
    width = len(str(n * n - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(n):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _step_panel(index: int, board: Board, direction: Direction | None) -> Panel:
    caption = Text()
    caption.append("  manhattan ", style="dim")
    caption.append(str(board.manhattan()), style="bold yellow")
    caption.append("  hamming ", style="dim")
    caption.append(str(board.hamming()), style="bold yellow")

    title = "[bold cyan]Start[/bold cyan]"
    if direction is not None:
        title = f"[bold cyan]Move {index}[/bold cyan] [dim]({direction.value})[/dim]"
    border = "bold green" if board.is_goal() else "cyan"

    return Panel(
        Group(Align.center(_render_board(board)), Align.center(caption)),
        title=title,
        border_style=border,
        padding=(0, 2),
        expand=False,
    )


# -- report -------------------------------------------------------------------


def _summary(solver: Solver) -> Text:
    summary = Text()
    if not solver.is_solvable():
        summary.append("No solution possible", style="bold red")
    else:
        summary.append("Minimum number of moves = ", style="dim")
        summary.append(str(solver.moves()), style="bold green")
    summary.append(f"    ({solver.expanded} nodes expanded)", style="dim")
    return summary


def run(solver: Solver) -> None:
    n = solver.initial.dimension()
    console.print()
    console.print(
        Panel(
            Align.center(_summary(solver)),
            title=f"[bold]Sliding Puzzle  {n}×{n}[/bold]",
            border_style="bright_blue",
            padding=(1, 4),
        )
    )

    if not solver.is_solvable():
        console.print(Align.center(_step_panel(0, solver.initial, None)))
        return

    boards = solver.solution()
    directions: list[Direction | None] = [None, *solver.directions()]
    for i, (board, direction) in enumerate(zip(boards, directions)):
        console.print(Align.center(_step_panel(i, board, direction)))
