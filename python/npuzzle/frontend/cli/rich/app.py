"""Rich terminal frontend — tables, colours, and panels.

Renders the same solver output as the vanilla frontend, one styled
grid per step of the solution.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.config import SolverConfig
from npuzzle.engine.solver import Solver
from npuzzle.errors import TwinUnavailableError
from npuzzle.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def _tile_text(board: Board, row: int, col: int) -> Text:
    val = board.get_tile(row, col)
    if val == 0:
        return Text(" ")
    style = "green" if board.is_tile_correct(row, col) else "yellow"
    return Text(str(val), style=style)


def _render_board(board: Board, title: str | None = None) -> Table:
    """Grid of one solution step; placed tiles green, misplaced yellow."""
    table = Table(
        title=title,
        show_header=False,
        box=rich.box.SQUARE,
        border_style="dim",
        show_lines=True,
        padding=0,
    )
    cell_width = len(str(board.size * board.size - 1)) + 2
    for _ in range(board.size):
        table.add_column(width=cell_width, justify="right")
    for r in range(board.size):
        table.add_row(*(_tile_text(board, r, c) for c in range(board.size)))
    return table


def _summary(solver: Solver) -> Text:
    text = Text()
    text.append("  Manhattan ", style="dim")
    text.append(str(solver.initial.manhattan()), style="bold")
    text.append("  Hamming ", style="dim")
    text.append(str(solver.initial.hamming()), style="bold")
    text.append("  Expanded ", style="dim")
    text.append(str(solver.expanded), style="bold")
    return text


# -- public entry points ------------------------------------------------------


def run(
    board: Board,
    config: SolverConfig | None = None,
    rng: random.Random | None = None,
) -> bool:
    """Solve *board* and render every step.  Returns True if solvable."""
    size = board.size
    with console.status("[cyan]Searching…[/cyan]"):
        solver = Solver(board, config=config, rng=rng)

    if not solver.is_solvable():
        panel = Panel(
            Group(Align.center(_render_board(board)), Align.center(_summary(solver))),
            title=f"[bold red]Not solvable  {size}×{size}[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
        console.print(panel)
        return False

    steps = [
        _render_board(b, title=f"[dim]{i}[/dim]")
        for i, b in enumerate(solver.solution() or [])
    ]
    panel = Panel(
        Group(Columns(steps, padding=(1, 2)), Align.center(_summary(solver))),
        title=(
            f"[bold green]Solved {size}×{size} in "
            f"{solver.moves()} moves[/bold green]"
        ),
        border_style="green",
        padding=(1, 2),
    )
    console.print(panel)
    return True


def show_twins(board: Board, count: int, rng: random.Random | None = None) -> None:
    """Render *count* random twins of *board*."""
    twins: list[Table] = []
    for i in range(count):
        try:
            twins.append(_render_board(board.twin(rng), title=f"twin {i}"))
        except TwinUnavailableError:
            console.print("[yellow]No twin: fewer than two tiles to swap.[/yellow]")
            break
    if twins:
        console.print(Columns(twins, padding=(1, 2)))
