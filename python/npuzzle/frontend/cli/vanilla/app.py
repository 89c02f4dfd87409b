"""Vanilla terminal frontend — plain ``print`` output, no styling.

Prints the same text as the classic ``Solver`` test client so that
output can be diffed against reference transcripts.
"""

from __future__ import annotations

import random

from npuzzle.config import SolverConfig
from npuzzle.engine.solver import Solver
from npuzzle.errors import TwinUnavailableError
from npuzzle.models.board import Board


def _print_path(solver: Solver) -> None:
    print(f"problem solved in {solver.moves()} steps")
    print("------------PATH------------")
    for board in solver.solution() or []:
        print(board)


# -- public entry points ------------------------------------------------------


def run(
    board: Board,
    config: SolverConfig | None = None,
    rng: random.Random | None = None,
) -> bool:
    """Solve *board* and print the path.  Returns True if solvable."""
    solver = Solver(board, config=config, rng=rng)
    if not solver.is_solvable():
        print("board not solvable")
        return False
    _print_path(solver)
    print("board is solvable")
    return True


def show_twins(board: Board, count: int, rng: random.Random | None = None) -> None:
    """Print *count* random twins of *board*."""
    for i in range(count):
        try:
            twin = board.twin(rng)
        except TwinUnavailableError:
            print("NO TWIN!")
            break
        print(f"twin: {i}")
        print(twin)
