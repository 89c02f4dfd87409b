"""Command-line entry point.

Usage::

    npuzzle fixtures/puzzle04.txt            # solve a file, plain output
    npuzzle puzzle.json -f rich              # Rich tables
    npuzzle --random 3 --seed 7              # solve a random 3×3 scramble
    npuzzle fixtures/puzzle04.txt --twins 5  # print five twins
"""

from __future__ import annotations

import importlib
import logging
import random
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from npuzzle.config import SolverConfig, configure_logging
from npuzzle.engine.generator import PuzzleGenerator
from npuzzle.engine.loader import load_board
from npuzzle.errors import PuzzleError

logger = logging.getLogger(__name__)
err_console = Console(stderr=True)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None, help="Puzzle file: 'n' then n² integers, or a .json board.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to print the solution.",
    ),
    random_size: Optional[int] = typer.Option(
        None, "--random",
        min=2, max=6,
        help="Solve a random solvable board of this size instead of a file.",
    ),
    steps: int = typer.Option(
        20, "--steps",
        min=1,
        help="Random slides used to scramble a --random board.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for scrambling and twin selection.",
    ),
    max_nodes: Optional[int] = typer.Option(
        None, "--max-nodes",
        min=1,
        help="Abort once this many search nodes have been queued.",
    ),
    closed_set: bool = typer.Option(
        False, "--closed-set",
        help="Skip boards already expanded on the same side of the search.",
    ),
    twins: int = typer.Option(
        0, "--twins",
        min=0,
        help="Print this many twins of the board instead of solving it.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Solve an n²-1 sliding puzzle optimally, or report it unsolvable."""
    configure_logging(verbose)

    if (path is None) == (random_size is None):
        err_console.print("[red]Give either a puzzle file or --random SIZE.[/red]")
        raise typer.Exit(code=2)

    rng = random.Random(seed)
    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        if path is not None:
            board = load_board(path)
        else:
            board = PuzzleGenerator.generate(random_size, steps, rng)
        logger.debug("Loaded %d×%d board", board.size, board.size)

        if twins:
            mod.show_twins(board, twins, rng)
            return

        config = SolverConfig(max_nodes=max_nodes, closed_set=closed_set)
        mod.run(board, config=config, rng=rng)
    except PuzzleError as exc:
        err_console.print(str(exc), style="red", markup=False, soft_wrap=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
