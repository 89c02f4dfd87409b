"""Generates random puzzle boards for the CLI and the test suite."""

from __future__ import annotations

import random

from npuzzle.models.board import Board


class PuzzleGenerator:
    """Creates boards by random-walking the blank away from the goal."""

    @staticmethod
    def solved(size: int) -> Board:
        """Goal board: 1..n²-1 row by row, blank in the last cell."""
        return Board.goal(size)

    @staticmethod
    def scramble(board: Board, steps: int, rng: random.Random | None = None) -> Board:
        """Return *board* after *steps* random slides.

        The walk never immediately undoes its previous slide, so short
        walks actually move away from the start.
        """
        rng = rng or random
        previous: Board | None = None
        for _ in range(steps):
            neighbors = board.neighbors()
            if previous in neighbors and len(neighbors) > 1:
                neighbors.remove(previous)
            previous, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(
        size: int, steps: int | None = None, rng: random.Random | None = None
    ) -> Board:
        """Return a random *solvable* board of the given size.

        ``steps`` defaults to a thorough shuffle (``size² * 100``); pass
        a small value to bound the optimal solution length.
        """
        if size < 2:
            return Board.goal(size)
        if steps is None:
            steps = size * size * 100
        if steps < 1:
            raise ValueError(f"steps must be positive, got {steps}.")
        rng = rng or random
        board = PuzzleGenerator.scramble(Board.goal(size), steps, rng)
        if board.is_goal():
            # Walks can close a loop (every 12 slides on 2×2); step off it.
            board = rng.choice(board.neighbors())
        return board

    @staticmethod
    def unsolvable(
        size: int, steps: int | None = None, rng: random.Random | None = None
    ) -> Board:
        """Return a board that cannot reach the goal.

        A solvable scramble with one tile pair exchanged has the wrong
        permutation parity.
        """
        return PuzzleGenerator.generate(size, steps, rng).twin(rng)
