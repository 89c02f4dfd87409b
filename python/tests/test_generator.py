"""Random board generation."""

from __future__ import annotations

import random

import pytest

from npuzzle.config import SolverConfig
from npuzzle.engine.generator import PuzzleGenerator
from npuzzle.engine.solver import Solver
from npuzzle.models.board import Board


def test_solved_is_goal() -> None:
    for size in (1, 2, 3, 5):
        assert PuzzleGenerator.solved(size).is_goal()


def test_scramble_zero_steps_is_identity(goal3: Board) -> None:
    assert PuzzleGenerator.scramble(goal3, 0) == goal3


def test_scramble_moves_one_slide_at_a_time(goal3: Board) -> None:
    board = PuzzleGenerator.scramble(goal3, 1, random.Random(0))
    assert board in goal3.neighbors()


def test_scramble_does_not_backtrack(goal3: Board) -> None:
    # From a corner, two non-reversing slides always end two cells away.
    board = PuzzleGenerator.scramble(goal3, 2, random.Random(5))
    assert board != goal3
    br, bc = board.blank_pos
    assert abs(br - 2) + abs(bc - 2) == 2


@pytest.mark.parametrize("seed", range(5))
def test_generate_is_solvable_and_bounded(seed: int) -> None:
    board = PuzzleGenerator.generate(3, 8, random.Random(seed))
    assert not board.is_goal()
    solver = Solver(board, config=SolverConfig(closed_set=True), rng=random.Random(seed))
    assert solver.is_solvable()
    assert solver.moves() <= 8


def test_generate_is_reproducible() -> None:
    a = PuzzleGenerator.generate(4, rng=random.Random(42))
    b = PuzzleGenerator.generate(4, rng=random.Random(42))
    assert a == b
    assert a.size == 4


def test_generate_rejects_non_positive_steps() -> None:
    with pytest.raises(ValueError):
        PuzzleGenerator.generate(3, 0)


def test_unsolvable_board() -> None:
    rng = random.Random(3)
    board = PuzzleGenerator.unsolvable(2, rng=rng)
    assert not Solver(board, rng=rng).is_solvable()


@pytest.mark.timeout(5)
@pytest.mark.parametrize("steps", [12, 24])
def test_generate_2x2_walk_that_returns_to_goal(steps: int) -> None:
    # Non-reversing walks on 2×2 cycle through the same 12 boards.
    board = PuzzleGenerator.generate(2, steps, random.Random(0))
    assert not board.is_goal()
    assert board in Board.goal(2).neighbors()
