"""Shared pytest fixtures."""

from __future__ import annotations

import random
from collections.abc import Sequence
from pathlib import Path

import pytest

from npuzzle.models.board import Board

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


class PinnedPair:
    """Stand-in for ``random.Random`` whose ``sample`` always picks *cells*."""

    def __init__(self, *cells: tuple[int, int]) -> None:
        self.cells = list(cells)

    def sample(self, population: Sequence[tuple[int, int]], k: int) -> list[tuple[int, int]]:
        assert k == len(self.cells)
        return list(self.cells)


@pytest.fixture
def pinned_pair() -> type[PinnedPair]:
    """Build an rng stand-in with ``pinned_pair(cell_a, cell_b)``."""
    return PinnedPair


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240601)


@pytest.fixture
def goal3() -> Board:
    return Board.goal(3)
