"""Board model for the sliding puzzle solver."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from npuzzle.errors import InvalidBoardError, TwinUnavailableError

Cell = tuple[int, int]


class Direction(StrEnum):
    """Direction in which the *blank* slides."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


_OFFSETS: dict[Direction, Cell] = {
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
}


@dataclass(frozen=True)
class Board:
    """Immutable n×n sliding puzzle configuration.

    Tiles are stored as nested tuples of ints. 0 represents the blank.
    Two boards compare equal iff they have the same size and the same
    tile in every cell, so boards can be shared freely between search
    nodes and used as set members.
    """

    size: int
    tiles: tuple[tuple[int, ...], ...]
    blank_pos: Cell

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> Board:
        """Create a board from an n×n grid, copying it.

        Example::

            Board.from_grid([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
        """
        size = len(grid)
        if size == 0:
            raise InvalidBoardError("A board needs at least one row.")
        for r, row in enumerate(grid):
            if len(row) != size:
                raise InvalidBoardError(
                    f"Row {r} has {len(row)} tiles, expected {size} "
                    f"for a {size}×{size} board."
                )
        return cls.from_flat(size, [v for row in grid for v in row])

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size < 1:
            raise InvalidBoardError(f"Board size must be positive, got {size}.")
        if len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise InvalidBoardError(
                f"Tiles must be exactly 0..{size * size - 1}, each once."
            )
        tiles = tuple(
            tuple(int(v) for v in flat[r * size : (r + 1) * size])
            for r in range(size)
        )
        blank = list(flat).index(0)
        return cls(size=size, tiles=tiles, blank_pos=divmod(blank, size))

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        return cls.from_flat(size, [*range(1, size * size), 0])

    # -- queries --------------------------------------------------------------

    def dimension(self) -> int:
        return self.size

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def goal_tile(self, row: int, col: int) -> int:
        """Tile that belongs at (row, col) in the goal layout."""
        if row == self.size - 1 and col == self.size - 1:
            return 0
        return row * self.size + col + 1

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.tiles[row][col] == self.goal_tile(row, col)

    def hamming(self) -> int:
        """Number of non-blank tiles out of place."""
        count = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val != 0 and val != self.goal_tile(r, c):
                    count += 1
        return count

    def manhattan(self) -> int:
        """Sum of the grid distances of each tile to its goal cell."""
        total = 0
        for r, row in enumerate(self.tiles):
            for c, val in enumerate(row):
                if val == 0:
                    continue
                goal_r, goal_c = divmod(val - 1, self.size)
                total += abs(goal_r - r) + abs(goal_c - c)
        return total

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == self.size - 1 and c == self.size - 1:
                    return self.tiles[r][c] == 0
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    # -- derived boards -------------------------------------------------------

    def neighbors(self) -> list[Board]:
        """Boards reachable by sliding the blank one cell."""
        br, bc = self.blank_pos
        result: list[Board] = []
        for dr, dc in _OFFSETS.values():
            tr, tc = br + dr, bc + dc
            if 0 <= tr < self.size and 0 <= tc < self.size:
                result.append(self._exchange((br, bc), (tr, tc), (tr, tc)))
        return result

    def slide(self, direction: Direction) -> Board | None:
        """Board after sliding the blank in *direction*, or ``None`` at an edge."""
        br, bc = self.blank_pos
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < self.size and 0 <= tc < self.size):
            return None
        return self._exchange((br, bc), (tr, tc), (tr, tc))

    def swapped(self, first: Cell, second: Cell) -> Board:
        """Return a board with the tiles at *first* and *second* exchanged.

        Both cells must hold distinct non-blank tiles: exchanging a tile
        pair flips the permutation parity, which is what makes the
        result a solvability witness.
        """
        for r, c in (first, second):
            if not (0 <= r < self.size and 0 <= c < self.size):
                raise TwinUnavailableError(
                    f"Cell {(r, c)} is off the {self.size}×{self.size} board."
                )
        if first == second:
            raise TwinUnavailableError(f"Cannot swap cell {first} with itself.")
        if self.get_tile(*first) == 0 or self.get_tile(*second) == 0:
            raise TwinUnavailableError("Twin swaps must not involve the blank.")
        return self._exchange(first, second, self.blank_pos)

    def twin(self, rng: random.Random | None = None) -> Board:
        """Return this board with two random non-blank tiles swapped.

        Exactly one of a board and its twin is solvable. *rng* defaults
        to the :mod:`random` module; anything with a ``sample`` method
        works, so callers can pin the chosen pair.
        """
        rng = rng or random
        cells = [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.tiles[r][c] != 0
        ]
        if len(cells) < 2:
            raise TwinUnavailableError(
                f"A {self.size}×{self.size} board has no pair of tiles to swap."
            )
        first, second = rng.sample(cells, 2)
        return self.swapped(first, second)

    # -- rendering ------------------------------------------------------------

    def __str__(self) -> str:
        lines = [str(self.size)]
        for row in self.tiles:
            lines.append("".join(f"{val:2d} " for val in row))
        return "\n".join(lines) + "\n"

    # -- helpers --------------------------------------------------------------

    def _exchange(self, a: Cell, b: Cell, blank_pos: Cell) -> Board:
        rows = [list(row) for row in self.tiles]
        (ar, ac), (br, bc) = a, b
        rows[ar][ac], rows[br][bc] = rows[br][bc], rows[ar][ac]
        return Board(
            size=self.size,
            tiles=tuple(tuple(row) for row in rows),
            blank_pos=blank_pos,
        )
