"""Optimal sliding puzzle solver — dual-queue A*.

Two searches run in lock-step: one from the initial board and one from
its twin (the same board with two tiles exchanged). Exactly one of the
two can reach the goal, so whichever side extracts a goal first decides
solvability without any parity arithmetic.
"""

from __future__ import annotations

import logging
import random

from npuzzle.config import SolverConfig
from npuzzle.engine.solver.search_queue import SearchQueue
from npuzzle.errors import InvalidBoardError, SearchLimitExceeded
from npuzzle.models.board import Board
from npuzzle.models.search_node import SearchNode

logger = logging.getLogger(__name__)


def _check_twin(initial: Board, twin: Board) -> None:
    """Raise unless *twin* is *initial* with one non-blank pair swapped."""
    if twin.size == initial.size:
        diff = [
            (r, c)
            for r in range(initial.size)
            for c in range(initial.size)
            if initial.get_tile(r, c) != twin.get_tile(r, c)
        ]
        if len(diff) == 2 and twin.blank_pos == initial.blank_pos:
            return
    raise InvalidBoardError("twin must differ from the board by one tile swap.")


class _Side:
    """One of the two independent searches."""

    def __init__(self, name: str, root: Board, closed_set: bool) -> None:
        self.name = name
        self.queue = SearchQueue()
        self.queue.push(SearchNode(root))
        self.closed: set[Board] | None = set() if closed_set else None
        self.expanded = 0


class Solver:
    """Runs the whole search in the constructor; query the outcome after.

    *twin* pins the witness board instead of drawing one from *rng*; it
    must be *initial* with exactly one pair of non-blank tiles exchanged.
    """

    def __init__(
        self,
        initial: Board,
        config: SolverConfig | None = None,
        rng: random.Random | None = None,
        twin: Board | None = None,
    ) -> None:
        self.initial = initial
        self.config = config or SolverConfig()
        self._final: SearchNode | None = None
        self._inserted = 0
        self.expanded = 0

        if twin is not None:
            _check_twin(initial, twin)
        logger.debug("Solving %d×%d board:\n%s", initial.size, initial.size, initial)
        if initial.is_goal():
            # The first original turn would extract the goal root anyway.
            self._final = SearchNode(initial)
            self._inserted = 1
        else:
            if twin is None:
                twin = initial.twin(rng)
            self._search(initial, twin)

        logger.debug(
            "%s after %d expansions (%d nodes queued)",
            f"Solved in {self.moves()} moves" if self.is_solvable() else "Unsolvable",
            self.expanded,
            self._inserted,
        )

    # -- search ---------------------------------------------------------------

    def _search(self, initial: Board, twin: Board) -> None:
        original = _Side("original", initial, self.config.closed_set)
        witness = _Side("twin", twin, self.config.closed_set)
        self._inserted = 2
        sides = [original, witness]
        turn = 0

        try:
            while True:
                side = sides[turn]
                if not side.queue:
                    # Only reachable with a closed set: the side's whole
                    # state space has been expanded without a goal.
                    logger.debug("%s queue drained", side.name)
                    if side is original:
                        return
                    sides = [original]
                    turn = 0
                    continue

                node = side.queue.pop_min()
                if node.board.is_goal():
                    logger.debug("Goal reached on the %s side", side.name)
                    if side is original:
                        self._final = node
                    return

                if side.closed is not None:
                    if node.board in side.closed:
                        turn = (turn + 1) % len(sides)
                        continue
                    side.closed.add(node.board)

                self._expand(side, node)
                turn = (turn + 1) % len(sides)
        finally:
            self.expanded = original.expanded + witness.expanded

    def _expand(self, side: _Side, node: SearchNode) -> None:
        side.expanded += 1
        previous = node.parent.board if node.parent is not None else None
        for neighbor in node.board.neighbors():
            if neighbor == previous:
                continue
            if side.closed is not None and neighbor in side.closed:
                continue
            side.queue.push(node.child(neighbor))
            self._inserted += 1
        limit = self.config.max_nodes
        if limit is not None and self._inserted > limit:
            raise SearchLimitExceeded(limit, self._inserted)

    # -- queries --------------------------------------------------------------

    def is_solvable(self) -> bool:
        return self._final is not None

    def moves(self) -> int:
        """Minimum number of slides to the goal, ``-1`` if unsolvable."""
        if self._final is None:
            return -1
        return self._final.moves

    def solution(self) -> list[Board] | None:
        """Boards from the initial board to the goal, or ``None`` if unsolvable."""
        if self._final is None:
            return None
        return self._final.path()

    @property
    def nodes_inserted(self) -> int:
        return self._inserted
