"""A board's position within one A* search tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from npuzzle.models.board import Board


@dataclass(frozen=True, eq=False)
class SearchNode:
    """Board paired with its path cost and parent link.

    Heuristics are computed once at creation since every priority
    comparison reads them.
    """

    board: Board
    parent: SearchNode | None = None
    moves: int = 0
    manhattan: int = field(init=False)
    hamming: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "manhattan", self.board.manhattan())
        object.__setattr__(self, "hamming", self.board.hamming())

    @property
    def priority(self) -> tuple[int, int]:
        """(moves + manhattan, moves + hamming); lower sorts first."""
        return (self.moves + self.manhattan, self.moves + self.hamming)

    def child(self, board: Board) -> SearchNode:
        return SearchNode(board=board, parent=self, moves=self.moves + 1)

    def path(self) -> list[Board]:
        """Boards from the search root to this node, inclusive."""
        boards: list[Board] = []
        node: SearchNode | None = self
        while node is not None:
            boards.append(node.board)
            node = node.parent
        boards.reverse()
        return boards
