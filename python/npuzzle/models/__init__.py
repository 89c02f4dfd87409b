from npuzzle.models.board import Board, Direction
from npuzzle.models.search_node import SearchNode

__all__ = ["Board", "Direction", "SearchNode"]
