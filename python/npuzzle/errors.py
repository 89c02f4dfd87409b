"""Exception hierarchy shared by the board model, engine, and CLI."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by the puzzle package."""


class InvalidBoardError(PuzzleError, ValueError):
    """The grid is not square or does not hold exactly 0..n²-1."""


class TwinUnavailableError(PuzzleError):
    """No pair of distinct non-blank tiles exists to swap."""


class SearchLimitExceeded(PuzzleError):
    """The solver inserted more nodes than the configured ceiling."""

    def __init__(self, limit: int, inserted: int) -> None:
        super().__init__(
            f"Search aborted after {inserted} nodes (limit {limit})."
        )
        self.limit = limit
        self.inserted = inserted


class PuzzleFormatError(PuzzleError, ValueError):
    """A puzzle file could not be parsed into a grid."""
