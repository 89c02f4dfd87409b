"""Reads puzzle boards from text or JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from npuzzle.errors import InvalidBoardError, PuzzleFormatError
from npuzzle.models.board import Board


def parse_board(text: str) -> Board:
    """Parse ``n`` followed by n² whitespace-separated integers.

    Example::

        3
         0  1  3
         4  2  5
         7  8  6
    """
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise PuzzleFormatError(f"Non-integer token in puzzle: {exc}") from exc
    if not numbers:
        raise PuzzleFormatError("Puzzle input is empty.")

    size, flat = numbers[0], numbers[1:]
    if size < 1:
        raise PuzzleFormatError(f"Board size must be positive, got {size}.")
    if len(flat) != size * size:
        raise PuzzleFormatError(
            f"Expected {size * size} tiles after the size {size}, got {len(flat)}."
        )
    return Board.from_flat(size, flat)


def _board_from_json(data: object) -> Board:
    if not isinstance(data, dict) or "tiles" not in data:
        raise PuzzleFormatError('JSON puzzle must be an object with a "tiles" key.')
    tiles = data["tiles"]
    if not isinstance(tiles, list) or not all(isinstance(row, list) for row in tiles):
        raise PuzzleFormatError('"tiles" must be a list of rows.')
    board = Board.from_grid(tiles)
    if "size" in data and data["size"] != board.size:
        raise InvalidBoardError(
            f'"size" is {data["size"]} but "tiles" is {board.size}×{board.size}.'
        )
    return board


def load_board(path: Path) -> Board:
    """Load a board from *path*.

    ``.json`` files hold ``{"size": n, "tiles": [[...], ...]}``; anything
    else is read with :func:`parse_board`.
    """
    try:
        text = path.read_text()
    except OSError as exc:
        raise PuzzleFormatError(f"Cannot read {path}: {exc.strerror}") from exc

    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PuzzleFormatError(f"{path} is not valid JSON: {exc.msg}") from exc
        return _board_from_json(data)
    return parse_board(text)
