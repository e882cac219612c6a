from __future__ import annotations

from typing import Optional


class BoardError(Exception):
    """Base class for every error raised by a Board."""


class OutOfBounds(BoardError, IndexError):
    """Raised when a coordinate falls outside [0, height) x [0, width)."""

    def __init__(self, row: int, col: int, height: int, width: int) -> None:
        super().__init__(f"Out of bounds space: ({row}, {col}) on a {height}x{width} board")
        self.row = row
        self.col = col
        self.height = height
        self.width = width


class CellOccupied(BoardError, ValueError):
    """Raised when writing to a cell that already holds a mark."""

    def __init__(self, row: int, col: int, token: Optional[str] = None) -> None:
        super().__init__(f"Can't occupy an occupied space: ({row}, {col}) holds {token!r}")
        self.row = row
        self.col = col
        self.token = token


class BoardFull(BoardError, ValueError):
    """Raised when writing to a board with no empty cells left."""

    def __init__(self) -> None:
        super().__init__("Board is full")
