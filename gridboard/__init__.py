"""
gridboard: a bounded, write-once 2D board for grid games such as tic-tac-toe.

Modules:
- board.py: Board, Coord, Mark
- cells.py: Empty / Occupied cell variant
- errors.py: BoardError, OutOfBounds, CellOccupied, BoardFull
- lines.py: diagonal traversal through a point
- render.py: pretty text rendering
- codec.py: JSON snapshot helpers
- cli.py: command-line driver
"""
from .board import Board, Coord, Mark
from .errors import BoardError, BoardFull, CellOccupied, OutOfBounds

__all__ = [
    'Board',
    'Coord',
    'Mark',
    'BoardError',
    'BoardFull',
    'CellOccupied',
    'OutOfBounds',
]
