from __future__ import annotations

from typing import List

from .board import Board


def pretty(board: Board, sep: str = ' | ') -> str:
    """Generates a human-readable string representation of the board."""
    lines: List[str] = []
    for row in board.each_row():
        line = sep.join(row)
        if lines:
            lines.append('-' * len(line))
        lines.append(line)
    return '\n'.join(lines)
