from __future__ import annotations

from typing import Any, Dict, List, Optional

from .board import Board


def board_to_json(board: Board) -> Dict[str, Any]:
    """Plain-dict snapshot of a board; empty cells become None so a ' ' mark survives."""
    grid: List[List[Optional[str]]] = [
        [None if board.is_empty(r, c) else board.get(r, c) for c in range(board.width)]
        for r in range(board.height)
    ]
    return {"height": int(board.height), "width": int(board.width), "grid": grid}


def board_from_json(obj: Dict[str, Any]) -> Board:
    """Rebuilds a board by replaying every non-null cell through Board.set."""
    if not isinstance(obj, dict):
        raise ValueError(f"Invalid board JSON: expected an object, got {type(obj).__name__}")
    try:
        height = obj["height"]
        width = obj["width"]
        grid = obj["grid"]
    except KeyError as e:
        raise ValueError(f"Invalid board JSON: missing {e}") from e
    board = Board(height, width)
    if not isinstance(grid, list) or len(grid) != height:
        raise ValueError(f"Invalid board JSON: expected {height} rows")
    for r, row in enumerate(grid):
        if not isinstance(row, list) or len(row) != width:
            raise ValueError(f"Invalid board JSON: row {r} must have {width} cells")
        for c, token in enumerate(row):
            if token is not None:
                board.set(r, c, str(token))
    return board
