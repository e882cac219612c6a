from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from .board import Board

# (drow, dcol) pairs: the first arm is walked then reversed, the second is appended.
LEFT_DIAGONAL = ((-1, -1), (1, 1))    # "\"
RIGHT_DIAGONAL = ((-1, 1), (1, -1))   # "/"


def diagonal_arm(board: Board, r: int, c: int, dr: int, dc: int) -> List[str]:
    """Collects tokens stepping from (r, c) by (dr, dc), excluding the start.

    Stops at the first step that would leave the board; never raises.
    """
    arm: List[str] = []
    r, c = r + dr, c + dc
    while board.in_bounds(r, c):
        arm.append(board.get(r, c))
        r, c = r + dr, c + dc
    return arm


def diagonal_through(board: Board, r: int, c: int, direction: Tuple[Tuple[int, int], Tuple[int, int]]) -> List[str]:
    """Builds one full diagonal: reversed leading arm, centre, trailing arm."""
    (lead_dr, lead_dc), (trail_dr, trail_dc) = direction
    leading = diagonal_arm(board, r, c, lead_dr, lead_dc)
    leading.reverse()
    return leading + [board.get(r, c)] + diagonal_arm(board, r, c, trail_dr, trail_dc)


def diagonals_through(board: Board, r: int, c: int) -> Tuple[List[str], List[str]]:
    """Returns the (left, right) diagonals passing through (r, c).

    The caller is responsible for checking that (r, c) is on the board.
    """
    return (
        diagonal_through(board, r, c, LEFT_DIAGONAL),
        diagonal_through(board, r, c, RIGHT_DIAGONAL),
    )
