from __future__ import annotations

from dataclasses import dataclass
from typing import Union

BLANK = ' '


@dataclass(frozen=True)
class Empty:
    """A cell nobody has marked yet."""


@dataclass(frozen=True)
class Occupied:
    """A cell holding a mark, stored as its string token."""
    token: str


Cell = Union[Empty, Occupied]

EMPTY: Empty = Empty()


def occupy(mark: object) -> Occupied:
    """Converts any mark into the board's token representation."""
    return Occupied(str(mark))


def stringify(cell: Cell) -> str:
    return cell.token if isinstance(cell, Occupied) else BLANK
