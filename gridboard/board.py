from __future__ import annotations

from typing import Iterator, List, Tuple

from .cells import EMPTY, Cell, Occupied, occupy, stringify
from .errors import BoardFull, CellOccupied, OutOfBounds
from .lines import diagonals_through

Coord = Tuple[int, int]
Mark = object  # anything with a sensible str(); usually 'X' / 'O'


def _check_dimension(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f'{name} must be an int, got {value!r}')
    if value <= 0:
        raise ValueError(f'{name} must be positive, got {value}')
    return value


class Board:
    """A fixed-size grid of write-once cells, addressed as (row, col).

    Cells start empty and read as ' '. Each cell can be marked exactly once;
    the board keeps a running count of empty cells so fullness is O(1).
    """

    def __init__(self, height: int = 3, width: int = 3) -> None:
        self._height = _check_dimension('height', height)
        self._width = _check_dimension('width', width)
        self._empty_count = height * width
        self._cells: List[List[Cell]] = [[EMPTY for _ in range(width)] for _ in range(height)]

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def empty_count(self) -> int:
        """Number of cells nobody has marked yet."""
        return self._empty_count

    def in_bounds(self, r: int, c: int) -> bool:
        """True if (r, c) addresses a cell; negative indexes and bools never do."""
        if isinstance(r, bool) or isinstance(c, bool):
            return False
        return 0 <= r < self._height and 0 <= c < self._width

    def _require_in_bounds(self, r: int, c: int) -> None:
        if not self.in_bounds(r, c):
            raise OutOfBounds(r, c, self._height, self._width)

    def coords(self) -> Iterator[Coord]:
        """Iterates over all coordinates on the board in row-major order."""
        for r in range(self._height):
            for c in range(self._width):
                yield (r, c)

    def get(self, r: int, c: int) -> str:
        """Returns the token at (r, c), or ' ' if the cell is empty."""
        self._require_in_bounds(r, c)
        return stringify(self._cells[r][c])

    def is_empty(self, r: int, c: int) -> bool:
        self._require_in_bounds(r, c)
        return not isinstance(self._cells[r][c], Occupied)

    def set(self, r: int, c: int, mark: Mark) -> None:
        """Marks the empty cell at (r, c).

        Raises BoardFull, OutOfBounds or CellOccupied, checked in that order,
        before anything is changed.
        """
        if self.is_full():
            raise BoardFull()
        self._require_in_bounds(r, c)
        current = self._cells[r][c]
        if isinstance(current, Occupied):
            raise CellOccupied(r, c, current.token)
        self._cells[r][c] = occupy(mark)
        self._empty_count -= 1

    def __getitem__(self, coord: Coord) -> str:
        r, c = coord
        return self.get(r, c)

    def __setitem__(self, coord: Coord, mark: Mark) -> None:
        r, c = coord
        self.set(r, c, mark)

    def is_full(self) -> bool:
        return self._empty_count == 0

    def each_row(self) -> Iterator[List[str]]:
        """Lazily yields each row as a list of tokens, top to bottom."""
        for row in self._cells:
            yield [stringify(cell) for cell in row]

    def each_column(self) -> Iterator[List[str]]:
        """Lazily yields each column as a list of tokens, left to right."""
        for c in range(self._width):
            yield [stringify(row[c]) for row in self._cells]

    def show(self) -> List[List[str]]:
        """Snapshot of the whole grid as rows of tokens."""
        return list(self.each_row())

    def diagonals_at(self, r: int, c: int) -> Tuple[List[str], List[str]]:
        """Returns the ("\\", "/") diagonals through (r, c), each including (r, c)."""
        self._require_in_bounds(r, c)
        return diagonals_through(self, r, c)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self._height, self._width, self._cells) == (other._height, other._width, other._cells)

    def __repr__(self) -> str:
        return f'Board(height={self._height}, width={self._width}, empty={self._empty_count})'
