"""
Game field (board) for the N-in-a-row game.
Stores the grid, converts between coordinates and flat indexes,
and enforces the placement rules.
"""

from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Union

import numpy as np

from .errors import CellOccupied, OutOfBounds
from .player import Player


class Empty:
    """An unowned cell. Use the EMPTY instance."""

    is_empty = True

    def draw(self) -> str:
        return " "

    def __repr__(self):
        return "EMPTY"


EMPTY = Empty()


@dataclass(frozen=True)
class Owned:
    """A cell marked by a player."""
    player: Player

    is_empty = False

    def draw(self) -> str:
        return self.player.sign


Cell = Union[Empty, Owned]


def coordinate_to_index(x: int, y: int, row_size: int) -> int:
    """Convert an (x, y) coordinate to a flat row-major index."""
    return y * row_size + x


def index_to_coordinate(index: int, row_size: int) -> "Coordinate":
    """Convert a flat row-major index to an (x, y) coordinate."""
    y, x = divmod(index, row_size)
    return Coordinate(x, y)


class Coordinate(NamedTuple):
    """Zero-based grid position. x is the column, y is the row."""
    x: int
    y: int

    def to_index(self, row_size: int) -> int:
        return coordinate_to_index(self.x, self.y, row_size)

    @classmethod
    def from_index(cls, index: int, row_size: int) -> "Coordinate":
        return index_to_coordinate(index, row_size)


class GameField:
    """
    The rectangular grid of cells.

    Cells are kept in a flat numpy array in row-major order, so the cell
    at (x, y) lives at index y * row_size + x. The shape never changes
    after construction; only cell contents do.
    """

    def __init__(self, row_size: int = 3, column_size: int = 3, win_count: int = 3):
        """
        Create an empty field.

        Args:
            row_size: Number of cells in a row (the X extent).
            column_size: Number of cells in a column (the Y extent).
            win_count: Length of the run needed to win.
        """
        if row_size <= 0 or column_size <= 0 or win_count <= 0:
            raise ValueError(
                f"Field dimensions must be positive, got "
                f"row_size={row_size}, column_size={column_size}, win_count={win_count}"
            )
        if win_count > max(row_size, column_size):
            raise ValueError(
                f"win_count {win_count} cannot exceed the larger field "
                f"dimension {max(row_size, column_size)}"
            )

        self.row_size = row_size
        self.column_size = column_size
        self.win_count = win_count

        self.fields = np.empty(row_size * column_size, dtype=object)
        self.fields.fill(EMPTY)

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.row_size * self.column_size

    def in_bounds(self, coordinate: Coordinate) -> bool:
        x, y = coordinate
        return 0 <= x < self.row_size and 0 <= y < self.column_size

    def _check_bounds(self, coordinate: Coordinate):
        x, y = coordinate
        if not 0 <= x < self.row_size:
            raise OutOfBounds("X", x, self.row_size - 1)
        if not 0 <= y < self.column_size:
            raise OutOfBounds("Y", y, self.column_size - 1)

    def get(self, coordinate: Coordinate) -> Cell:
        """
        Get the cell at a coordinate.

        Raises:
            OutOfBounds: If x or y lies outside the grid.
        """
        self._check_bounds(coordinate)
        return self.fields[coordinate_to_index(coordinate[0], coordinate[1], self.row_size)]

    def mark(self, player: Player, coordinate: Coordinate):
        """
        Mark a cell for a player.

        Args:
            player: The player claiming the cell.
            coordinate: Where to mark.

        Raises:
            OutOfBounds: If the coordinate lies outside the grid.
            CellOccupied: If the cell already has an owner.
        """
        cell = self.get(coordinate)
        if not cell.is_empty:
            raise CellOccupied()

        self.fields[coordinate_to_index(coordinate[0], coordinate[1], self.row_size)] = Owned(player)

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        return iter(self.fields)

    def rows(self) -> List[List[Cell]]:
        """The grid as column_size rows of row_size cells each."""
        return self.fields.reshape(self.column_size, self.row_size).tolist()

    def __repr__(self):
        return (
            f"GameField(row_size={self.row_size}, column_size={self.column_size}, "
            f"win_count={self.win_count})"
        )
