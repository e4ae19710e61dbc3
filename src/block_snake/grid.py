"""Grid representation for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

Coordinate = tuple[int, int]


class CellType(enum.IntEnum):
    """Integer codes stored in a board snapshot."""

    EMPTY = 0
    FILL = 1
    FOOD = 2


class Grid:
    """Immutable board dimensions and the bounds predicate.

    Coordinates use (row, col) ordering consistent with NumPy indexing.
    """

    __slots__ = ("_rows", "_cols")

    def __init__(self, rows: int = 6, cols: int = 6) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("Grid dimensions must be at least 1×1.")
        self._rows = rows
        self._cols = cols

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._rows * self._cols

    def in_bounds(self, coord: Coordinate) -> bool:
        """Check whether a coordinate lies within the grid."""
        row, col = coord
        return 0 <= row < self._rows and 0 <= col < self._cols

    def center(self) -> Coordinate:
        return self._rows // 2, self._cols // 2

    def board(
        self,
        filled: Iterable[Coordinate],
        food: Coordinate | None = None,
    ) -> np.ndarray:
        """Return a ``(rows, cols)`` array of :class:`CellType` codes."""
        cells = np.zeros((self._rows, self._cols), dtype=np.int8)
        for row, col in filled:
            cells[row, col] = CellType.FILL
        if food is not None:
            cells[food] = CellType.FOOD
        return cells

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self._rows, self._cols) == (other._rows, other._cols)

    def __hash__(self) -> int:
        return hash((self._rows, self._cols))

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols})"

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"rows": self._rows, "cols": self._cols}
