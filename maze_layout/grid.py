"""Immutable occupancy grid.

A :class:`Grid` is produced once per generation request and never mutated
afterwards. Cells are stored flat in row-major order inside a persistent
vector; ``cell_at(row, col)`` reads index ``row * col_count + col``.

The generator fills a :class:`GridBuilder` (a plain mutable buffer owned by a
single generation call) and freezes it into a ``Grid`` when all passes are
done.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt
from pyrsistent import PVector, pvector

from maze_layout.types import CellKind, Coord


@dataclass(frozen=True)
class Grid:
    """Occupancy grid of ``row_count`` x ``col_count`` cells.

    Attributes:
        row_count: Number of rows.
        col_count: Number of columns.
        cells: Row-major ``CellKind`` values, ``row_count * col_count`` long.
        start: Center of the cleared 3x3 start block.
        exit: The carved exit cell, or ``None`` for hand-built grids.
    """

    row_count: int
    col_count: int
    cells: PVector[CellKind] = field(repr=False)
    start: Coord = (0, 0)
    exit: Optional[Coord] = None

    def __post_init__(self) -> None:
        if len(self.cells) != self.row_count * self.col_count:
            raise ValueError(
                f"Grid {self.row_count}x{self.col_count} needs "
                f"{self.row_count * self.col_count} cells, got {len(self.cells)}"
            )

    # -------- Cell access --------

    def cell_at(self, row: int, col: int) -> CellKind:
        self._check_bounds(row, col)
        return self.cells[row * self.col_count + col]

    def rows(self) -> Tuple[Tuple[CellKind, ...], ...]:
        return tuple(
            tuple(self.cells[r * self.col_count : (r + 1) * self.col_count])
            for r in range(self.row_count)
        )

    def positions_of(self, kind: CellKind) -> List[Coord]:
        """All (row, col) holding ``kind``, in row-major order."""
        return [
            divmod(i, self.col_count) for i, cell in enumerate(self.cells) if cell == kind
        ]

    def count(self, kind: CellKind) -> int:
        return sum(1 for cell in self.cells if cell == kind)

    def is_border(self, row: int, col: int) -> bool:
        return row in (0, self.row_count - 1) or col in (0, self.col_count - 1)

    def in_start_block(self, row: int, col: int) -> bool:
        return abs(row - self.start[0]) <= 1 and abs(col - self.start[1]) <= 1

    def to_array(self) -> npt.NDArray[np.uint8]:
        """Return the grid as a ``(row_count, col_count)`` uint8 array."""
        return np.array([int(c) for c in self.cells], dtype=np.uint8).reshape(
            self.row_count, self.col_count
        )

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[int]],
        start: Optional[Coord] = None,
        exit: Optional[Coord] = None,
    ) -> "Grid":
        """Build a grid from nested rows of ints or ``CellKind`` values."""
        row_count = len(rows)
        col_count = len(rows[0]) if rows else 0
        for r, row in enumerate(rows):
            if len(row) != col_count:
                raise ValueError(
                    f"Row {r} has {len(row)} cells, expected {col_count}"
                )
        cells = pvector(CellKind(value) for row in rows for value in row)
        if start is None:
            start = (row_count // 2, col_count // 2)
        return cls(row_count, col_count, cells, start=start, exit=exit)

    # -------- Internal helpers --------

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.row_count and 0 <= col < self.col_count):
            raise IndexError(
                f"Out of bounds: {(row, col)} for grid {self.row_count}x{self.col_count}"
            )


class GridBuilder:
    """Mutable row-major buffer used while a grid is being generated."""

    row_count: int
    col_count: int

    def __init__(self, row_count: int, col_count: int):
        self.row_count = row_count
        self.col_count = col_count
        self._cells: List[CellKind] = [CellKind.EMPTY] * (row_count * col_count)

    def get(self, row: int, col: int) -> CellKind:
        return self._cells[self._index(row, col)]

    def set(self, row: int, col: int, kind: CellKind) -> None:
        self._cells[self._index(row, col)] = kind

    def set_many(self, coords: Iterable[Coord], kind: CellKind) -> None:
        for row, col in coords:
            self.set(row, col, kind)

    def freeze(self, start: Coord, exit: Optional[Coord] = None) -> Grid:
        return Grid(
            self.row_count, self.col_count, pvector(self._cells), start=start, exit=exit
        )

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.row_count and 0 <= col < self.col_count):
            raise IndexError(
                f"Out of bounds: {(row, col)} for grid {self.row_count}x{self.col_count}"
            )
        return row * self.col_count + col
