"""Wall placement for scene collaborators.

Rendering is a direct 1:1 mapping from grid cell to object: every non-empty
cell becomes one :class:`WallPlacement` positioned by
:func:`~maze_layout.coords.grid_index_to_scene_offset`. Rows further from the
last row get a more negative ``depth`` so later rows draw on top.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, TypeVar

from pyrsistent import PMap, pmap

from maze_layout.coords import grid_index_to_scene_offset
from maze_layout.grid import Grid
from maze_layout.types import CellKind, Coord

DEPTH_STEP = -0.1

T = TypeVar("T")


@dataclass(frozen=True)
class WallPlacement:
    """Where and what to instantiate for one wall cell.

    Attributes:
        row: Grid row.
        col: Grid column.
        kind: ``INNER_WALL`` or ``OUTER_WALL``.
        x: Centered horizontal offset.
        y: Centered vertical offset.
        depth: Layering value, ``(row_count - row) * DEPTH_STEP``.
    """

    row: int
    col: int
    kind: CellKind
    x: float
    y: float
    depth: float


def wall_placements(grid: Grid) -> Iterator[WallPlacement]:
    """Yield a placement for every wall cell, in row-major order."""
    for r in range(grid.row_count):
        for c in range(grid.col_count):
            kind = grid.cell_at(r, c)
            if kind is CellKind.EMPTY:
                continue
            x, y = grid_index_to_scene_offset(grid.row_count, grid.col_count, r, c)
            yield WallPlacement(
                row=r,
                col=c,
                kind=kind,
                x=x,
                y=y,
                depth=(grid.row_count - r) * DEPTH_STEP,
            )


def place_walls(grid: Grid, place_fn: Callable[[WallPlacement], T]) -> PMap[Coord, T]:
    """Call ``place_fn`` for each wall and collect what it returns by cell."""
    placed = {}
    for placement in wall_placements(grid):
        placed[(placement.row, placement.col)] = place_fn(placement)
    return pmap(placed)
