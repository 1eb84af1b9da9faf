"""Maze layout generator.

Builds an occupancy :class:`~maze_layout.grid.Grid` in five passes over a
fresh buffer; each pass may overwrite the previous ones:

1. allocate ``EMPTY`` cells,
2. border pass (``OUTER_WALL`` on the outer ring),
3. inner-pillar pass (``INNER_WALL`` pairs at even interior cells),
4. clear-start pass (3x3 ``EMPTY`` block at the grid center),
5. exit pass (one border cell at a cardinal edge forced ``EMPTY``).

All randomness comes from an injected ``random.Random``; given the same seed
the same grid is produced. The generator never clamps: dimensions below
``MIN_SIZE`` raise :class:`~maze_layout.config.InvalidDimensions` before any
grid is allocated.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from maze_layout.config import (
    DEFAULT_CONFIG,
    GeneratorConfig,
    check_dimensions,
)
from maze_layout.grid import Grid, GridBuilder
from maze_layout.types import CellKind, Coord, ExitPlacement

logger = logging.getLogger(__name__)


def _coin(rng: random.Random) -> bool:
    return rng.random() < 0.5


def pick_neighbor_offset(rng: random.Random) -> Coord:
    """Pick one orthogonal (d_row, d_col) offset with probability 1/4 each.

    The first flip picks the axis (row offset vs col offset), the second the
    sign.
    """
    on_row_axis = _coin(rng)
    sign = -1 if _coin(rng) else 1
    if on_row_axis:
        return (sign, 0)
    return (0, sign)


def pick_exit(
    row_count: int,
    col_count: int,
    placement: ExitPlacement,
    rng: random.Random,
) -> Coord:
    """Choose the exit cell on one of the four edges.

    A first flip picks row-extremes (top/bottom edge) vs column-extremes
    (left/right edge), a second flip picks the side. The position along the
    edge is either the midpoint or uniform over the non-corner cells.
    """
    max_r, max_c = row_count - 1, col_count - 1
    on_row_extremes = _coin(rng)
    first_side = _coin(rng)
    if on_row_extremes:
        row = 0 if first_side else max_r
        col = _along_edge(col_count, placement, rng)
        return (row, col)
    row = _along_edge(row_count, placement, rng)
    col = 0 if first_side else max_c
    return (row, col)


def _along_edge(count: int, placement: ExitPlacement, rng: random.Random) -> int:
    if placement is ExitPlacement.RANDOM_ALONG_EDGE:
        return rng.randint(1, count - 2)
    return (count - 1) // 2


# -------------------------
# Passes
# -------------------------


def _border_pass(builder: GridBuilder) -> None:
    max_r, max_c = builder.row_count - 1, builder.col_count - 1
    for r in range(builder.row_count):
        for c in range(builder.col_count):
            if r in (0, max_r) or c in (0, max_c):
                builder.set(r, c, CellKind.OUTER_WALL)


def _inner_pillar_pass(
    builder: GridBuilder, density: float, rng: random.Random
) -> int:
    """Place pillar pairs; returns how many pairs were placed."""
    placed = 0
    for r in range(2, builder.row_count - 1, 2):
        for c in range(2, builder.col_count - 1, 2):
            # Full density skips the gate draw
            if density < 1.0 and not rng.random() < density:
                continue
            builder.set(r, c, CellKind.INNER_WALL)
            dr, dc = pick_neighbor_offset(rng)
            nr, nc = r + dr, c + dc
            # Border cells keep OUTER_WALL
            if builder.get(nr, nc) is not CellKind.OUTER_WALL:
                builder.set(nr, nc, CellKind.INNER_WALL)
            placed += 1
    return placed


def start_block(row_count: int, col_count: int) -> List[Coord]:
    """The 3x3 cells centered at ``(row_count // 2, col_count // 2)``."""
    center_r, center_c = row_count // 2, col_count // 2
    return [
        (center_r + dr, center_c + dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1)
    ]


# -------------------------
# Main generator
# -------------------------


def generate(
    row_count: int,
    col_count: int,
    config: GeneratorConfig = DEFAULT_CONFIG,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> Grid:
    """Generate a maze layout.

    Arguments:
        row_count: Number of rows, at least ``MIN_SIZE``.
        col_count: Number of columns, at least ``MIN_SIZE``.
        config: Inner wall density and exit placement.
        rng: Random source. Takes precedence over ``seed``.
        seed: Seed for a fresh ``random.Random`` when ``rng`` is not given.

    Raises:
        InvalidDimensions: If either count is non-positive or below ``MIN_SIZE``.
    """
    check_dimensions(row_count, col_count)
    if rng is None:
        rng = random.Random(seed)

    builder = GridBuilder(row_count, col_count)
    _border_pass(builder)
    pairs = _inner_pillar_pass(builder, config.inner_wall_density, rng)

    start: Coord = (row_count // 2, col_count // 2)
    builder.set_many(start_block(row_count, col_count), CellKind.EMPTY)

    exit_cell = pick_exit(row_count, col_count, config.exit_placement, rng)
    builder.set(*exit_cell, CellKind.EMPTY)

    logger.debug(
        "Generated %dx%d maze: %d inner wall pairs, start=%s, exit=%s",
        row_count,
        col_count,
        pairs,
        start,
        exit_cell,
    )
    return builder.freeze(start=start, exit=exit_cell)


class MazeGenerator:
    """Generator bound to a config and an injected random source."""

    config: GeneratorConfig
    rng: random.Random

    def __init__(
        self,
        config: GeneratorConfig = DEFAULT_CONFIG,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        self.config = config
        self.rng = rng if rng is not None else random.Random(seed)

    def generate(self, row_count: int, col_count: int) -> Grid:
        return generate(row_count, col_count, config=self.config, rng=self.rng)
