"""Common type aliases and enumerations.

``CellKind`` values are the occupancy codes stored in a :class:`Grid`; the
integer values are stable and match what placement collaborators expect
(``0`` empty, ``1`` inner wall, ``2`` outer wall).
"""

from enum import IntEnum, StrEnum
from typing import Tuple

# (row, col) grid index; (0, 0) is a corner
Coord = Tuple[int, int]

# Centered (x, y) offset in scene units
SceneOffset = Tuple[float, float]


class CellKind(IntEnum):
    """Occupancy of a single grid cell."""

    EMPTY = 0
    INNER_WALL = 1
    OUTER_WALL = 2

    @property
    def is_wall(self) -> bool:
        return self is not CellKind.EMPTY


class ExitPlacement(StrEnum):
    """Where along the chosen edge the exit is carved."""

    FIXED_MIDPOINT = "fixed-midpoint"
    RANDOM_ALONG_EDGE = "random-along-edge"
