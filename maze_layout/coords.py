"""Grid index <-> scene offset conversion.

Grid index ``(0, 0)`` is a corner; scene offsets are centered on the grid, so
the middle of an odd-sized grid maps to ``(0.0, 0.0)`` and even-sized grids
produce half-integer offsets.
"""

from maze_layout.types import Coord, SceneOffset


def grid_index_to_scene_offset(
    row_count: int, col_count: int, row: int, col: int
) -> SceneOffset:
    """Map ``(row, col)`` to a centered ``(x, y)`` offset."""
    x = col - (col_count - 1) / 2
    y = row - (row_count - 1) / 2
    return (x, y)


def scene_offset_to_grid_index(
    row_count: int, col_count: int, x: float, y: float
) -> Coord:
    """Inverse of :func:`grid_index_to_scene_offset`.

    Rounds to the nearest cell; raises ``IndexError`` when the offset falls
    outside the grid.
    """
    row = round(y + (row_count - 1) / 2)
    col = round(x + (col_count - 1) / 2)
    if not (0 <= row < row_count and 0 <= col < col_count):
        raise IndexError(
            f"Offset {(x, y)} is outside grid {row_count}x{col_count}"
        )
    return (row, col)
