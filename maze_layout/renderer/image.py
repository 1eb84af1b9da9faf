"""Solid-tile image renderer.

Each cell becomes a ``cell_size`` square colored by its :class:`CellKind`.
The tile canvas is assembled as a NumPy array and handed to Pillow; the exit
cell (if any) gets an outlined marker on top.
"""

from typing import Dict, Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from maze_layout.grid import Grid
from maze_layout.types import CellKind

DEFAULT_RESOLUTION = 640

RGBA = Tuple[int, int, int, int]
Palette = Dict[CellKind, RGBA]

DEFAULT_PALETTE: Palette = {
    CellKind.EMPTY: (200, 200, 200, 255),
    CellKind.INNER_WALL: (139, 90, 43, 255),
    CellKind.OUTER_WALL: (70, 45, 25, 255),
}

EXIT_MARKER_COLOR: RGBA = (40, 160, 60, 255)


def render(
    grid: Grid,
    resolution: int = DEFAULT_RESOLUTION,
    palette: Optional[Palette] = None,
    mark_exit: bool = True,
) -> Image.Image:
    """
    Renders the grid as a PIL Image, ``resolution`` pixels across the widest side.
    """
    if palette is None:
        palette = DEFAULT_PALETTE
    cell_size: int = max(1, resolution // max(grid.row_count, grid.col_count))

    lut: npt.NDArray[np.uint8] = np.zeros((len(CellKind), 4), dtype=np.uint8)
    for kind in CellKind:
        if kind not in palette:
            raise ValueError(f"Palette has no color for {kind.name}")
        lut[kind] = palette[kind]

    tiles = lut[grid.to_array()]
    pixels = np.repeat(np.repeat(tiles, cell_size, axis=0), cell_size, axis=1)
    img = Image.fromarray(pixels)

    if mark_exit and grid.exit is not None:
        r, c = grid.exit
        x0, y0 = c * cell_size, r * cell_size
        draw = ImageDraw.Draw(img)
        if cell_size < 3:
            # Too small for an outline; paint the whole tile
            draw.rectangle(
                [x0, y0, x0 + cell_size - 1, y0 + cell_size - 1],
                fill=EXIT_MARKER_COLOR,
            )
        else:
            inset = max(1, cell_size // 4)
            draw.rectangle(
                [x0 + inset, y0 + inset, x0 + cell_size - inset - 1, y0 + cell_size - inset - 1],
                outline=EXIT_MARKER_COLOR,
                width=max(1, cell_size // 10),
            )
    return img


class ImageRenderer:
    resolution: int
    palette: Optional[Palette]
    mark_exit: bool

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        palette: Optional[Palette] = None,
        mark_exit: bool = True,
    ):
        self.resolution = resolution
        self.palette = palette
        self.mark_exit = mark_exit

    def render(self, grid: Grid) -> Image.Image:
        return render(
            grid,
            resolution=self.resolution,
            palette=self.palette,
            mark_exit=self.mark_exit,
        )
