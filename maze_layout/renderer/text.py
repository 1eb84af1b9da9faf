"""Plain-text grid view.

``#`` outer wall, ``+`` inner wall, ``.`` empty. Row 0 is the first line.
"""

from typing import Dict, List

from maze_layout.grid import Grid
from maze_layout.types import CellKind

GLYPHS: Dict[CellKind, str] = {
    CellKind.EMPTY: ".",
    CellKind.INNER_WALL: "+",
    CellKind.OUTER_WALL: "#",
}

GLYPH_TO_KIND: Dict[str, CellKind] = {glyph: kind for kind, glyph in GLYPHS.items()}


def render_text(grid: Grid) -> str:
    return "\n".join("".join(GLYPHS[cell] for cell in row) for row in grid.rows())


def parse_text(text: str) -> Grid:
    """Build a grid from :func:`render_text` output.

    Blank lines and surrounding whitespace are ignored. Fails fast on unknown
    glyphs or ragged rows.
    """
    rows: List[List[CellKind]] = []
    for line in text.strip().splitlines():
        line = line.strip()
        if not line:
            continue
        row: List[CellKind] = []
        for glyph in line:
            if glyph not in GLYPH_TO_KIND:
                raise ValueError(f"Unknown grid glyph: {glyph!r}")
            row.append(GLYPH_TO_KIND[glyph])
        rows.append(row)
    if not rows:
        raise ValueError("No grid rows found")
    return Grid.from_rows(rows)
