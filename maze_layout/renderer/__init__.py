"""Rendering subpackage.

Debugging views of a generated :class:`~maze_layout.grid.Grid`:

* :mod:`maze_layout.renderer.text` draws one glyph per cell and parses the
  same format back, handy for fixtures and log output.
* :mod:`maze_layout.renderer.image` paints one solid tile per cell with
  Pillow + NumPy, suitable for previews of small grids.
"""
