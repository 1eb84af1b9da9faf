import pytest

from maze_layout.config import GeneratorConfig
from maze_layout.generator import generate
from maze_layout.renderer.image import (
    DEFAULT_PALETTE,
    EXIT_MARKER_COLOR,
    ImageRenderer,
    render,
)
from maze_layout.types import CellKind


def test_image_size_follows_widest_side() -> None:
    grid = generate(5, 10, seed=0)
    img = render(grid, resolution=100)
    assert img.size == (100, 50)
    assert img.mode == "RGBA"


def test_tile_colors() -> None:
    grid = generate(5, 5, seed=1)
    img = render(grid, resolution=50, mark_exit=False)
    assert img.getpixel((0, 0)) == DEFAULT_PALETTE[CellKind.OUTER_WALL]
    assert img.getpixel((25, 25)) == DEFAULT_PALETTE[CellKind.EMPTY]


def test_inner_wall_tile_color() -> None:
    grid = generate(15, 15, seed=2)
    r, c = grid.positions_of(CellKind.INNER_WALL)[0]
    img = render(grid, resolution=150)
    assert img.getpixel((c * 10 + 5, r * 10 + 5)) == DEFAULT_PALETTE[CellKind.INNER_WALL]


def test_exit_marker() -> None:
    grid = generate(5, 5, seed=3)
    assert grid.exit is not None
    r, c = grid.exit
    x0, y0 = c * 10, r * 10

    marked = render(grid, resolution=50)
    assert marked.getpixel((x0 + 2, y0 + 2)) == EXIT_MARKER_COLOR
    assert marked.getpixel((x0 + 5, y0 + 5)) == DEFAULT_PALETTE[CellKind.EMPTY]

    plain = render(grid, resolution=50, mark_exit=False)
    assert plain.getpixel((x0 + 2, y0 + 2)) == DEFAULT_PALETTE[CellKind.EMPTY]


def test_custom_palette_must_cover_every_kind() -> None:
    grid = generate(5, 5, seed=0)
    with pytest.raises(ValueError):
        render(grid, palette={CellKind.EMPTY: (0, 0, 0, 255)})


def test_image_renderer_matches_function() -> None:
    grid = generate(7, 7, seed=9)
    palette = {
        CellKind.EMPTY: (255, 255, 255, 255),
        CellKind.INNER_WALL: (0, 0, 255, 255),
        CellKind.OUTER_WALL: (0, 0, 0, 255),
    }
    renderer = ImageRenderer(resolution=70, palette=palette)
    assert (
        renderer.render(grid).tobytes()
        == render(grid, resolution=70, palette=palette).tobytes()
    )


@pytest.mark.parametrize("resolution, cell_size", [(5, 1), (10, 2), (15, 3)])
def test_exit_marker_on_tiny_tiles(resolution: int, cell_size: int) -> None:
    grid = generate(5, 5, seed=0)
    assert grid.exit is not None
    r, c = grid.exit
    img = render(grid, resolution=resolution, mark_exit=True)
    assert img.size == (5 * cell_size, 5 * cell_size)
    x0, y0 = c * cell_size, r * cell_size
    if cell_size < 3:
        for dx in range(cell_size):
            for dy in range(cell_size):
                assert img.getpixel((x0 + dx, y0 + dy)) == EXIT_MARKER_COLOR
    else:
        assert img.getpixel((x0 + 1, y0 + 1)) == EXIT_MARKER_COLOR


def test_large_grid_renders_at_default_resolution() -> None:
    grid = generate(
        321, 321, config=GeneratorConfig(inner_wall_density=0.0), seed=0
    )
    img = render(grid)
    assert img.size == (321, 321)
    assert grid.exit is not None
    r, c = grid.exit
    assert img.getpixel((c, r)) == EXIT_MARKER_COLOR


def test_image_renderer_rejects_empty_palette() -> None:
    grid = generate(5, 5, seed=0)
    with pytest.raises(ValueError):
        ImageRenderer(palette={}).render(grid)


def test_image_renderer_default_palette() -> None:
    grid = generate(5, 5, seed=6)
    assert ImageRenderer(resolution=50).render(grid).tobytes() == render(
        grid, resolution=50
    ).tobytes()
