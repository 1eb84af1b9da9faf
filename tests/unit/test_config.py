import pytest

from maze_layout.config import (
    DEFAULT_CONFIG,
    MIN_SIZE,
    GeneratorConfig,
    InvalidDimensions,
    check_dimensions,
    clamp_dimensions,
)
from maze_layout.types import ExitPlacement


def test_defaults() -> None:
    assert MIN_SIZE == 5
    assert DEFAULT_CONFIG.inner_wall_density == 1.0
    assert DEFAULT_CONFIG.exit_placement is ExitPlacement.FIXED_MIDPOINT


@pytest.mark.parametrize("density", [0.0, 0.25, 1.0])
def test_density_in_range_accepted(density: float) -> None:
    assert GeneratorConfig(inner_wall_density=density).inner_wall_density == density


@pytest.mark.parametrize("density", [-0.01, 1.5])
def test_density_out_of_range_rejected(density: float) -> None:
    with pytest.raises(ValueError):
        GeneratorConfig(inner_wall_density=density)


def test_exit_placement_string_coerced() -> None:
    config = GeneratorConfig(exit_placement="random-along-edge")  # type: ignore[arg-type]
    assert config.exit_placement is ExitPlacement.RANDOM_ALONG_EDGE


def test_unknown_exit_placement_rejected() -> None:
    with pytest.raises(ValueError):
        GeneratorConfig(exit_placement="diagonal")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "rows, cols",
    [(4, 5), (5, 4), (0, 5), (5, 0), (-3, 7), (1, 1)],
)
def test_check_dimensions_rejects_small(rows: int, cols: int) -> None:
    with pytest.raises(InvalidDimensions) as excinfo:
        check_dimensions(rows, cols)
    assert excinfo.value.row_count == rows
    assert excinfo.value.col_count == cols
    assert excinfo.value.min_size == MIN_SIZE
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("rows, cols", [(5, 5), (5, 40), (100, 7)])
def test_check_dimensions_accepts(rows: int, cols: int) -> None:
    check_dimensions(rows, cols)


@pytest.mark.parametrize(
    "requested, expected",
    [((1, 1), (5, 5)), ((3, 9), (5, 9)), ((12, 2), (12, 5)), ((7, 8), (7, 8))],
)
def test_clamp_dimensions(
    requested: tuple[int, int], expected: tuple[int, int]
) -> None:
    assert clamp_dimensions(*requested) == expected
