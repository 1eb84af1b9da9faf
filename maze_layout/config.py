"""Generator configuration and dimension checks.

``GeneratorConfig`` unifies the two generator variants behind explicit knobs:

* ``inner_wall_density`` gates each inner pillar pair (``0.0`` never placed,
  ``1.0`` always placed).
* ``exit_placement`` chooses between the exact edge midpoint and a random
  non-corner cell along the chosen edge.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from maze_layout.types import ExitPlacement

MIN_SIZE = 5


class InvalidDimensions(ValueError):
    """Requested grid dimensions are non-positive or below ``min_size``."""

    def __init__(self, row_count: int, col_count: int, min_size: int = MIN_SIZE):
        self.row_count = row_count
        self.col_count = col_count
        self.min_size = min_size
        super().__init__(
            f"Invalid maze dimensions {row_count}x{col_count}: "
            f"rows and columns must be at least {min_size}"
        )


def check_dimensions(row_count: int, col_count: int, min_size: int = MIN_SIZE) -> None:
    """Raise :class:`InvalidDimensions` unless both counts are >= ``min_size``."""
    if row_count <= 0 or col_count <= 0 or row_count < min_size or col_count < min_size:
        raise InvalidDimensions(row_count, col_count, min_size)


def clamp_dimensions(
    row_count: int, col_count: int, min_size: int = MIN_SIZE
) -> Tuple[int, int]:
    """Caller-side clamp: raise each count to at least ``min_size``."""
    return max(row_count, min_size), max(col_count, min_size)


@dataclass(frozen=True)
class GeneratorConfig:
    """Knobs for :func:`maze_layout.generator.generate`.

    Attributes:
        inner_wall_density: Probability in ``[0, 1]`` that an inner pillar pair
            is placed at each even interior cell.
        exit_placement: Exit position along the chosen edge.
    """

    inner_wall_density: float = 1.0
    exit_placement: ExitPlacement = ExitPlacement.FIXED_MIDPOINT

    def __post_init__(self) -> None:
        if not 0.0 <= self.inner_wall_density <= 1.0:
            raise ValueError(
                f"inner_wall_density must be within [0, 1], got {self.inner_wall_density}"
            )
        if not isinstance(self.exit_placement, ExitPlacement):
            # Accept the plain string values ("fixed-midpoint", ...)
            object.__setattr__(
                self, "exit_placement", ExitPlacement(self.exit_placement)
            )


DEFAULT_CONFIG = GeneratorConfig()
