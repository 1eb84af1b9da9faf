from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from maze_layout.config import MIN_SIZE, GeneratorConfig
from maze_layout.types import ExitPlacement


@dataclass(frozen=True)
class AppConfig:
    row_count: int
    col_count: int
    inner_wall_density: float
    exit_placement: ExitPlacement
    seed: Optional[int]

    def generator_config(self) -> GeneratorConfig:
        return GeneratorConfig(
            inner_wall_density=self.inner_wall_density,
            exit_placement=self.exit_placement,
        )


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = AppConfig(
            row_count=15,
            col_count=21,
            inner_wall_density=1.0,
            exit_placement=ExitPlacement.FIXED_MIDPOINT,
            seed=None,
        )
        st.session_state["seed_counter"] = 0


def get_config_from_widgets() -> AppConfig:
    current: AppConfig = st.session_state["config"]

    st.subheader("Size")
    # Sizes below MIN_SIZE surface InvalidDimensions in the preview
    row_count: int = st.number_input(
        "Rows", min_value=1, value=current.row_count, key="row_count"
    )
    col_count: int = st.number_input(
        "Columns", min_value=1, value=current.col_count, key="col_count"
    )
    st.caption(f"Both sides must be at least {MIN_SIZE}.")

    st.subheader("Walls")
    inner_wall_density: float = st.slider(
        "Inner wall density",
        min_value=0.0,
        max_value=1.0,
        value=current.inner_wall_density,
        step=0.05,
        key="inner_wall_density",
    )
    placements = list(ExitPlacement)
    exit_placement = st.selectbox(
        "Exit placement",
        placements,
        index=placements.index(current.exit_placement),
        format_func=lambda p: p.value.replace("-", " ").capitalize(),
        key="exit_placement",
    )

    st.subheader("Random")
    seed_text: str = st.text_input(
        "Seed (blank for random)",
        value="" if current.seed is None else str(current.seed),
        key="seed_text",
    )
    seed: Optional[int] = int(seed_text) if seed_text.strip().isdigit() else None

    return AppConfig(
        row_count=int(row_count),
        col_count=int(col_count),
        inner_wall_density=float(inner_wall_density),
        exit_placement=ExitPlacement(exit_placement),
        seed=seed,
    )
