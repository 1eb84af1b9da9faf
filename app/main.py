import streamlit as st

from dataclasses import replace
from typing import Optional

from config import (
    AppConfig,
    set_default_config,
    get_config_from_widgets,
)
from maze_layout.config import InvalidDimensions
from maze_layout.generator import generate
from maze_layout.grid import Grid
from maze_layout.renderer.image import render
from maze_layout.renderer.text import render_text
from maze_layout.types import CellKind

st.set_page_config(layout="wide", page_title="Maze Layout")


def make_grid(config: AppConfig) -> None:
    try:
        st.session_state["grid"] = generate(
            config.row_count,
            config.col_count,
            config=config.generator_config(),
            seed=config.seed,
        )
        st.session_state["error"] = None
    except InvalidDimensions as e:
        st.session_state["grid"] = None
        st.session_state["error"] = str(e)


# --------- Main App ---------

set_default_config()
tab_preview, tab_config, tab_text = st.tabs(["Preview", "Config", "Text"])

with tab_config:
    config: AppConfig = get_config_from_widgets()
    st.session_state["config"] = config

    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["seed_counter"] = 0
        make_grid(st.session_state["config"])
    st.divider()

if "grid" not in st.session_state:
    make_grid(st.session_state["config"])

with tab_preview:
    left_col, right_col = st.columns([0.75, 0.25])

    with right_col:
        current_cfg: AppConfig = st.session_state["config"]
        if st.button("🔁 New Maze", key="generate_btn", use_container_width=True):
            st.session_state["seed_counter"] += 1
            base_seed = current_cfg.seed if current_cfg.seed is not None else 0
            new_seed = base_seed + st.session_state["seed_counter"]
            make_grid(replace(current_cfg, seed=new_seed))

        grid: Optional[Grid] = st.session_state["grid"]
        if grid is not None:
            st.info(f"**Size:** {grid.row_count} x {grid.col_count}", icon="📐")
            st.info(f"**Exit:** {grid.exit}", icon="🚪")
            st.info(f"**Inner walls:** {grid.count(CellKind.INNER_WALL)}", icon="🧱")

    with left_col:
        if st.session_state["error"]:
            st.error(st.session_state["error"])
        elif grid is not None:
            img = render(grid)
            st.image(img.convert("P"), use_container_width=True)

with tab_text:
    if st.session_state["grid"] is not None:
        st.code(render_text(st.session_state["grid"]), language=None)
