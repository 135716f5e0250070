from __future__ import annotations

import streamlit as st

from glyph_mask.algorithms import all_algorithms
from glyph_mask.config import DEFAULT_CONFIG, DisplayConfig, next_config
from glyph_mask.driver import AnimationDriver
from glyph_mask.scheduler import PollingScheduler

__all__ = [
    "set_default_session",
    "get_config_from_widgets",
    "apply_config",
]


def set_default_session() -> None:
    """Create the per-browser-session scheduler and driver once."""
    if "config" not in st.session_state:
        st.session_state["config"] = DEFAULT_CONFIG
        st.session_state["input_text"] = DEFAULT_CONFIG.display_text
    if "driver" not in st.session_state:
        scheduler = PollingScheduler()
        st.session_state["scheduler"] = scheduler
        st.session_state["driver"] = AnimationDriver(scheduler)
        apply_config(st.session_state["config"])


def apply_config(config: DisplayConfig) -> None:
    """Store ``config`` and push it to the driver (regenerates the grid)."""
    st.session_state["config"] = config
    driver: AnimationDriver = st.session_state["driver"]
    driver.apply(config)


def get_config_from_widgets() -> DisplayConfig:
    current: DisplayConfig = st.session_state["config"]
    # A form submits on Enter in the text box as well as on Confirm.
    with st.form("text_form", border=False):
        text_col, button_col = st.columns([0.8, 0.2])
        with text_col:
            raw_text = st.text_input(
                "Text",
                key="input_text",
                placeholder="Enter text",
                label_visibility="collapsed",
            )
        with button_col:
            submitted = st.form_submit_button("Confirm", use_container_width=True)

    algorithms = all_algorithms()
    labels = [f"{a.name} - {a.description}" for a in algorithms]
    names = [a.name for a in algorithms]
    selected_label = st.selectbox(
        "Masking Algorithm",
        labels,
        index=names.index(current.algorithm_name),
        key="algorithm_select",
    )
    algorithm_name = names[labels.index(selected_label)]

    return next_config(current, raw_text, algorithm_name, submitted)
