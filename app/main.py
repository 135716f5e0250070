import os
import streamlit as st

from session import (
    apply_config,
    get_config_from_widgets,
    set_default_session,
)
from glyph_mask.config import DisplayConfig
from glyph_mask.driver import TICK_INTERVAL_MS, AnimationDriver
from glyph_mask.renderer.image import MaskImageRenderer
from glyph_mask.renderer.text import render_text
from glyph_mask.scheduler import PollingScheduler

script_dir: str = os.path.dirname(os.path.realpath(__file__))

st.set_page_config(layout="wide", page_title="Glyph Mask")

with open(os.path.join(script_dir, "styles.css")) as f:
    st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


# --------- Main App ---------

set_default_session()

config: DisplayConfig = get_config_from_widgets()
if config != st.session_state["config"]:
    apply_config(config)

as_image = st.toggle("Render as image", value=False, key="as_image_toggle")
image_renderer = MaskImageRenderer()


@st.fragment(run_every=TICK_INTERVAL_MS / 1000)
def display() -> None:
    scheduler: PollingScheduler = st.session_state["scheduler"]
    driver: AnimationDriver = st.session_state["driver"]
    scheduler.poll()
    if not driver.text:
        st.info("Enter some text and press Confirm.", icon="⌨️")
        return
    if as_image:
        img = image_renderer.render(driver.text, driver.grid)
        st.image(img, use_container_width=True)
    else:
        st.code(render_text(driver.text, driver.grid), language=None)


display()
