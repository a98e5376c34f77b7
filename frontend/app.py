"""Streamlit front end for RealPix.

Run from the repository root with ``streamlit run frontend/app.py``.
"""

import sys
from pathlib import Path

import streamlit as st

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from frontend.config import get_client_settings
from frontend.samples import FALLBACK_IMAGE_URLS
from frontend.state import ImageGeneratorController

settings = get_client_settings()

st.set_page_config(page_title=settings.app_name, page_icon="✨", layout="centered")

if "controller" not in st.session_state:
    st.session_state["controller"] = ImageGeneratorController(settings)

controller: ImageGeneratorController = st.session_state["controller"]
state = controller.state

st.title(f"✨ {settings.app_name}")
st.header("Transform Your Ideas Into Art")
st.write(
    "Create stunning, unique images with the power of AI. "
    "Just describe what you want to see, and watch the magic happen."
)

state.prompt = st.text_input(
    "Prompt",
    key="prompt_input",
    placeholder="Describe the image you want to create...",
    label_visibility="collapsed",
    disabled=state.loading,
)

if state.loading:
    st.button("Generating...", key="generating", disabled=True, use_container_width=True)
    with st.spinner("Generating..."):
        controller.complete()
    st.rerun()
elif st.button("✨ Generate", key="generate", type="primary", use_container_width=True):
    if controller.begin():
        st.rerun()

if state.error:
    st.error(state.error)

if state.generated_image:
    st.image(state.generated_image, caption="AI Generated", use_container_width=True)
    link = controller.download_link()
    if link is not None:
        st.markdown(link.to_html("⬇️ Download"), unsafe_allow_html=True)

st.markdown("---")
st.subheader("How It Works")
steps = st.columns(3)
steps[0].markdown("**1. Describe Your Vision**\n\nEnter a detailed description of the image you want to create.")
steps[1].markdown("**2. AI Magic**\n\nThe AI turns your description into a unique image.")
steps[2].markdown("**3. Download & Share**\n\nDownload your creation and share it with the world.")

st.markdown("---")
st.subheader("Inspiration Gallery")
gallery = st.columns(len(FALLBACK_IMAGE_URLS))
for index, (column, url) in enumerate(zip(gallery, FALLBACK_IMAGE_URLS), start=1):
    column.image(url, caption=f"AI Masterpiece #{index}", use_container_width=True)
