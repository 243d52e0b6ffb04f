import logging

import streamlit as st
from ui.pages.analyzer import render_analyzer_ui

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


# Configure the main page
st.set_page_config(
    page_title="AI Health Co-Pilot",
    page_icon="✨",
    layout="wide",
    initial_sidebar_state="expanded"
)

render_analyzer_ui()

st.divider()
st.caption("Built with Claude AI • An AI-native experience designed for human understanding")
