import uuid

import streamlit as st

from models import AnalysisLogger
from resources.st_resources import config
from ui.controller import AnalysisController

def init_state():
    ss = st.session_state
    if "controller" not in ss:
        ss.analysis_logger = AnalysisLogger(str(uuid.uuid4())[:8])
        ss.controller = AnalysisController(config, analysis_logger=ss.analysis_logger)
    ss.setdefault("input_text", ss.controller.view.ingredients)
    ss.setdefault("pending_ticket", None)  # set by Analyze, consumed by the next page run

def get_controller() -> AnalysisController:
    return st.session_state.controller

def edit_cb():
    get_controller().edit(st.session_state.input_text)

def load_example_cb(name: str):
    entry = get_controller().load_example(name)
    if entry is not None:
        st.session_state.input_text = entry.text
        st.session_state.pending_ticket = None

def analyze_cb():
    controller = get_controller()
    controller.edit(st.session_state.input_text)
    ticket = controller.begin()
    if ticket is not None:
        st.session_state.pending_ticket = ticket
