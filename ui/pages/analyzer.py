"""Ingredient analysis page."""

import streamlit as st

from models import RequestState
from models.model_config import format_cost
from resources.st_resources import config
from ui.components.disclaimer import show_api_key_status, show_how_it_works, show_result_disclaimer
from ui.examples import example_names
from ui.state import init_state, get_controller, edit_cb, load_example_cb, analyze_cb
from ui.utils import csv_text, log_to_df, split_paragraphs
from utils.report_generator import generate_markdown_report, generate_summary_stats


def _run_pending_analysis(status_ph):
    """Send the request started by the Analyze button, if any.

    The ticket stays pending until ``run`` returns, so a script run that is
    interrupted first sends it on the next run instead of leaving the page loading.
    """
    ticket = st.session_state.pending_ticket
    if ticket is None:
        return

    controller = get_controller()
    if not controller.is_in_flight(ticket):
        st.session_state.pending_ticket = None
        return

    with status_ph.status("Analyzing ingredients...", expanded=False) as status_widget:
        state = controller.run(ticket)
        st.session_state.pending_ticket = None
        if state == RequestState.SUCCESS:
            record = st.session_state.analysis_logger.get_log().last_success()
            status_widget.update(label=f"Analysis complete (Cost: {format_cost(record.cost)})", state="complete")
        else:
            status_widget.update(label="Analysis failed", state="error")


def _render_result():
    view = get_controller().view

    if view.state == RequestState.FAILURE:
        st.error(view.error, icon="⚠️")
        return

    if view.state == RequestState.SUCCESS:
        st.success("Analysis complete", icon="✅")
        for paragraph in split_paragraphs(view.analysis):
            st.write(paragraph)
        show_result_disclaimer()

        record = st.session_state.analysis_logger.get_log().last_success()
        st.download_button(
            "Download Report (.md)",
            generate_markdown_report(view.ingredients, view.analysis, record),
            "ingredient_analysis.md",
            "text/markdown",
            use_container_width=False
        )
        return

    if view.state == RequestState.IDLE:
        st.caption("Your analysis will appear here")


def _render_process_log():
    log = st.session_state.analysis_logger.get_log()
    if not log.records:
        return

    with st.expander("Process Log", expanded=False):
        stats = generate_summary_stats(log)
        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("API Requests", stats["requests"])
        with col2:
            st.metric("Failed", stats["failed"])
        with col3:
            st.metric("Total Tokens", stats["total_tokens"])
        with col4:
            st.metric("Total Cost", stats["total_cost"])

        df = log_to_df(log)
        st.dataframe(df, use_container_width=True, hide_index=True)

        col1, col2 = st.columns(2)
        with col1:
            st.download_button(
                "Download Log (.csv)",
                csv_text(df),
                f"analysis_log_{log.session_id}.csv",
                "text/csv",
                use_container_width=True
            )
        with col2:
            st.download_button(
                "Download Raw Log (.json)",
                log.to_json(),
                f"analysis_log_{log.session_id}.json",
                "application/json",
                use_container_width=True
            )


def render_analyzer_ui():
    """Render the ingredient input and analysis result."""
    init_state()
    show_api_key_status(config)

    st.markdown("#### AI Health Co-Pilot")
    st.caption("Understand ingredients at the moment of decision")
    show_how_it_works()

    col_in, col_out = st.columns(2)

    # the request runs before the input column is drawn so the button reflects its outcome
    with col_out:
        st.markdown("##### AI Analysis")
        status_ph = st.empty()
        _run_pending_analysis(status_ph)

    with col_in:
        st.markdown("##### Paste Ingredients")
        st.text_area(
            "Ingredients",
            height=200,
            key="input_text",
            on_change=edit_cb,
            placeholder="Example: Whole Wheat Flour, Water, Sugar, Yeast, Salt, Soybean Oil, "
                        "Preservatives (Calcium Propionate), Enriched Flour...",
            label_visibility="collapsed"
        )

        view = get_controller().view
        st.button(
            "Analyzing..." if view.is_loading else "Analyze Ingredients",
            type="primary",
            use_container_width=True,
            key="analyze",
            on_click=analyze_cb,
            disabled=not view.can_analyze
        )

        st.caption("Try an example:")
        cols = st.columns(len(example_names()))
        for col, name in zip(cols, example_names()):
            with col:
                st.button(name, key=f"example_{name}", on_click=load_example_cb, args=(name,))

    with col_out:
        _render_result()

    _render_process_log()
