"""Disclaimer and configuration status components."""

import streamlit as st

from models import AppConfig


AI_DISCLAIMER = (
    "This analysis is AI-generated and for informational purposes only. "
    "Always consult healthcare providers for medical advice."
)

HOW_IT_WORKS = (
    "Paste any ingredient list below. Our AI will instantly analyze what matters, "
    "no filters, no configuration needed."
)


def show_how_it_works():
    """Info banner shown above the input."""
    st.info(f"**How it works**\n\n{HOW_IT_WORKS}")


def show_result_disclaimer():
    """Disclaimer shown under every completed analysis."""
    st.divider()
    st.caption(f"*{AI_DISCLAIMER}*")


def show_api_key_status(config: AppConfig):
    """Show API key status in the sidebar."""
    st.sidebar.markdown("### API Key Status")

    if config.has_api_key:
        st.sidebar.success("🔑 API key loaded")
        st.sidebar.caption(f"Key: {config.api_key[:12]}...")
    else:
        # not fatal: the analysis fails and shows the generic message
        st.sidebar.warning("⚠️ No API key found. Set ANTHROPIC_API_KEY in your environment or .env file.")

    st.sidebar.caption(f"Model: {config.model}")
