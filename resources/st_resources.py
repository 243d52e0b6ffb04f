import logging

import streamlit as st

import load_env_secure  # noqa: F401  (loads .env before the config is read)
from models import AppConfig


@st.cache_resource
def get_config() -> AppConfig:
    return AppConfig.from_env()


config = get_config()


logger = logging.getLogger("ingredient_copilot")
