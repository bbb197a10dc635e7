"""
HomeTail - Home Page

Web front-end for the HomeTail animal adoption service. All data lives in
the HomeTail REST API; this app renders pages and calls it.
"""

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="HomeTail",
    page_icon="🐾",
    layout="wide"
)

from config import get_settings, setup_logging
from views.home_view import HomeView

setup_logging(get_settings().log_level)

view = HomeView()
view.render()
