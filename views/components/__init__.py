"""
Reusable UI components.
"""

from views.components.messages import render_messages
from views.components.layout import render_page_chrome
from views.components.animal_card import render_animal_card, render_animal_details
from views.components.request_row import render_request_header, render_request_row, status_badge

# Sidebar components
from views.components.sidebar import (
    render_account_sidebar,
    render_filter_sidebar,
)

__all__ = [
    # Messages & layout
    "render_messages",
    "render_page_chrome",
    # Animals
    "render_animal_card",
    "render_animal_details",
    # Requests
    "render_request_header",
    "render_request_row",
    "status_badge",
    # Sidebar
    "render_account_sidebar",
    "render_filter_sidebar",
]
