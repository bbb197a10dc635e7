"""
Sidebar components for different views.
"""

from views.components.sidebar.account import render_account_sidebar
from views.components.sidebar.filters import render_filter_sidebar

__all__ = [
    "render_account_sidebar",
    "render_filter_sidebar",
]
