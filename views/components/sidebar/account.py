"""
Account sidebar component - who is logged in, and the pages they can reach.
"""

import streamlit as st
from typing import Callable

from controllers.base import Page


def render_account_sidebar(
    display_name: str,
    is_logged_in: bool,
    is_admin: bool,
    on_logout: Callable[[], None],
):
    """
    Render the account section of the sidebar.

    Args:
        display_name: Name of the current user
        is_logged_in: Whether someone is logged in
        is_admin: Whether to show the admin links
        on_logout: Callback when "Log out" is clicked
    """
    with st.sidebar:
        st.markdown("### Account")
        if not is_logged_in:
            st.markdown("You are browsing as a guest.")
            st.page_link(Page.LOGIN, label="Log in")
            st.page_link(Page.REGISTER, label="Create an account")
            return

        st.markdown(f"Signed in as **{display_name}**")
        st.page_link(Page.MY_ANIMALS, label="My Animals")
        st.page_link(Page.MY_REQUESTS, label="My Requests")
        if is_admin:
            st.markdown("**Admin**")
            st.page_link(Page.ADMIN_CATEGORIES, label="Categories")
            st.page_link(Page.ADMIN_BREEDS, label="Breeds")

        if st.button("Log out", use_container_width=True):
            on_logout()
