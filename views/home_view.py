"""
Home View - Landing page for HomeTail.

Displays navigation options for adopters and for people rehoming an animal.
"""

import streamlit as st

from config.auth import get_session
from config.settings import get_settings
from controllers.auth_controller import AuthController
from controllers.base import Page
from services.api_client import get_api_client
from services.auth_service import AuthService
from views.components.layout import render_page_chrome
from views.components.navigation import is_page_entry, open_editor


class HomeView:
    """View for the home/landing page."""

    def __init__(self):
        self.session = get_session()
        self.controller = AuthController(self.session, AuthService(get_api_client()))

    def render(self) -> None:
        """Render the home page."""
        is_page_entry(Page.HOME)
        render_page_chrome(self.session, self.controller)

        st.title(f"🐾 {get_settings().app_title}")
        st.markdown("Find a new best friend, or a new home for one.")

        st.markdown("---")

        col1, col2 = st.columns(2)

        with col1:
            self._render_adopt_card()

        with col2:
            self._render_rehome_card()

        st.markdown("---")
        st.markdown("*Use the sidebar to navigate between pages.*")

    def _render_adopt_card(self) -> None:
        """Render the Adopt card."""
        st.markdown("### Adopt")
        st.markdown("""
        Browse animals waiting for a home.

        - Filter by category, gender, size and age
        - Read each animal's story
        - Send an adoption request to the owner
        """)
        if st.button("Browse Animals →", type="primary", use_container_width=True):
            st.switch_page(Page.BROWSE)

    def _render_rehome_card(self) -> None:
        """Render the Rehome card."""
        st.markdown("### Rehome")
        st.markdown("""
        List an animal that needs a new family.

        - Add photos and a description
        - Review the requests you receive
        - Approve the family that fits best
        """)
        if self.session.is_logged_in():
            if st.button("List an Animal →", type="primary", use_container_width=True):
                open_editor(Page.EDIT_ANIMAL)
        elif st.button("Log in to List an Animal →", use_container_width=True):
            st.switch_page(Page.LOGIN)
