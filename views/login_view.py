"""
Login View - email and password sign-in.
"""

import streamlit as st

from config.auth import get_session
from controllers.auth_controller import AuthController
from controllers.base import Page
from services.api_client import get_api_client
from services.auth_service import AuthService
from views.components.layout import render_page_chrome
from views.components.navigation import go_to, is_page_entry


class LoginView:
    """View for the login page."""

    def __init__(self):
        self.session = get_session()
        self.controller = AuthController(self.session, AuthService(get_api_client()))

    def render(self):
        """Main render method."""
        is_page_entry(Page.LOGIN)
        render_page_chrome(self.session, self.controller)
        st.title("Log in")

        if self.session.is_logged_in():
            st.info(f"You are logged in as **{self.session.display_name}**.")
            if st.button("Browse Animals →", type="primary"):
                st.switch_page(Page.BROWSE)
            return

        with st.form("login"):
            email = st.text_input("Email", placeholder="you@example.com")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Log in", type="primary", use_container_width=True)

        if submitted:
            with st.spinner("Logging in..."):
                target = self.controller.login(email, password)
            go_to(target)

        st.markdown("---")
        st.markdown("No account yet?")
        st.page_link(Page.REGISTER, label="Create an account")
