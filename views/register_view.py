"""
Register View - account sign-up form.

The form keeps its values after a failed attempt so the user only has to fix
what was wrong.
"""

import streamlit as st

from config.auth import get_session
from controllers.auth_controller import AuthController
from controllers.base import Page
from models import RegistrationForm
from services.api_client import get_api_client
from services.auth_service import AuthService
from views.components.layout import render_page_chrome
from views.components.navigation import go_to, is_page_entry


class RegisterView:
    """View for the registration page."""

    def __init__(self):
        self.session = get_session()
        self.controller = AuthController(self.session, AuthService(get_api_client()))

    def render(self):
        """Main render method."""
        is_page_entry(Page.REGISTER)
        render_page_chrome(self.session, self.controller)
        st.title("Create an account")

        with st.form("register"):
            col1, col2 = st.columns(2)
            with col1:
                first_name = st.text_input("First name")
            with col2:
                last_name = st.text_input("Last name")
            email = st.text_input("Email")
            phone_number = st.text_input("Phone number")
            password = st.text_input("Password", type="password", help="At least 6 characters")
            confirm_password = st.text_input("Confirm password", type="password")
            submitted = st.form_submit_button("Register", type="primary", use_container_width=True)

        if submitted:
            form = RegistrationForm(
                first_name=first_name,
                last_name=last_name,
                email=email,
                password=password,
                confirm_password=confirm_password,
                phone_number=phone_number,
            )
            with st.spinner("Creating your account..."):
                target = self.controller.register(form)
            go_to(target)

        st.markdown("---")
        st.markdown("Already registered?")
        st.page_link(Page.LOGIN, label="Log in")
