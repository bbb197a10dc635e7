"""
Auth Controller - login, logout and registration pages.
"""

import logging
import re
from typing import Optional

from config.auth import SessionContext
from controllers.base import Page, Severity, ViewStateController
from models import RegistrationForm
from services.auth_service import AuthService
from services.errors import ApiClientError, ApiError

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_PASSWORD_LENGTH = 6


class AuthController(ViewStateController):
    """Controller for the login and registration pages."""

    state_key = "auth"

    def __init__(self, session: SessionContext, auth_service: AuthService, state=None):
        self.auth_service = auth_service
        super().__init__(session, state)

    # ==========================================
    # Login / Logout
    # ==========================================

    def login(self, email: str, password: str) -> Optional[str]:
        """
        Log in with the given credentials.

        Returns:
            The page to go to on success, None to stay on the login page
        """
        if not (email or "").strip() or not password:
            self.error("Email and password are required.")
            return None

        result = self.session.login(email, password)
        if not result.success:
            self.error(result.error)
            return None

        self.flash(Severity.SUCCESS, f"Welcome back, {self.session.display_name}!")
        return Page.BROWSE

    def logout(self) -> str:
        self.session.logout()
        self.flash(Severity.INFO, "You have been logged out.")
        return Page.HOME

    # ==========================================
    # Registration
    # ==========================================

    def validate_registration(self, form: RegistrationForm) -> list[str]:
        """Local checks run before anything is sent. Returns the problems found."""
        problems = []
        if not form.first_name.strip():
            problems.append("First name is required.")
        if not form.last_name.strip():
            problems.append("Last name is required.")
        if not EMAIL_PATTERN.match(form.email.strip()):
            problems.append("Please enter a valid email address.")
        if len(form.password) < MIN_PASSWORD_LENGTH:
            problems.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
        if form.password != form.confirm_password:
            problems.append("Passwords do not match.")
        return problems

    def register(self, form: RegistrationForm) -> Optional[str]:
        """
        Create an account.

        Returns:
            The login page on success, None to stay on the form
        """
        problems = self.validate_registration(form)
        if problems:
            for problem in problems:
                self.error(problem)
            return None

        try:
            self.auth_service.register(form)
        except ApiError as e:
            logger.warning(f"Registration rejected for {form.email}: HTTP {e.status}")
            if e.status == 409:
                self.error("Registration failed. Email already in use.")
            elif e.status == 400:
                self.error("Registration failed. Invalid registration data.")
            else:
                self.error("Registration failed. Please try again later.")
            return None
        except ApiClientError as e:
            logger.error(f"Registration failed for {form.email}: {e}")
            self.error("Registration failed. Please try again later.")
            return None

        self.flash(Severity.SUCCESS, "Registration successful. Please log in.")
        return Page.LOGIN
