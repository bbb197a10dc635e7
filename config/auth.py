"""
Session identity for the HomeTail front-end.

The backend issues a bearer token on login; this module keeps that token and
the user it belongs to for the lifetime of one browser session. Nothing is
checked locally: role tests here only decide what the UI offers, the API
still authorizes every call.

One SessionContext is stored per Streamlit session and passed explicitly to
every controller.
"""

import logging
from dataclasses import dataclass
from typing import Any, MutableMapping, Optional

import streamlit as st

from models import UserRecord
from services.api_client import get_api_client
from services.auth_service import AuthService
from services.errors import ApiClientError, ApiError

logger = logging.getLogger(__name__)

SESSION_KEY = "session_context"
ROLE_PREFIX = "ROLE_"


@dataclass
class Identity:
    """The logged-in user and their token."""
    token: str
    user: UserRecord

    @property
    def user_id(self) -> Optional[int]:
        return self.user.id

    @property
    def display_name(self) -> str:
        return self.user.full_name or self.user.username or self.user.email or "User"

    @property
    def role(self) -> Optional[str]:
        return self.user.role

    @property
    def email(self) -> Optional[str]:
        return self.user.email


@dataclass
class LoginResult:
    """Result of a login attempt."""
    success: bool
    identity: Optional[Identity] = None
    error: Optional[str] = None
    failure: Optional[ApiClientError] = None


def _normalize_role(role: Optional[str]) -> str:
    value = (role or "").strip().upper()
    if value.startswith(ROLE_PREFIX):
        value = value[len(ROLE_PREFIX):]
    return value


class SessionContext:
    """Holds the identity of the current browser session."""

    def __init__(self, auth_service: AuthService):
        self.auth_service = auth_service
        self.identity: Optional[Identity] = None
        self.error_message: Optional[str] = None

    # ==========================================
    # Login / Logout
    # ==========================================

    def login(self, email: str, password: str) -> LoginResult:
        """
        Authenticate against the API and remember the identity.

        On failure the session stays logged out and error_message explains why.
        """
        try:
            response = self.auth_service.login(email.strip(), password)
        except ApiError as e:
            logger.warning(f"Login rejected for {email}: HTTP {e.status}")
            self.identity = None
            self.error_message = "Invalid email or password."
            return LoginResult(success=False, error=self.error_message, failure=e)
        except ApiClientError as e:
            logger.error(f"Login failed for {email}: {e}")
            self.identity = None
            self.error_message = f"Login failed: {e}"
            return LoginResult(success=False, error=self.error_message, failure=e)

        self.identity = Identity(token=response.token.strip(), user=response.user or UserRecord())
        self.error_message = None
        return LoginResult(success=True, identity=self.identity)

    def logout(self):
        """Forget the identity. The token simply expires server-side."""
        if self.identity:
            logger.info(f"Logged out {self.identity.email}")
        self.identity = None
        self.error_message = None

    # ==========================================
    # Queries
    # ==========================================

    def is_logged_in(self) -> bool:
        return self.identity is not None and bool(self.identity.token.strip())

    def current_token(self) -> Optional[str]:
        """The bearer token, or None when logged out."""
        return self.identity.token if self.is_logged_in() else None

    @property
    def user(self) -> Optional[UserRecord]:
        return self.identity.user if self.identity else None

    @property
    def user_id(self) -> Optional[int]:
        return self.identity.user_id if self.identity else None

    @property
    def display_name(self) -> str:
        return self.identity.display_name if self.identity else "Guest"

    def has_role(self, role: str) -> bool:
        """
        Case-insensitive role check where "admin", "ADMIN" and "ROLE_ADMIN"
        all match each other.
        """
        if not self.is_logged_in() or not role:
            return False
        return _normalize_role(self.identity.role) == _normalize_role(role)

    def is_admin(self) -> bool:
        return self.has_role("ADMIN")


# ==========================================
# Streamlit helpers
# ==========================================

def get_session(state: Optional[MutableMapping[str, Any]] = None) -> SessionContext:
    """Return this browser session's SessionContext, creating it on first use."""
    if state is None:
        state = st.session_state
    if SESSION_KEY not in state:
        state[SESSION_KEY] = SessionContext(AuthService(get_api_client()))
    return state[SESSION_KEY]


def require_login(session: SessionContext) -> Identity:
    """
    Require a logged-in user - stops the page otherwise.

    Use this at the top of pages that call authenticated endpoints.
    """
    if not session.is_logged_in():
        st.warning("Please log in to access this page.")
        if st.button("Go to Login", type="primary"):
            st.switch_page("pages/7_🔑_Login.py")
        st.stop()
    return session.identity


def require_admin(session: SessionContext) -> Identity:
    """Require an administrator - stops the page otherwise."""
    identity = require_login(session)
    if not session.is_admin():
        st.error("This page is only available to administrators.")
        st.stop()
    return identity
