"""
Base controller - session state, page messages and error reporting shared by
every HomeTail page controller.

Each controller owns one dict in the Streamlit session state (its
`state_key`), so page state survives reruns but stays out of other pages'
way. Tests pass a plain dict instead of st.session_state.

Messages come in two scopes:
- Page messages: shown at the top of the controller's own page
- Flash messages: session-wide, shown on whichever page renders next
  (used when an action navigates away)
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, MutableMapping, Optional

import streamlit as st

from config.auth import SessionContext
from services.errors import (
    ApiClientError,
    ApiError,
    ConfigurationError,
    ResponseFormatError,
    TransportError,
    ValidationError,
)

logger = logging.getLogger(__name__)

FLASH_KEY = "flash_messages"

# Marks page state that has not been loaded for any target yet
NOT_LOADED = "not-loaded"


class Page:
    """Navigation targets, as accepted by st.switch_page."""
    HOME = "streamlit_app.py"
    BROWSE = "pages/1_🐾_Browse_Animals.py"
    ANIMAL_DETAILS = "pages/2_📄_Animal_Details.py"
    EDIT_ANIMAL = "pages/3_✏️_Edit_Animal.py"
    MY_ANIMALS = "pages/4_🏠_My_Animals.py"
    ANIMAL_REQUESTS = "pages/5_📬_Animal_Requests.py"
    MY_REQUESTS = "pages/6_📨_My_Requests.py"
    LOGIN = "pages/7_🔑_Login.py"
    REGISTER = "pages/8_📝_Register.py"
    ADMIN_CATEGORIES = "pages/9_🗂️_Admin_Categories.py"
    ADMIN_BREEDS = "pages/10_🧬_Admin_Breeds.py"


class Severity(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class Message:
    """A message for the user, rendered with the matching st.* call."""
    severity: Severity
    text: str


@dataclass
class LoadResult:
    """
    Result of loading a collection.

    success=False means the call failed and the previous items were kept;
    success=True with no items means there is genuinely nothing to show.
    """
    success: bool
    items: list = field(default_factory=list)
    error: Optional[str] = None


class ViewStateController:
    """Base class for page controllers."""

    state_key: str = ""

    def __init__(
        self,
        session: SessionContext,
        state: Optional[MutableMapping[str, Any]] = None,
    ):
        self.session = session
        self._store = st.session_state if state is None else state
        self._init_session_state()

    def _defaults(self) -> dict:
        """Initial page state. Override in subclasses."""
        return {}

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if self.state_key not in self._store:
            self._store[self.state_key] = {"messages": [], **self._defaults()}
        if FLASH_KEY not in self._store:
            self._store[FLASH_KEY] = []

    @property
    def state(self) -> dict:
        return self._store[self.state_key]

    def reset_state(self):
        """Drop all page state, keeping unread messages."""
        messages = self.state["messages"]
        self._store[self.state_key] = {"messages": messages, **self._defaults()}

    # ==========================================
    # Messages
    # ==========================================

    def add_message(self, severity: Severity, text: str):
        self.state["messages"].append(Message(severity, text))

    def info(self, text: str):
        self.add_message(Severity.INFO, text)

    def success(self, text: str):
        self.add_message(Severity.SUCCESS, text)

    def warning(self, text: str):
        self.add_message(Severity.WARNING, text)

    def error(self, text: str):
        self.add_message(Severity.ERROR, text)

    @property
    def messages(self) -> list[Message]:
        return list(self.state["messages"])

    def pop_messages(self) -> list[Message]:
        """Return and clear this page's messages."""
        messages = self.state["messages"]
        self.state["messages"] = []
        return messages

    def flash(self, severity: Severity, text: str):
        """Queue a message for the next page rendered in this session."""
        self._store[FLASH_KEY].append(Message(severity, text))

    def pop_flash_messages(self) -> list[Message]:
        messages = self._store[FLASH_KEY]
        self._store[FLASH_KEY] = []
        return messages

    # ==========================================
    # Errors
    # ==========================================

    def _require_token(self) -> str:
        """The session token, or ValidationError before any call is made."""
        token = self.session.current_token()
        if not token:
            raise ValidationError("You need to log in first.")
        return token

    @staticmethod
    def describe_error(exc: Exception) -> str:
        """Turn an API-layer error into text for the user."""
        if isinstance(exc, ValidationError):
            return str(exc)
        if isinstance(exc, TransportError):
            return "The server could not be reached. Please try again later."
        if isinstance(exc, ApiError):
            if exc.is_server_error:
                return (
                    f"The service is temporarily unavailable (HTTP {exc.status}). "
                    "Please try again later."
                )
            return str(exc)
        if isinstance(exc, ResponseFormatError):
            return f"The server sent an unexpected response: {exc}"
        if isinstance(exc, ConfigurationError):
            return f"Configuration error: {exc}"
        return str(exc)

    def report_error(self, prefix: str, exc: ApiClientError) -> str:
        """Log an error and add it to the page messages. Returns the text shown."""
        if isinstance(exc, ValidationError):
            text = str(exc)
            logger.info(f"{self.__class__.__name__}: {text}")
        else:
            text = f"{prefix}: {self.describe_error(exc)}"
            logger.error(f"{self.__class__.__name__}: {prefix}: {exc}")
        self.error(text)
        return text
