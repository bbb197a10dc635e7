"""
Auth Service - login and registration against the HomeTail API.

Authentication itself happens on the server; this service only moves
credentials and returns what the server says.
"""

import logging

from models import LoginResponse, RegistrationForm
from services.api_client import ApiClient, decode_record
from services.errors import ResponseFormatError

logger = logging.getLogger(__name__)


class AuthService:
    """Calls the /auth endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    def login(self, email: str, password: str) -> LoginResponse:
        """
        Exchange credentials for a token and user.

        Raises:
            ApiError: credentials rejected (any non-2xx)
            TransportError: server unreachable
            ResponseFormatError: 2xx without a usable token
        """
        response = self.client.send_json(
            "POST",
            "/auth/login",
            {"email": email, "password": password},
        )
        login = decode_record(response.text, LoginResponse)
        if not (login.token or "").strip():
            raise ResponseFormatError("Login response did not include a token")
        logger.info(f"Logged in as {email}")
        return login

    def register(self, form: RegistrationForm) -> int:
        """Create an account. Returns the 2xx status code."""
        payload = {
            "fullName": form.full_name,
            "email": form.email.strip(),
            "password": form.password,
            "phoneNumber": form.phone_number.strip(),
        }
        response = self.client.send_json("POST", "/auth/register", payload)
        logger.info(f"Registered {payload['email']} ({response.status_code})")
        return response.status_code
