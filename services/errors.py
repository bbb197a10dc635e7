"""
Error taxonomy for calls to the remote API.

Every failure a controller can see is an ApiClientError subclass, so the
controller boundary catches one type and turns it into a page message.

- ConfigurationError: bad URL, bad timeout, bad input to the client. Fix the caller.
- TransportError: network failure or timeout. Surfaced as "try again later".
- ApiError: the server answered with a non-2xx status.
- ValidationError: local pre-flight check failed; no call was made.
- ResponseFormatError: a 2xx body that could not be decoded.
"""


class ApiClientError(Exception):
    """Base class for every error raised by the API layer."""


class ConfigurationError(ApiClientError):
    """The request could not be built (malformed URL, invalid settings)."""


class TransportError(ApiClientError):
    """The request could not be completed (connection refused, timeout, ...)."""


class ValidationError(ApiClientError):
    """A local check failed before any request was sent."""


class ResponseFormatError(ApiClientError):
    """The server returned a successful status with an unreadable body."""


class ApiError(ApiClientError):
    """The server rejected the request with a non-2xx status."""

    def __init__(self, status: int, body: str = ""):
        self.status = status
        self.body = body or ""
        super().__init__(str(self))

    @property
    def is_client_error(self) -> bool:
        """4xx: validation or authorization problem the user can act on."""
        return 400 <= self.status < 500

    @property
    def is_server_error(self) -> bool:
        """5xx: transient service failure."""
        return self.status >= 500

    def __str__(self) -> str:
        if self.body:
            return f"HTTP {self.status}: {self.body}"
        return f"HTTP {self.status}"
