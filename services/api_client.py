"""
HomeTail API client - the single place that talks HTTP to the backend.

Every service builds on ApiClient.execute():
- Resolves relative paths against the configured base URL
- Applies bounded connect/read timeouts
- Attaches the bearer token when one is given
- Encodes the body as JSON or multipart (one JSON part + optional file)
- Maps failures onto the services.errors taxonomy

No retries and no caching: one user action, one request.
"""

import json
import logging
import math
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Iterable, Optional
from urllib.parse import quote, urlencode

import httpx
from pydantic import ValidationError as SchemaError

from config.settings import get_settings
from services.errors import (
    ApiError,
    ConfigurationError,
    ResponseFormatError,
    TransportError,
)

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=UTF-8"
DEFAULT_FILENAME = "upload.bin"
DEFAULT_FILE_CONTENT_TYPE = "application/octet-stream"


class ContentKind(str, Enum):
    """How the request body is encoded."""
    NONE = "none"
    JSON = "json"
    MULTIPART = "multipart"


@dataclass
class FilePart:
    """An uploaded file to send as the binary part of a multipart body."""
    filename: Optional[str]
    content: bytes
    content_type: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.content


@dataclass
class MultipartBody:
    """A multipart body: one JSON part and at most one file part."""
    json_part_name: str
    json_text: str
    file_part_name: str = "image"
    file: Optional[FilePart] = None

    def to_files(self) -> list[tuple[str, tuple]]:
        """
        Parts in httpx `files=` form.

        The JSON part has no filename, so it is sent as a plain form field
        with its own Content-Type. Empty files are left out.
        """
        parts = [
            (self.json_part_name, (None, self.json_text.encode("utf-8"), "application/json")),
        ]
        if self.file is not None and not self.file.is_empty:
            parts.append((
                self.file_part_name,
                (
                    self.file.filename or DEFAULT_FILENAME,
                    self.file.content,
                    self.file.content_type or DEFAULT_FILE_CONTENT_TYPE,
                ),
            ))
        return parts


@dataclass
class ApiResponse:
    """Status and body text of a successful (2xx) response."""
    status_code: int
    text: str

    def json(self) -> Any:
        """Decode the body, raising ResponseFormatError if it isn't JSON."""
        return loads(self.text)


# ==========================================
# Query strings and decoding
# ==========================================

def _quote_component(value: str, safe: str = "", encoding=None, errors=None) -> str:
    # Spaces become %20 (not "+"), and "/" is escaped inside values
    return quote(value, safe="", encoding=encoding, errors=errors)


def encode_query(params: Iterable[tuple[str, str]]) -> str:
    """Percent-encode query parameters in the order given."""
    return urlencode(list(params), quote_via=_quote_component)


def with_query(path: str, params: Iterable[tuple[str, str]]) -> str:
    """Append an encoded query string to a path, if there is one."""
    query = encode_query(params)
    return f"{path}?{query}" if query else path


def loads(text: str) -> Any:
    """json.loads that reports malformed bodies as ResponseFormatError."""
    try:
        return json.loads(text)
    except ValueError as e:
        raise ResponseFormatError(f"Server returned invalid JSON: {text[:200]}") from e


def decode_list(text: str, record_type) -> list:
    """
    Decode a collection response into records.

    Accepts a bare JSON array or a page object with a "content" array.
    A blank body is an empty collection.
    """
    if not text or not text.strip():
        return []
    data = loads(text)
    if isinstance(data, dict) and isinstance(data.get("content"), list):
        data = data["content"]
    if not isinstance(data, list):
        raise ResponseFormatError("Expected a JSON array in the response")
    try:
        return [record_type.from_payload(item) for item in data]
    except SchemaError as e:
        raise ResponseFormatError(f"Unexpected {record_type.__name__} data: {e}") from e


def decode_record(text: str, record_type):
    """Decode a single-resource response into a record."""
    data = loads(text)
    if not isinstance(data, dict):
        raise ResponseFormatError(f"Expected a JSON object for {record_type.__name__}")
    try:
        return record_type.from_payload(data)
    except SchemaError as e:
        raise ResponseFormatError(f"Unexpected {record_type.__name__} data: {e}") from e


# ==========================================
# Client
# ==========================================

def _require_timeout(name: str, value: float) -> float:
    try:
        seconds = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{name} must be a number of seconds, got {value!r}") from e
    if not math.isfinite(seconds) or seconds <= 0:
        raise ConfigurationError(f"{name} must be a finite positive number of seconds, got {value!r}")
    return seconds


class ApiClient:
    """Synchronous HTTP client for the HomeTail REST API."""

    def __init__(
        self,
        base_url: str,
        connect_timeout: float,
        read_timeout: float,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or "").rstrip("/")
        self._check_absolute(self.base_url)
        connect = _require_timeout("connect_timeout", connect_timeout)
        read = _require_timeout("read_timeout", read_timeout)
        self.timeout = httpx.Timeout(
            connect=connect,
            read=read,
            write=read,
            pool=read,
        )
        self._transport = transport

    @staticmethod
    def _check_absolute(url: str) -> httpx.URL:
        try:
            parsed = httpx.URL(url)
        except (httpx.InvalidURL, TypeError) as e:
            raise ConfigurationError(f"Malformed URL '{url}': {e}") from e
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise ConfigurationError(f"Malformed URL '{url}': expected an absolute http(s) URL")
        return parsed

    def resolve_url(self, url: str) -> str:
        """Absolute URLs pass through; paths are joined onto base_url."""
        if not url or not url.strip():
            raise ConfigurationError("URL cannot be empty")
        full_url = url if "://" in url else f"{self.base_url}/{url.lstrip('/')}"
        self._check_absolute(full_url)
        return full_url

    def _encode_body(
        self,
        body: Any,
        content_kind: ContentKind,
        headers: dict[str, str],
    ) -> dict[str, Any]:
        """Request kwargs for httpx, adding the Content-Type header where needed."""
        if body is None:
            return {}

        if content_kind == ContentKind.JSON:
            text = body if isinstance(body, str) else json.dumps(body)
            headers["Content-Type"] = JSON_CONTENT_TYPE
            return {"content": text.encode("utf-8")}

        if content_kind == ContentKind.MULTIPART:
            if not isinstance(body, MultipartBody):
                raise ConfigurationError("Multipart requests need a MultipartBody")
            # httpx picks a fresh random boundary and sets the Content-Type header
            return {"files": body.to_files()}

        raise ConfigurationError(f"A request body needs a content kind, got {content_kind!r}")

    def execute(
        self,
        method: str,
        url: str,
        body: Any = None,
        content_kind: ContentKind = ContentKind.NONE,
        auth_token: Optional[str] = None,
    ) -> ApiResponse:
        """
        Send one request and classify the outcome.

        Args:
            method: HTTP method name
            url: Absolute URL or path relative to base_url
            body: JSON text/mapping or MultipartBody, matching content_kind
            content_kind: How to encode body
            auth_token: Bearer token; ignored when blank

        Returns:
            ApiResponse for any 2xx status

        Raises:
            ConfigurationError: malformed URL or body
            TransportError: network failure or timeout
            ApiError: non-2xx status, carrying the error body ("" if none)
        """
        method = method.upper()
        full_url = self.resolve_url(url)

        headers = {"Accept": "application/json"}
        token = (auth_token or "").strip()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        request_kwargs = self._encode_body(body, content_kind, headers)

        logger.debug(f"{method} {full_url} body={content_kind.value} auth={bool(token)}")

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.request(method, full_url, headers=headers, **request_kwargs)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise ConfigurationError(f"Malformed URL '{full_url}': {e}") from e
        except httpx.TimeoutException as e:
            logger.warning(f"{method} {full_url} timed out: {e}")
            raise TransportError(f"The server did not respond in time ({method} {full_url})") from e
        except httpx.TransportError as e:
            logger.warning(f"{method} {full_url} failed: {e}")
            raise TransportError(f"Could not reach the server ({method} {full_url}): {e}") from e

        status = response.status_code
        if not 200 <= status < 300:
            error_body = response.text or ""
            logger.warning(f"{method} {full_url} returned {status}: {error_body[:200]}")
            raise ApiError(status, error_body)

        return ApiResponse(status_code=status, text=response.text)

    # ==========================================
    # Shortcuts
    # ==========================================

    def get(self, url: str, auth_token: Optional[str] = None) -> ApiResponse:
        return self.execute("GET", url, auth_token=auth_token)

    def delete(self, url: str, auth_token: Optional[str] = None) -> ApiResponse:
        return self.execute("DELETE", url, auth_token=auth_token)

    def send_json(
        self,
        method: str,
        url: str,
        payload: Any,
        auth_token: Optional[str] = None,
    ) -> ApiResponse:
        return self.execute(method, url, payload, ContentKind.JSON, auth_token)

    def send_multipart(
        self,
        method: str,
        url: str,
        body: MultipartBody,
        auth_token: Optional[str] = None,
    ) -> ApiResponse:
        return self.execute(method, url, body, ContentKind.MULTIPART, auth_token)


@lru_cache
def get_api_client() -> ApiClient:
    """Shared client built from settings."""
    settings = get_settings()
    return ApiClient(
        base_url=settings.api_base_url,
        connect_timeout=settings.connect_timeout,
        read_timeout=settings.read_timeout,
    )
