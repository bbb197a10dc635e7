"""
Shared fixtures: a fake HomeTail API behind httpx.MockTransport, and a plain
dict standing in for st.session_state.
"""

import json
from typing import Any, Callable, Optional, Union

import httpx
import pytest

from config.auth import Identity, SessionContext
from models import UserRecord
from services.adoption_service import AdoptionService
from services.animal_service import AnimalService
from services.api_client import ApiClient
from services.auth_service import AuthService
from services.catalog_service import CatalogService

BASE_URL = "http://api.test/api"

Reply = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class FakeApi:
    """
    Routes requests by (method, path) to queued replies and records them.

    Paths are given relative to the API base ("/animals/3"). A route can be
    added more than once; replies are served in order and the last one
    repeats.
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], list[Reply]] = {}
        self.served: dict[tuple[str, str], int] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
        reply: Optional[Reply] = None,
    ):
        if reply is None:
            if json_body is not None:
                reply = httpx.Response(status, json=json_body)
            else:
                reply = httpx.Response(status, text=text or "")
        self.routes.setdefault((method.upper(), f"/api{path}"), []).append(reply)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        key = (request.method, request.url.path)
        replies = self.routes.get(key)
        if not replies:
            return httpx.Response(404, text=f"no route for {request.method} {request.url.path}")
        count = self.served.get(key, 0)
        self.served[key] = count + 1
        reply = replies[min(count, len(replies) - 1)]
        if callable(reply):
            return reply(request)
        return httpx.Response(reply.status_code, headers=reply.headers, content=reply.content)

    def calls(self, method: Optional[str] = None, path: Optional[str] = None) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if (method is None or r.method == method)
            and (path is None or r.url.path == f"/api{path}")
        ]

    @staticmethod
    def json_of(request: httpx.Request) -> Any:
        return json.loads(request.content)


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def client(api) -> ApiClient:
    return ApiClient(BASE_URL, connect_timeout=2, read_timeout=5, transport=httpx.MockTransport(api))


@pytest.fixture
def state() -> dict:
    """Stands in for st.session_state."""
    return {}


@pytest.fixture
def session(client) -> SessionContext:
    return SessionContext(AuthService(client))


@pytest.fixture
def owner() -> UserRecord:
    return UserRecord(id=7, full_name="Olive Owner", email="olive@example.com", role="USER")


@pytest.fixture
def logged_in(session, owner) -> SessionContext:
    session.identity = Identity(token="token-7", user=owner)
    return session


@pytest.fixture
def animal_service(client) -> AnimalService:
    return AnimalService(client)


@pytest.fixture
def catalog_service(client) -> CatalogService:
    return CatalogService(client)


@pytest.fixture
def adoption_service(client) -> AdoptionService:
    return AdoptionService(client)
