import math

import httpx
import pytest

from models import AnimalRecord, CategoryRecord
from services.api_client import (
    ApiClient,
    ContentKind,
    FilePart,
    MultipartBody,
    decode_list,
    decode_record,
    encode_query,
    with_query,
)
from services.errors import (
    ApiError,
    ConfigurationError,
    ResponseFormatError,
    TransportError,
)
from tests.conftest import BASE_URL


def _boundary(request: httpx.Request) -> str:
    content_type = request.headers["Content-Type"]
    assert content_type.startswith("multipart/form-data")
    return content_type.split("boundary=")[1]


# ==========================================
# Construction
# ==========================================

def test_timeouts_are_applied():
    client = ApiClient(BASE_URL, connect_timeout=12, read_timeout=30)
    assert client.timeout.connect == 12
    assert client.timeout.read == 30
    assert client.timeout.write == 30
    assert client.timeout.pool == 30


@pytest.mark.parametrize("bad", [0, -1, math.inf, math.nan, "soon", None])
def test_invalid_timeout_is_rejected(bad):
    with pytest.raises(ConfigurationError):
        ApiClient(BASE_URL, connect_timeout=bad, read_timeout=30)


@pytest.mark.parametrize("bad", ["", "localhost:9090/api", "ftp://host/api", "http://"])
def test_invalid_base_url_is_rejected(bad):
    with pytest.raises(ConfigurationError):
        ApiClient(bad, connect_timeout=1, read_timeout=1)


def test_relative_url_is_joined_to_base(api, client):
    api.add("GET", "/animals/3", json_body={"id": 3})
    client.get("animals/3")
    client.get("/animals/3")
    assert [str(r.url) for r in api.requests] == [f"{BASE_URL}/animals/3"] * 2


def test_empty_url_is_configuration_error(api, client):
    with pytest.raises(ConfigurationError):
        client.get("  ")
    assert api.requests == []


# ==========================================
# Headers
# ==========================================

def test_bearer_token_is_sent_when_present(api, client):
    api.add("GET", "/adoption-requests/my-requests", json_body=[])
    client.get("/adoption-requests/my-requests", auth_token=" abc123 ")
    request = api.requests[0]
    assert request.headers["Authorization"] == "Bearer abc123"
    assert request.headers["Accept"] == "application/json"


@pytest.mark.parametrize("token", [None, "", "   "])
def test_blank_token_sends_no_authorization(api, client, token):
    api.add("GET", "/animals", json_body=[])
    client.get("/animals", auth_token=token)
    assert "Authorization" not in api.requests[0].headers


def test_json_body(api, client):
    api.add("POST", "/auth/login", json_body={"token": "t"})
    client.send_json("POST", "/auth/login", {"email": "a@b.c", "password": "pw"})
    request = api.requests[0]
    assert request.headers["Content-Type"] == "application/json; charset=UTF-8"
    assert api.json_of(request) == {"email": "a@b.c", "password": "pw"}


def test_body_without_content_kind_is_rejected(api, client):
    with pytest.raises(ConfigurationError):
        client.execute("POST", "/animals", body={"name": "Rex"}, content_kind=ContentKind.NONE)
    assert api.requests == []


# ==========================================
# Multipart
# ==========================================

def test_multipart_with_file(api, client):
    api.add("POST", "/animals", status=201, json_body={"id": 1})
    body = MultipartBody(
        json_part_name="animal",
        json_text='{"name":"Rex"}',
        file=FilePart(filename="rex.png", content=b"\x89PNG-data", content_type="image/png"),
    )
    client.send_multipart("POST", "/animals", body, "tok")

    request = api.requests[0]
    boundary = _boundary(request)
    content = request.content
    assert b'name="animal"' in content
    assert b"Content-Type: application/json" in content
    assert b'{"name":"Rex"}' in content
    assert b'name="image"; filename="rex.png"' in content
    assert b"Content-Type: image/png" in content
    assert b"\x89PNG-data" in content
    assert content.rstrip().endswith(f"--{boundary}--".encode())


def test_multipart_without_file_has_only_json_part(api, client):
    api.add("PUT", "/animals/4", json_body={"id": 4})
    client.send_multipart("PUT", "/animals/4", MultipartBody("animal", '{"id":4}'), "tok")
    content = api.requests[0].content
    assert b'name="animal"' in content
    assert b'name="image"' not in content


def test_multipart_skips_empty_file(api, client):
    api.add("POST", "/animals", json_body={})
    body = MultipartBody("animal", "{}", file=FilePart(filename="empty.png", content=b""))
    client.send_multipart("POST", "/animals", body, "tok")
    assert b'name="image"' not in api.requests[0].content


def test_multipart_file_defaults():
    parts = MultipartBody("animal", "{}", file=FilePart(filename=None, content=b"x")).to_files()
    assert parts[1] == ("image", ("upload.bin", b"x", "application/octet-stream"))


def test_multipart_boundary_differs_per_request(api, client):
    api.add("POST", "/animals", json_body={})
    body = MultipartBody("animal", "{}")
    client.send_multipart("POST", "/animals", body, "tok")
    client.send_multipart("POST", "/animals", body, "tok")
    first, second = (_boundary(r) for r in api.requests)
    assert first != second


# ==========================================
# Error mapping
# ==========================================

def test_non_2xx_raises_api_error_with_body(api, client):
    api.add("POST", "/animals", status=409, text="Duplicate animal")
    with pytest.raises(ApiError) as exc_info:
        client.send_json("POST", "/animals", {}, "tok")
    assert exc_info.value.status == 409
    assert exc_info.value.body == "Duplicate animal"
    assert exc_info.value.is_client_error
    assert str(exc_info.value) == "HTTP 409: Duplicate animal"


def test_error_without_body_has_empty_body(api, client):
    api.add("DELETE", "/animals/1", status=503)
    with pytest.raises(ApiError) as exc_info:
        client.delete("/animals/1", "tok")
    assert exc_info.value.body == ""
    assert exc_info.value.is_server_error


def test_2xx_statuses_are_success(api, client):
    api.add("POST", "/adoption-requests", status=201, text="")
    api.add("DELETE", "/adoption-requests/1", status=204)
    assert client.send_json("POST", "/adoption-requests", {}, "tok").status_code == 201
    assert client.delete("/adoption-requests/1", "tok").status_code == 204


def test_timeout_is_transport_error(api, client):
    def slow(request):
        raise httpx.ReadTimeout("timed out", request=request)

    api.add("GET", "/animals", reply=slow)
    with pytest.raises(TransportError):
        client.get("/animals")


def test_connection_refused_is_transport_error(api, client):
    def refused(request):
        raise httpx.ConnectError("connection refused", request=request)

    api.add("GET", "/animals", reply=refused)
    with pytest.raises(TransportError):
        client.get("/animals")


# ==========================================
# Query strings and decoding
# ==========================================

def test_encode_query_uses_percent_20_for_spaces():
    assert encode_query([("q", "golden retriever"), ("categoryId", "3")]) == "q=golden%20retriever&categoryId=3"


def test_encode_query_escapes_reserved_characters():
    assert encode_query([("q", "a&b=c/d")]) == "q=a%26b%3Dc%2Fd"


def test_with_query_without_params_is_the_path():
    assert with_query("/animals", []) == "/animals"


def test_decode_list_accepts_array_and_page_object():
    assert [a.name for a in decode_list('[{"name": "Rex"}]', AnimalRecord)] == ["Rex"]
    page = '{"content": [{"name": "Tom"}, {"name": "Kit"}], "totalElements": 2}'
    assert [a.name for a in decode_list(page, AnimalRecord)] == ["Tom", "Kit"]
    assert decode_list("", AnimalRecord) == []


@pytest.mark.parametrize("body", ["not json", '{"name": "x"}', '[{"id": "seven"}]'])
def test_decode_list_rejects_malformed_bodies(body):
    with pytest.raises(ResponseFormatError):
        decode_list(body, CategoryRecord)


def test_decode_record_rejects_arrays():
    with pytest.raises(ResponseFormatError):
        decode_record("[]", AnimalRecord)
