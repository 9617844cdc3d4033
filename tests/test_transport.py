"""Tests for HttpTransport using httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from mixcore_sdk.exceptions import ApiError, AuthenticationError, TransportError
from mixcore_sdk.ports import ITransport
from mixcore_sdk.transport import HttpTransport

BASE_URL = "https://mixcore.test/api/v2"


def test_satisfies_transport_protocol(http):
    assert isinstance(http, ITransport)


# -- decoding -----------------------------------------------------------------


@pytest.mark.asyncio
async def test_get_decodes_json(http, backend):
    backend.on("GET", "/rest/x", json_body={"a": 1})
    assert await http.get("/rest/x") == {"a": 1}
    assert backend.last.url.path == "/api/v2/rest/x"


@pytest.mark.asyncio
async def test_empty_body_is_none(http, backend):
    backend.on("DELETE", "/rest/x/1")
    assert await http.delete("/rest/x/1") is None


@pytest.mark.asyncio
async def test_text_body_returned_as_text(http, backend):
    backend.on("POST", "/rest/upload", text="content/uploads/a.png")
    assert await http.post("/rest/upload", {}) == "content/uploads/a.png"


@pytest.mark.asyncio
async def test_post_sends_json(http, backend):
    backend.on("POST", "/rest/x", json_body={})
    await http.post("/rest/x", {"pageSize": 10})
    assert backend.last_json() == {"pageSize": 10}
    assert backend.last.headers["content-type"] == "application/json"


@pytest.mark.asyncio
async def test_query_params(http, backend):
    backend.on("DELETE", "/rest/file")
    await http.delete("/rest/file", params={"fullPath": "a/b.txt"})
    assert backend.last.url.params["fullPath"] == "a/b.txt"


@pytest.mark.asyncio
async def test_multipart_post(http, backend):
    backend.on("POST", "/rest/upload", json_body={"fileName": "a"})
    await http.post(
        "/rest/upload",
        files={"file": ("a.txt", b"hello", "text/plain")},
        data={"folder": "docs"},
    )
    assert backend.last.headers["content-type"].startswith("multipart/form-data")
    assert b"hello" in backend.last.content
    assert b'name="folder"' in backend.last.content


# -- error mapping ------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [401, 403])
async def test_auth_statuses_raise_authentication_error(http, backend, status):
    backend.on("GET", "/rest/me", status=status, json_body={"message": "nope"})
    with pytest.raises(AuthenticationError) as exc_info:
        await http.get("/rest/me")
    assert exc_info.value.status_code == status
    assert exc_info.value.message == "nope"


@pytest.mark.asyncio
async def test_error_code_from_body(http, backend):
    backend.on("POST", "/rest/x", status=400, json_body={"code": "invalid_column"})
    with pytest.raises(ApiError) as exc_info:
        await http.post("/rest/x", {})
    assert exc_info.value.status_code == 400
    assert exc_info.value.code == "invalid_column"


@pytest.mark.asyncio
async def test_error_without_body_uses_default_code(http, backend):
    backend.on("GET", "/rest/x", status=500)
    with pytest.raises(ApiError) as exc_info:
        await http.get("/rest/x")
    assert exc_info.value.code == "default"
    assert not isinstance(exc_info.value, AuthenticationError)


@pytest.mark.asyncio
async def test_connect_error_becomes_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    async with HttpTransport(
        BASE_URL, transport=httpx.MockTransport(handler)
    ) as http:
        with pytest.raises(TransportError, match="failed"):
            await http.get("/rest/x")


@pytest.mark.asyncio
async def test_timeout_becomes_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    async with HttpTransport(
        BASE_URL, transport=httpx.MockTransport(handler)
    ) as http:
        with pytest.raises(TransportError, match="timed out"):
            await http.get("/rest/x")


# -- headers ------------------------------------------------------------------


@pytest.mark.asyncio
async def test_set_auth_token_adds_and_removes_header(http, backend):
    backend.on("GET", "/rest/x", json_body={})

    http.set_auth_token("abc")
    assert http.headers["Authorization"] == "Bearer abc"
    await http.get("/rest/x")
    assert backend.last.headers["authorization"] == "Bearer abc"

    http.set_auth_token(None)
    await http.get("/rest/x")
    assert "authorization" not in backend.last.headers


@pytest.mark.asyncio
async def test_default_headers_are_sent(backend):
    http = HttpTransport(
        BASE_URL,
        headers={"x-sdk-name": "Python"},
        transport=httpx.MockTransport(backend.handler),
    )
    backend.on("GET", "/rest/x", json_body={})
    await http.get("/rest/x")
    assert backend.last.headers["x-sdk-name"] == "Python"
    await http.aclose()


def test_set_base_url(http):
    http.set_base_url("https://other.test/api")
    assert http.base_url.startswith("https://other.test/api")
