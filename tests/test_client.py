"""Tests for the authenticated request dispatcher."""

from __future__ import annotations

import asyncio
import base64

import httpx
import pytest

from conftest import HOST, FakeApi, FakeCredentialStore
from wikiview.api.client import ConfluenceClient
from wikiview.config import Settings
from wikiview.errors import ApiError, AuthError


def _client(settings: Settings, api: FakeApi, credentials: FakeCredentialStore) -> ConfluenceClient:
    return ConfluenceClient(settings, credentials, transport=api.transport())


def test_request_adds_basic_auth_and_query(settings: Settings, api: FakeApi, credentials: FakeCredentialStore) -> None:
    api.json("/wiki/rest/api/thing?a=1%202&b=x", {"ok": True})
    client = _client(settings, api, credentials)

    response = asyncio.run(client.request("/wiki/rest/api/thing", params=[("a", "1 2"), ("b", "x")]))

    assert response.status_code == 200
    request = api.requests[0]
    assert request.method == "GET"
    assert request.url.host == HOST
    expected = base64.b64encode(b"me@example.com:s3cret").decode("ascii")
    assert request.headers["Authorization"] == f"Basic {expected}"
    assert credentials.lookups == [HOST]


def test_missing_credential_raises_auth_error(settings: Settings, api: FakeApi) -> None:
    client = _client(settings, api, FakeCredentialStore(credentials={}))

    with pytest.raises(AuthError):
        asyncio.run(client.request("/wiki/rest/api/thing"))
    assert api.requests == []


@pytest.mark.parametrize("status_code", [401, 403, 404, 500])
def test_non_200_raises_api_error(settings: Settings, api: FakeApi, credentials: FakeCredentialStore, status_code: int) -> None:
    api.json("/wiki/rest/api/thing", {"message": "nope"}, status_code=status_code)
    client = _client(settings, api, credentials)

    with pytest.raises(ApiError) as excinfo:
        asyncio.run(client.request("/wiki/rest/api/thing"))
    assert excinfo.value.status_code == status_code


def test_other_2xx_is_still_an_error(settings: Settings, api: FakeApi, credentials: FakeCredentialStore) -> None:
    api.json("/wiki/rest/api/thing", {}, status_code=204)
    client = _client(settings, api, credentials)

    with pytest.raises(ApiError):
        asyncio.run(client.request("/wiki/rest/api/thing"))


def test_callback_receives_response(settings: Settings, api: FakeApi, credentials: FakeCredentialStore) -> None:
    api.json("/wiki/rest/api/thing", {"value": 7})
    client = _client(settings, api, credentials)

    result = asyncio.run(client.request("/wiki/rest/api/thing", callback=lambda r: r.json()["value"]))
    assert result == 7


def test_async_callback_is_awaited(settings: Settings, api: FakeApi, credentials: FakeCredentialStore) -> None:
    api.json("/wiki/rest/api/thing", {"value": 7})
    client = _client(settings, api, credentials)

    async def double(response: httpx.Response) -> int:
        return response.json()["value"] * 2

    assert asyncio.run(client.request("/wiki/rest/api/thing", callback=double)) == 14


def test_callback_not_called_on_error(settings: Settings, api: FakeApi, credentials: FakeCredentialStore) -> None:
    api.json("/wiki/rest/api/thing", {}, status_code=500)
    client = _client(settings, api, credentials)
    calls: list[httpx.Response] = []

    with pytest.raises(ApiError):
        asyncio.run(client.request("/wiki/rest/api/thing", callback=calls.append))
    assert calls == []


def test_method_headers_and_body_are_forwarded(settings: Settings, api: FakeApi, credentials: FakeCredentialStore) -> None:
    api.json("/wiki/rest/api/thing", {})
    client = _client(settings, api, credentials)

    asyncio.run(
        client.request("/wiki/rest/api/thing", method="POST", headers={"X-Test": "1"}, body=b"payload")
    )

    request = api.requests[0]
    assert request.method == "POST"
    assert request.headers["X-Test"] == "1"
    assert request.content == b"payload"


def test_fetch_bytes_from_foreign_host_sends_no_credentials(settings: Settings, credentials: FakeCredentialStore) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b"\x89PNG")

    client = ConfluenceClient(settings, credentials, transport=httpx.MockTransport(handler))
    data = asyncio.run(client.fetch_bytes("https://cdn.example.org/logo.png"))

    assert data == b"\x89PNG"
    assert "Authorization" not in seen[0].headers
    assert credentials.lookups == []


def test_get_json_rejects_non_json(settings: Settings, api: FakeApi, credentials: FakeCredentialStore) -> None:
    api.content("/wiki/rest/api/thing", b"<html>login</html>")
    client = _client(settings, api, credentials)

    with pytest.raises(ApiError):
        asyncio.run(client.get_json("/wiki/rest/api/thing"))


def test_transport_errors_become_api_errors(settings: Settings, credentials: FakeCredentialStore) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = ConfluenceClient(settings, credentials, transport=httpx.MockTransport(handler))

    with pytest.raises(ApiError) as excinfo:
        asyncio.run(client.request("/wiki/rest/api/thing"))
    assert excinfo.value.status_code is None
