"""Shared fixtures: settings, fake host facilities and a scripted HTTP transport."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from wikiview.app import build_navigator
from wikiview.backends.bookmarks import JsonBookmarkStore
from wikiview.backends.protocol import Credential, CredentialStore, UrlOpener
from wikiview.config import Settings
from wikiview.view import Navigator

HOST = "example.atlassian.net"


class FakeCredentialStore(CredentialStore):
    def __init__(self, credentials: dict[str, Credential] | None = None) -> None:
        self.credentials = credentials if credentials is not None else {HOST: Credential("me@example.com", "s3cret")}
        self.lookups: list[str] = []

    def lookup(self, host: str) -> Credential | None:
        self.lookups.append(host)
        return self.credentials.get(host)


class RecordingOpener(UrlOpener):
    def __init__(self) -> None:
        self.opened: list[str] = []

    def open(self, url: str) -> None:  # noqa: A003
        self.opened.append(url)


class FakeApi:
    """Route requests by raw path (including the query string) to canned responses."""

    def __init__(self) -> None:
        self.routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def json(self, raw_path: str, payload: object, status_code: int = 200) -> None:
        body = json.dumps(payload).encode("utf-8")
        self.routes[raw_path] = lambda request: httpx.Response(
            status_code, content=body, headers={"content-type": "application/json"}
        )

    def content(self, raw_path: str, data: bytes, status_code: int = 200) -> None:
        self.routes[raw_path] = lambda request: httpx.Response(status_code, content=data)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.raw_path.decode("ascii"))
        if route is None:
            return httpx.Response(404, content=b"not found")
        return route(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(host=HOST, bookmarks_file=tmp_path / "bookmarks.json", log_level="WARNING")


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def credentials() -> FakeCredentialStore:
    return FakeCredentialStore()


@pytest.fixture
def opener() -> RecordingOpener:
    return RecordingOpener()


@pytest.fixture
def navigator(
    settings: Settings,
    api: FakeApi,
    credentials: FakeCredentialStore,
    opener: RecordingOpener,
) -> Navigator:
    return build_navigator(
        settings,
        credentials=credentials,
        bookmarks=JsonBookmarkStore(settings.bookmarks_file),
        opener=opener,
        transport=api.transport(),
    )


def page_payload(page_id: str, title: str, html: str, webui: str | None = None) -> dict:
    return {
        "id": page_id,
        "title": title,
        "body": {"export_view": {"value": html, "representation": "export_view"}},
        "_links": {"webui": webui or f"/spaces/DOC/pages/{page_id}/{title.replace(' ', '+')}"},
    }


def page_route(page_id: str) -> str:
    return f"/wiki/api/v2/pages/{page_id}?body-format=export_view"
