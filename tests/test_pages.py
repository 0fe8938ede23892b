"""Tests for page fetching and decoding."""

from __future__ import annotations

import asyncio

import pytest

from conftest import FakeApi, page_payload, page_route
from wikiview.api.pages import fetch_page, parse_page
from wikiview.errors import ApiError
from wikiview.models.page import Page
from wikiview.view import Navigator


def test_parse_page() -> None:
    payload = page_payload("42", "Release Notes", "<p>Hello</p>", webui="/spaces/DOC/pages/42/Release+Notes")

    assert parse_page(payload) == Page(
        page_id="42",
        title="Release Notes",
        html_body="<p>Hello</p>",
        browser_link="/spaces/DOC/pages/42/Release+Notes",
    )


def test_parse_page_without_body() -> None:
    page = parse_page({"id": 7, "title": "Empty"})

    assert page.page_id == "7"
    assert page.html_body == ""
    assert page.browser_link == ""


def test_parse_page_requires_id() -> None:
    with pytest.raises(ApiError):
        parse_page({"title": "No id"})


def test_fetch_page_requests_export_view(navigator: Navigator, api: FakeApi) -> None:
    api.json(page_route("42"), page_payload("42", "Release Notes", "<p>Hello</p>"))

    page = asyncio.run(fetch_page(navigator.client, "42"))

    assert page.title == "Release Notes"
    assert api.requests[0].url.raw_path.decode("ascii") == page_route("42")
