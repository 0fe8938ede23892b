"""Single page fetch."""

from __future__ import annotations

from typing import Any

from wikiview.api.client import ConfluenceClient
from wikiview.errors import ApiError
from wikiview.logging import get_logger
from wikiview.models.page import Page

logger = get_logger(__name__)

PAGES_PATH = "/wiki/api/v2/pages"


def page_path(page_id: str) -> str:
    return f"{PAGES_PATH}/{page_id}"


def parse_page(payload: Any) -> Page:
    """Decode a v2 page response requested with `body-format=export_view`."""

    if not isinstance(payload, dict) or not payload.get("id"):
        raise ApiError("page response is missing an id")

    body = payload.get("body") or {}
    export_view = body.get("export_view") or {}
    links = payload.get("_links") or {}
    return Page(
        page_id=str(payload["id"]),
        title=payload.get("title") or "",
        html_body=export_view.get("value") or "",
        browser_link=links.get("webui") or "",
    )


async def fetch_page(client: ConfluenceClient, page_id: str) -> Page:
    """Fetch a page with its HTML export view."""

    logger.info("Fetching page %s", page_id)
    payload = await client.get_json(page_path(page_id), params=[("body-format", "export_view")])
    return parse_page(payload)
