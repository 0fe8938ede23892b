"""CQL search."""

from __future__ import annotations

from typing import Any, Literal

from wikiview.api.client import ConfluenceClient
from wikiview.errors import ApiError
from wikiview.logging import get_logger
from wikiview.models.search import SearchResult

logger = get_logger(__name__)

SEARCH_PATH = "/wiki/rest/api/search"

SortKey = Literal["title", "space", "modified", "id"]

_SORT_FIELDS: dict[str, str] = {
    "title": "title",
    "space": "space_title",
    "modified": "last_modified",
    "id": "page_id",
}


def build_cql(terms: str, raw: bool = False) -> str:
    """Turn user input into a CQL query.

    In text mode the terms become `text ~ "<terms>"`; in raw mode they are passed through as CQL.
    """

    if raw:
        return terms
    return f'text ~ "{terms}"'


def parse_search_results(payload: Any) -> list[SearchResult]:
    """Decode a search response body into result rows.

    Rows without a content id cannot be opened and are skipped.
    """

    if not isinstance(payload, dict) or not isinstance(payload.get("results"), list):
        raise ApiError("search response is missing a results list")

    results: list[SearchResult] = []
    for item in payload["results"]:
        if not isinstance(item, dict):
            continue
        content = item.get("content") or {}
        page_id = content.get("id")
        if not page_id:
            continue
        container = item.get("resultGlobalContainer") or {}
        results.append(
            SearchResult(
                title=content.get("title") or item.get("title") or "",
                space_title=container.get("title") or "",
                last_modified=item.get("lastModified") or item.get("friendlyLastModified") or "",
                page_id=str(page_id),
            )
        )
    return results


def sort_results(results: list[SearchResult], key: SortKey = "title", *, reverse: bool = False) -> list[SearchResult]:
    """Return `results` ordered by one listing column."""

    field = _SORT_FIELDS[key]
    if field == "title" or field == "space_title":
        return sorted(results, key=lambda r: getattr(r, field).casefold(), reverse=reverse)
    return sorted(results, key=lambda r: getattr(r, field), reverse=reverse)


async def search(client: ConfluenceClient, terms: str, raw: bool = False, *, limit: int = 100) -> list[SearchResult]:
    """Run a search and return its rows.

    Args:
        client: Request dispatcher.
        terms: Free text, or CQL when `raw` is set.
        raw: Pass `terms` through unmodified.
        limit: Maximum number of results requested.
    """

    cql = build_cql(terms, raw)
    logger.info("Searching with cql=%s", cql)
    payload = await client.get_json(SEARCH_PATH, params=[("cql", cql), ("limit", str(limit))])
    results = parse_search_results(payload)
    logger.info("Search returned %d results", len(results))
    return results
