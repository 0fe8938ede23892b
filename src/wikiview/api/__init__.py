"""REST API access: request dispatch and response decoding."""

from __future__ import annotations

from wikiview.api.client import ConfluenceClient, build_query_string
from wikiview.api.pages import fetch_page, parse_page
from wikiview.api.search import build_cql, parse_search_results, search, sort_results
from wikiview.api.urls import page_id_from_url

__all__ = [
    "ConfluenceClient",
    "build_cql",
    "build_query_string",
    "fetch_page",
    "page_id_from_url",
    "parse_page",
    "parse_search_results",
    "search",
    "sort_results",
]
