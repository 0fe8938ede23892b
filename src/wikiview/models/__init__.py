"""Pydantic models used across the project."""

from __future__ import annotations

from wikiview.models.bookmark import Bookmark
from wikiview.models.links import Anchor, External, Internal, LinkClassification
from wikiview.models.page import Page
from wikiview.models.search import SearchResult

__all__ = [
    "Anchor",
    "Bookmark",
    "External",
    "Internal",
    "LinkClassification",
    "Page",
    "SearchResult",
]
