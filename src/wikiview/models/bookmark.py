"""Bookmark record handed to the bookmark store."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

BOOKMARK_HANDLER = "wikiview-page"


class Bookmark(BaseModel):
    """A saved pointer to a page.

    `handler` tags which opener a bookmark store should use to jump back.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    page_id: str
    location: str
    handler: str = BOOKMARK_HANDLER

    @classmethod
    def for_page(cls, title: str, page_id: str) -> "Bookmark":
        return cls(title=title, page_id=page_id, location=f"page {page_id}")
