"""Search-related models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SearchResult(BaseModel):
    """A single row of a search listing."""

    model_config = ConfigDict(frozen=True)

    title: str
    space_title: str = ""
    last_modified: str = ""
    page_id: str
