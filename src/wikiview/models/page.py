"""Page models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Page(BaseModel):
    """A page fetched in its export view representation."""

    model_config = ConfigDict(frozen=True)

    page_id: str
    title: str
    html_body: str
    # Path relative to the site's wiki root, e.g. `/spaces/DOC/pages/42/Title`.
    browser_link: str = ""
