"""Page id extraction from browser URLs."""

from __future__ import annotations

# Position of the id in the non-empty `/`-separated parts of
# https://<host>/wiki/spaces/<KEY>/pages/<id>/<Title>
PAGE_ID_SEGMENT = 6


def page_id_from_url(url: str) -> str:
    """Return the page id from a URL copied out of a browser address bar.

    The id is taken by position, so this only works for the
    `https://<host>/wiki/spaces/<KEY>/pages/<id>/...` shape. Other shapes (e.g. `/x/` short links,
    `display/` URLs or `?pageId=` query links) yield the wrong segment.

    Raises:
        ValueError: The URL has too few segments.
    """

    segments = [s for s in url.strip().split("/") if s]
    if len(segments) <= PAGE_ID_SEGMENT:
        raise ValueError(f"cannot find a page id in {url!r}")
    return segments[PAGE_ID_SEGMENT]
