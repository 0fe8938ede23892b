"""Link classification."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from wikiview.models.links import Anchor, External, Internal, LinkClassification

# Set on links authored as in-product page references.
RESOURCE_ID_ATTR = "data-linked-resource-id"

INTERNAL_GLYPH = "↪"
EXTERNAL_GLYPH = "↗"


def _attr(attrs: Mapping[str, Any], name: str) -> str:
    value = attrs.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return (value or "").strip()


def classify_link(attrs: Mapping[str, Any]) -> LinkClassification:
    """Classify a link element from its attributes.

    A fragment `href` is always an :class:`Anchor`, even when a resource id is present. So is an
    element without an `href` (a named anchor such as `<a name="setup">`).
    """

    href = _attr(attrs, "href")
    if not href or href.startswith("#"):
        return Anchor()
    resource_id = _attr(attrs, RESOURCE_ID_ATTR)
    if resource_id:
        return Internal(page_id=resource_id)
    return External(url=href)
