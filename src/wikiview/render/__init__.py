"""Page body rendering."""

from __future__ import annotations

from wikiview.render.document import Document, DocumentBuilder, ImageBlock, LinkSpan, StyleSpan
from wikiview.render.handlers import handle_link, make_image_handler, make_tag_overrides
from wikiview.render.links import RESOURCE_ID_ATTR, classify_link
from wikiview.render.renderer import HtmlRenderer, RenderContext, SoupRenderer, TagHandler

__all__ = [
    "Document",
    "DocumentBuilder",
    "HtmlRenderer",
    "ImageBlock",
    "LinkSpan",
    "RESOURCE_ID_ATTR",
    "RenderContext",
    "SoupRenderer",
    "StyleSpan",
    "TagHandler",
    "classify_link",
    "handle_link",
    "make_image_handler",
    "make_tag_overrides",
]
