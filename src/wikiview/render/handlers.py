"""Tag overrides for page bodies: authenticated images and classified links."""

from __future__ import annotations

import base64
import binascii
from urllib.parse import unquote_to_bytes, urljoin

from bs4 import Tag

from wikiview.api.client import ConfluenceClient
from wikiview.errors import WikiviewError
from wikiview.logging import get_logger
from wikiview.models.links import Anchor, Internal
from wikiview.render.document import ImageBlock
from wikiview.render.links import EXTERNAL_GLYPH, INTERNAL_GLYPH, classify_link
from wikiview.render.renderer import RenderContext, TagHandler

logger = get_logger(__name__)

LINK_STYLE = "underline blue"
ANCHOR_STYLE = "dim"
IMAGE_STYLE = "magenta"


def decode_data_uri(src: str) -> bytes | None:
    """Return the bytes inlined in a `data:` URI, or None when it is malformed."""

    header, sep, payload = src.partition(",")
    if not sep:
        return None
    if header.endswith(";base64"):
        try:
            return base64.b64decode(payload, validate=False)
        except binascii.Error:
            return None
    return unquote_to_bytes(payload)


def _image_label(alt: str, width: str | None, height: str | None, available: bool) -> str:
    label = alt or "image"
    if width and height:
        label = f"{label} {width}×{height}"
    if not available:
        label = f"{label}, unavailable"
    return f"[{label}]"


def make_image_handler(client: ConfluenceClient) -> TagHandler:
    """Fetch `img` sources through the authenticated client instead of anonymously."""

    async def handle_image(tag: Tag, ctx: RenderContext) -> None:
        src = (tag.get("src") or "").strip()
        alt = (tag.get("alt") or "").strip()
        width = tag.get("width")
        height = tag.get("height")
        help_text = tag.get("title") or None

        data: bytes | None = None
        if src.startswith("data:"):
            data = decode_data_uri(src)
            if data is None:
                logger.warning("Ignoring malformed inline image %s", src[:40])
        elif src:
            url = urljoin(client.base_url + "/", src)
            try:
                data = await client.fetch_bytes(url)
            except WikiviewError as e:
                logger.warning("Failed to fetch image %s: %s", src, e)

        start, end = ctx.builder.write(_image_label(alt, width, height, data is not None), IMAGE_STYLE)
        ctx.builder.add_image(
            ImageBlock(
                start=start,
                end=end,
                data=data,
                alt=alt,
                width=width,
                height=height,
                help_text=help_text,
            )
        )

    return handle_image


async def handle_link(tag: Tag, ctx: RenderContext) -> None:
    """Render an `a` element and record its classification.

    In-page fragments and named anchors are rendered dimmed with no activation (an empty
    named anchor leaves no span). Other links keep default rendering plus an indicator glyph.
    """

    builder = ctx.builder
    classification = classify_link(tag.attrs)
    start = builder.position

    if isinstance(classification, Anchor):
        await ctx.render_children(tag)
        if builder.position > start:
            builder.add_style(start, builder.position, ANCHOR_STYLE)
            builder.add_link(start, builder.position, classification)
        return

    await ctx.render_default(tag)
    glyph = INTERNAL_GLYPH if isinstance(classification, Internal) else EXTERNAL_GLYPH
    builder.write(glyph, LINK_STYLE)
    builder.add_link(start, builder.position, classification)


def make_tag_overrides(client: ConfluenceClient) -> dict[str, TagHandler]:
    """Overrides for the two tag kinds pages need; everything else uses default rendering."""

    return {
        "img": make_image_handler(client),
        "a": handle_link,
    }
