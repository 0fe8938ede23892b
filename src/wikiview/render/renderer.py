"""HTML to :class:`Document` rendering with per-tag overrides."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Mapping

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from wikiview.logging import get_logger
from wikiview.render.document import Document, DocumentBuilder

logger = get_logger(__name__)

TagHandler = Callable[[Tag, "RenderContext"], Awaitable[None] | None]

_SKIP_TAGS = {"script", "style", "head", "noscript", "template"}
_BLOCK_TAGS = {
    "p", "div", "section", "article", "header", "footer", "main", "aside", "nav",
    "ul", "ol", "dl", "table", "blockquote", "figure", "form", "details",
}
_HEADING_STYLES = {
    "h1": "bold underline",
    "h2": "bold underline",
    "h3": "bold",
    "h4": "bold",
    "h5": "bold italic",
    "h6": "italic",
}
_INLINE_STYLES = {
    "b": "bold",
    "strong": "bold",
    "i": "italic",
    "em": "italic",
    "u": "underline",
    "s": "strike",
    "del": "strike",
    "code": "bold cyan",
    "kbd": "bold cyan",
    "mark": "reverse",
    "a": "underline blue",
}


class RenderContext:
    """Handed to tag handlers so they can write output and fall back to default handling."""

    def __init__(self, renderer: "SoupRenderer", builder: DocumentBuilder, overrides: Mapping[str, TagHandler]) -> None:
        self.renderer = renderer
        self.builder = builder
        self._overrides = overrides

    async def render_node(self, node: object) -> None:
        if isinstance(node, PreformattedString):
            return
        if isinstance(node, NavigableString):
            self.builder.write(str(node))
            return
        if not isinstance(node, Tag):
            return

        handler = self._overrides.get(node.name)
        if handler is not None:
            result = handler(node, self)
            if inspect.isawaitable(result):
                await result
            return
        await self.render_default(node)

    async def render_children(self, tag: Tag) -> None:
        for child in list(tag.children):
            await self.render_node(child)

    async def render_default(self, tag: Tag) -> None:
        """Render `tag` the way the renderer does without overrides."""

        await self.renderer.render_default(tag, self)


class HtmlRenderer(ABC):
    """Turns an HTML fragment into a displayable document."""

    @abstractmethod
    async def render(self, html: str, tag_overrides: Mapping[str, TagHandler] | None = None) -> Document:
        """Render `html`, dispatching tags named in `tag_overrides` to their handlers."""


class SoupRenderer(HtmlRenderer):
    """Renderer built on BeautifulSoup with the lxml parser."""

    def __init__(self, parser: str = "lxml") -> None:
        self._parser = parser

    async def render(self, html: str, tag_overrides: Mapping[str, TagHandler] | None = None) -> Document:
        soup = BeautifulSoup(html or "", self._parser)
        root = soup.body or soup
        builder = DocumentBuilder()
        ctx = RenderContext(self, builder, dict(tag_overrides or {}))
        await ctx.render_children(root)
        return builder.build()

    async def render_default(self, tag: Tag, ctx: RenderContext) -> None:
        name = tag.name
        builder = ctx.builder

        if name in _SKIP_TAGS:
            return
        if name == "br":
            builder.line_break()
            return
        if name == "hr":
            builder.block_break()
            builder.write("─" * 40, "dim")
            builder.block_break()
            return
        if name == "img":
            alt = tag.get("alt") or "image"
            builder.write(f"[{alt}]", "magenta")
            return
        if name in _HEADING_STYLES:
            builder.block_break()
            start = builder.position
            await ctx.render_children(tag)
            builder.add_style(start, builder.position, _HEADING_STYLES[name])
            builder.block_break()
            return
        if name == "pre":
            builder.block_break()
            builder.begin_preformatted()
            start = builder.position
            try:
                await ctx.render_children(tag)
            finally:
                builder.end_preformatted()
            builder.add_style(start, builder.position, "cyan")
            builder.block_break()
            return
        if name == "li":
            builder.ensure_newline()
            parent = tag.parent
            if parent is not None and parent.name == "ol":
                siblings = parent.find_all("li", recursive=False)
                index = next(i for i, c in enumerate(siblings, start=1) if c is tag)
                builder.write(f"{index}. ")
            else:
                builder.write("• ")
            await ctx.render_children(tag)
            builder.ensure_newline()
            return
        if name == "tr":
            builder.ensure_newline()
            cells = tag.find_all(["td", "th"], recursive=False)
            for i, cell in enumerate(cells):
                if i:
                    builder.write(" │ ", "dim")
                start = builder.position
                await ctx.render_children(cell)
                if cell.name == "th":
                    builder.add_style(start, builder.position, "bold")
            builder.ensure_newline()
            return
        if name == "blockquote":
            builder.block_break()
            start = builder.position
            await ctx.render_children(tag)
            builder.add_style(start, builder.position, "italic dim")
            builder.block_break()
            return
        if name in _BLOCK_TAGS:
            builder.block_break()
            await ctx.render_children(tag)
            builder.block_break()
            return
        if name in _INLINE_STYLES:
            start = builder.position
            await ctx.render_children(tag)
            builder.add_style(start, builder.position, _INLINE_STYLES[name])
            return

        await ctx.render_children(tag)
