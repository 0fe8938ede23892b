"""Rendered document model.

A :class:`Document` is plain text plus ranges over it: link spans, style spans and image blocks.
Positions ("points") are character offsets into :attr:`Document.text`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from rich.text import Text

from wikiview.models.links import Anchor, LinkClassification

_WS_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class LinkSpan:
    """A link occupying `[start, end)` of the document text."""

    start: int
    end: int
    classification: LinkClassification

    @property
    def activatable(self) -> bool:
        return not isinstance(self.classification, Anchor)

    def contains(self, point: int) -> bool:
        return self.start <= point < self.end


@dataclass(frozen=True)
class StyleSpan:
    start: int
    end: int
    style: str


@dataclass(frozen=True)
class ImageBlock:
    """An image fetched for display, shown in the text as a placeholder."""

    start: int
    end: int
    data: bytes | None
    alt: str = ""
    width: str | None = None
    height: str | None = None
    help_text: str | None = None


@dataclass
class Document:
    text: str = ""
    links: list[LinkSpan] = field(default_factory=list)
    styles: list[StyleSpan] = field(default_factory=list)
    images: list[ImageBlock] = field(default_factory=list)

    def link_at(self, point: int) -> LinkSpan | None:
        for span in self.links:
            if span.contains(point):
                return span
        return None

    def next_link(self, point: int) -> LinkSpan | None:
        """First activatable link starting after `point`, wrapping around."""

        candidates = [s for s in self.links if s.activatable]
        for span in candidates:
            if span.start > point:
                return span
        return candidates[0] if candidates else None

    def previous_link(self, point: int) -> LinkSpan | None:
        """Last activatable link starting before `point`, wrapping around."""

        candidates = [s for s in self.links if s.activatable]
        for span in reversed(candidates):
            if span.start < point and not span.contains(point):
                return span
        return candidates[-1] if candidates else None

    def to_rich(self, *, highlight: LinkSpan | None = None) -> Text:
        """Build a styled `rich` text, optionally highlighting the link at point."""

        rendered = Text(self.text)
        for span in self.styles:
            rendered.stylize(span.style, span.start, span.end)
        if highlight is not None:
            rendered.stylize("reverse", highlight.start, highlight.end)
        return rendered


class DocumentBuilder:
    """Accumulate text and ranges while walking an HTML tree."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0
        self._links: list[LinkSpan] = []
        self._styles: list[StyleSpan] = []
        self._images: list[ImageBlock] = []
        self._preformatted = 0

    @property
    def position(self) -> int:
        return self._length

    def _last_char(self) -> str:
        for part in reversed(self._parts):
            if part:
                return part[-1]
        return ""

    def write(self, text: str, style: str | None = None) -> tuple[int, int]:
        """Append `text` and return its range.

        Outside preformatted blocks whitespace runs collapse to one space and no space is written
        at the start of a line.
        """

        if not self._preformatted:
            text = _WS_RE.sub(" ", text)
            if text.startswith(" ") and self._last_char() in ("", " ", "\n"):
                text = text[1:]
        start = self._length
        if text:
            self._parts.append(text)
            self._length += len(text)
        if style and self._length > start:
            self._styles.append(StyleSpan(start, self._length, style))
        return start, self._length

    def line_break(self) -> None:
        self._parts.append("\n")
        self._length += 1

    def block_break(self) -> None:
        """End the current block with a blank line (collapsing repeated breaks)."""

        tail = "".join(self._parts[-2:])
        if not tail:
            return
        if tail.endswith("\n\n"):
            return
        if tail.endswith("\n"):
            self.line_break()
            return
        self.line_break()
        self.line_break()

    def ensure_newline(self) -> None:
        last = self._last_char()
        if last and last != "\n":
            self.line_break()

    def begin_preformatted(self) -> None:
        self._preformatted += 1

    def end_preformatted(self) -> None:
        self._preformatted = max(0, self._preformatted - 1)

    def add_style(self, start: int, end: int, style: str) -> None:
        if end > start:
            self._styles.append(StyleSpan(start, end, style))

    def add_link(self, start: int, end: int, classification: LinkClassification) -> LinkSpan:
        span = LinkSpan(start, end, classification)
        self._links.append(span)
        return span

    def add_image(self, block: ImageBlock) -> None:
        self._images.append(block)

    def build(self) -> Document:
        text = "".join(self._parts).rstrip("\n ")
        cut = len(text)
        return Document(
            text=text,
            links=[s for s in self._links if s.start < cut],
            styles=[StyleSpan(s.start, min(s.end, cut), s.style) for s in self._styles if s.start < cut],
            images=[i for i in self._images if i.start < cut],
        )
