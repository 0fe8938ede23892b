"""Page views and the actions available on them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from wikiview.api.client import ConfluenceClient
from wikiview.api.pages import fetch_page
from wikiview.api.search import search
from wikiview.api.urls import page_id_from_url
from wikiview.backends.protocol import BookmarkStore, UrlOpener
from wikiview.config import Settings
from wikiview.errors import NotALinkError, WikiviewError
from wikiview.logging import get_logger, page_context
from wikiview.models.bookmark import Bookmark
from wikiview.models.links import External, Internal
from wikiview.models.page import Page
from wikiview.models.search import SearchResult
from wikiview.render.document import Document, LinkSpan
from wikiview.render.handlers import make_tag_overrides
from wikiview.render.renderer import HtmlRenderer

logger = get_logger(__name__)


@dataclass(frozen=True)
class PageContext:
    """State owned by one rendered page view."""

    page_id: str
    browser_link: str
    bookmark: Callable[[], Bookmark]


class Navigator:
    """Entry actions: search, open a page by id or URL, jump to a bookmark."""

    def __init__(
        self,
        settings: Settings,
        client: ConfluenceClient,
        renderer: HtmlRenderer,
        bookmarks: BookmarkStore,
        opener: UrlOpener,
    ) -> None:
        self.settings = settings
        self.client = client
        self.renderer = renderer
        self.bookmarks = bookmarks
        self.opener = opener

    async def search(self, terms: str, raw: bool = False) -> list[SearchResult]:
        return await search(self.client, terms, raw, limit=self.settings.search_limit)

    async def open_page_by_id(self, page_id: str) -> "PageView":
        """Fetch and render a page. Nothing is built if the request fails."""

        with page_context(page_id):
            page = await fetch_page(self.client, page_id)
            document = await self.renderer.render(page.html_body, make_tag_overrides(self.client))
            logger.info("Rendered page %r with %d links", page.title, len(document.links))
        return PageView(self, page, document)

    async def open_page_from_url(self, url: str) -> "PageView":
        return await self.open_page_by_id(page_id_from_url(url))

    async def open_bookmark(self, title: str) -> "PageView":
        record = self.bookmarks.get(title)
        if record is None:
            raise WikiviewError(f"No bookmark named {title!r}")
        return await self.open_page_by_id(record.page_id)


class PageView:
    """One rendered page with a point (cursor offset) and its interactive actions."""

    def __init__(self, navigator: Navigator, page: Page, document: Document) -> None:
        self.navigator = navigator
        self.page = page
        self.document = document
        self.point = 0
        self.closed = False
        self.context = PageContext(
            page_id=page.page_id,
            browser_link=page.browser_link,
            bookmark=lambda: Bookmark.for_page(page.title, page.page_id),
        )

    @property
    def title(self) -> str:
        return self.page.title

    def link_text(self, span: LinkSpan) -> str:
        return self.document.text[span.start:span.end]

    def quit(self) -> None:  # noqa: A003
        self.closed = True

    def goto(self, point: int) -> None:
        self.point = max(0, min(point, len(self.document.text)))

    def next_link(self) -> LinkSpan | None:
        span = self.document.next_link(self.point)
        if span is not None:
            self.point = span.start
        return span

    def previous_link(self) -> LinkSpan | None:
        span = self.document.previous_link(self.point)
        if span is not None:
            self.point = span.start
        return span

    async def follow_link(self, point: int | None = None) -> "PageView | None":
        """Activate the link at `point` (default: the current point).

        Internal links open the target page and return its view. External links go to the URL
        opener and return None.

        Raises:
            NotALinkError: No activatable link at `point`.
        """

        at = self.point if point is None else point
        span = self.document.link_at(at)
        if span is None:
            raise NotALinkError(at)

        target = span.classification
        if isinstance(target, Internal):
            return await self.navigator.open_page_by_id(target.page_id)
        if isinstance(target, External):
            self.navigator.opener.open(target.url)
            return None
        raise NotALinkError(at)

    def set_bookmark(self) -> Bookmark:
        record = self.context.bookmark()
        self.navigator.bookmarks.save(record)
        return record

    def browser_url(self) -> str:
        if not self.context.browser_link:
            raise WikiviewError(f"Page {self.context.page_id} has no browser link")
        return self.navigator.settings.browser_url(self.context.browser_link)

    def open_in_browser(self) -> str:
        url = self.browser_url()
        self.navigator.opener.open(url)
        return url
