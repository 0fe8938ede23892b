"""Terminal presentation and key-driven sessions for search listings and page views."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.rule import Rule
from rich.table import Table

from wikiview.api.search import SortKey, sort_results
from wikiview.errors import WikiviewError
from wikiview.logging import get_logger
from wikiview.models.links import External, Internal
from wikiview.models.search import SearchResult
from wikiview.render.document import LinkSpan
from wikiview.view import Navigator, PageView

logger = get_logger(__name__)

Ask = Callable[[str], str]

PAGE_KEYS = {
    "q": "quit",
    "f": "follow link at point",
    "n": "next link",
    "p": "previous link",
    "b": "set bookmark",
    "o": "open in browser",
    "r": "redraw",
    "?": "help",
}

SORT_KEYS: dict[str, SortKey] = {"t": "title", "s": "space", "m": "modified", "i": "id"}


def results_table(results: list[SearchResult], *, title: str | None = None) -> Table:
    table = Table(title=title, show_lines=False, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Space")
    table.add_column("Last modified", style="dim")
    table.add_column("Id", style="dim")
    for i, r in enumerate(results, start=1):
        table.add_row(str(i), escape(r.title), escape(r.space_title), r.last_modified, r.page_id)
    return table


def describe_link(view: PageView, span: LinkSpan) -> str:
    target = span.classification
    text = view.link_text(span).strip()
    if isinstance(target, Internal):
        return f"{text} → page {target.page_id}"
    if isinstance(target, External):
        return f"{text} → {target.url}"
    return text


class Session:
    """Drive listings and page views from single-key commands."""

    def __init__(self, navigator: Navigator, *, console: Console | None = None, ask: Ask | None = None) -> None:
        self.navigator = navigator
        self.console = console or Console()
        self._ask = ask or (lambda prompt: Prompt.ask(prompt, console=self.console, default=""))

    async def _read(self, prompt: str) -> str:
        return (await asyncio.to_thread(self._ask, prompt)).strip()

    def error(self, e: Exception) -> None:
        self.console.print(str(e), style="red", markup=False)

    def show_page(self, view: PageView) -> None:
        highlight = view.document.link_at(view.point)
        self.console.print(Rule(escape(view.title)))
        self.console.print(view.document.to_rich(highlight=highlight))
        self.console.print(Rule(style="dim"))

    async def browse_results(self, results: list[SearchResult], *, query: str = "") -> None:
        """List results sorted by title; a row number opens that page."""

        order: SortKey = "title"
        reverse = False
        rows = sort_results(results, order)
        while True:
            self.console.print(results_table(rows, title=f"Search: {query}" if query else None))
            if not rows:
                return
            answer = await self._read("row number, s<t|s|m|i> to sort, q to quit")
            if answer in ("q", ""):
                return
            if answer.startswith("s") and answer[1:] in SORT_KEYS:
                new_order = SORT_KEYS[answer[1:]]
                reverse = not reverse if new_order == order else False
                order = new_order
                rows = sort_results(rows, order, reverse=reverse)
                continue
            if not answer.isdigit() or not 1 <= int(answer) <= len(rows):
                self.console.print(f"[yellow]No row {escape(repr(answer))}[/yellow]")
                continue
            try:
                view = await self.navigator.open_page_by_id(rows[int(answer) - 1].page_id)
            except WikiviewError as e:
                self.error(e)
                continue
            await self.browse_page(view)

    async def browse_page(self, view: PageView) -> None:
        """Show `view` and handle page keys until every opened page is quit."""

        stack = [view]
        self.show_page(view)
        while stack:
            current = stack[-1]
            key = await self._read(f"[{current.title}] key (? for help)")
            try:
                if key == "q":
                    current.quit()
                    stack.pop()
                    if stack:
                        self.show_page(stack[-1])
                elif key in ("f", ""):
                    opened = await current.follow_link()
                    if opened is not None:
                        stack.append(opened)
                        self.show_page(opened)
                elif key in ("n", "p"):
                    span = current.next_link() if key == "n" else current.previous_link()
                    if span is None:
                        self.console.print("[yellow]No links on this page[/yellow]")
                    else:
                        self.console.print(describe_link(current, span), markup=False)
                elif key == "b":
                    record = current.set_bookmark()
                    self.console.print(f"Bookmarked [bold]{escape(record.title)}[/bold]")
                elif key == "o":
                    self.console.print(f"Opened {current.open_in_browser()}", markup=False)
                elif key == "r":
                    self.show_page(current)
                elif key == "?":
                    for k, desc in PAGE_KEYS.items():
                        self.console.print(f"  [bold]{k}[/bold]  {desc}")
                else:
                    self.console.print(f"[yellow]Unknown key {escape(repr(key))}[/yellow]")
            except WikiviewError as e:
                self.error(e)
