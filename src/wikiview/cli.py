"""CLI entrypoints for wikiview."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wikiview.app import build_navigator
from wikiview.backends.bookmarks import JsonBookmarkStore
from wikiview.config import Settings, load_settings
from wikiview.errors import WikiviewError
from wikiview.interactive import Session
from wikiview.logging import configure_logging, get_logger
from wikiview.view import Navigator

app = typer.Typer(add_completion=False, help="Search and read wiki pages in the terminal")
logger = get_logger(__name__)
console = Console()


def _settings(host: str | None) -> Settings:
    settings = load_settings()
    if host:
        settings.host = host
    configure_logging(settings.log_level)
    return settings


def _run(settings: Settings, action: Callable[[Navigator, Session], Awaitable[None]]) -> None:
    try:
        navigator = build_navigator(settings)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    session = Session(navigator, console=console)
    try:
        asyncio.run(action(navigator, session))
    except WikiviewError as e:
        console.print(f"Error: {e}", style="red", markup=False)
        raise typer.Exit(code=1) from e


HostOption = typer.Option(None, "--host", help="Site host name (overrides WIKIVIEW_HOST)")


@app.command("search")
def search_cmd(
    terms: str = typer.Argument(..., help="Text to search for, or a CQL query with --raw"),
    raw: bool = typer.Option(False, "--raw", "-r", help="Treat TERMS as a CQL query"),
    host: str | None = HostOption,
) -> None:
    """Search pages and browse the results."""

    settings = _settings(host)

    async def action(navigator: Navigator, session: Session) -> None:
        results = await navigator.search(terms, raw)
        await session.browse_results(results, query=terms)

    _run(settings, action)


@app.command("page")
def page_cmd(
    page_id: str = typer.Argument(..., help="Page id"),
    host: str | None = HostOption,
) -> None:
    """Open a page by id."""

    settings = _settings(host)

    async def action(navigator: Navigator, session: Session) -> None:
        await session.browse_page(await navigator.open_page_by_id(page_id))

    _run(settings, action)


@app.command("url")
def url_cmd(
    url: str = typer.Argument(..., help="Page URL copied from the browser"),
    host: str | None = HostOption,
) -> None:
    """Open the page a browser URL points to."""

    settings = _settings(host)

    async def action(navigator: Navigator, session: Session) -> None:
        try:
            view = await navigator.open_page_from_url(url)
        except ValueError as e:
            raise WikiviewError(str(e)) from e
        await session.browse_page(view)

    _run(settings, action)


@app.command("bookmarks")
def bookmarks_cmd() -> None:
    """List saved bookmarks."""

    settings = _settings(None)
    records = JsonBookmarkStore(settings.bookmarks_file).entries()
    table = Table(header_style="bold")
    table.add_column("Title", style="bold")
    table.add_column("Location")
    table.add_column("Handler", style="dim")
    for record in records:
        table.add_row(escape(record.title), record.location, record.handler)
    console.print(table)


@app.command("jump")
def jump_cmd(
    title: str = typer.Argument(..., help="Bookmark title"),
    host: str | None = HostOption,
) -> None:
    """Open a bookmarked page."""

    settings = _settings(host)

    async def action(navigator: Navigator, session: Session) -> None:
        await session.browse_page(await navigator.open_bookmark(title))

    _run(settings, action)


if __name__ == "__main__":
    app()
