"""URL opener backed by the system browser."""

from __future__ import annotations

import typer

from wikiview.backends.protocol import UrlOpener
from wikiview.logging import get_logger

logger = get_logger(__name__)


class BrowserUrlOpener(UrlOpener):
    """Hand URLs to the platform's default browser."""

    def open(self, url: str) -> None:  # noqa: A003
        logger.info("Opening %s in browser", url)
        typer.launch(url)
