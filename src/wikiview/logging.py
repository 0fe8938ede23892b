"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.logging import RichHandler


_page_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("wikiview_page_id", default="-")


class _ContextFilter(logging.Filter):
    """Inject the page being handled into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.page_id = _page_id_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def page_context(page_id: str) -> Any:
    """Temporarily bind the current page id for log records.

    Args:
        page_id: Page identifier.
    """

    token = _page_id_var.set(page_id)
    try:
        yield
    finally:
        _page_id_var.reset(token)


def configure_logging(level: str = "WARNING") -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
    """

    handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
    handler.addFilter(_ContextFilter())
    handler.setFormatter(logging.Formatter("page=%(page_id)s %(name)s: %(message)s"))

    root = logging.getLogger()
    root.setLevel(level.upper())
    for h in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(h)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)
