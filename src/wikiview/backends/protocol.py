"""Protocol definitions for the host-provided facilities.

The core never reaches for a credential file, a bookmark file or a web browser directly; it is
handed implementations of these interfaces.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from wikiview.models.bookmark import Bookmark


@dataclass(frozen=True)
class Credential:
    """Username and secret for HTTP Basic authentication."""

    username: str
    secret: str

    def __repr__(self) -> str:
        return f"Credential(username={self.username!r}, secret='***')"


class CredentialStore(ABC):
    """Looks up credentials per host."""

    @abstractmethod
    def lookup(self, host: str) -> Credential | None:
        """Return the credential for `host`, or None when nothing is stored."""


class BookmarkStore(ABC):
    """Persists bookmark records built by page views."""

    @abstractmethod
    def save(self, record: Bookmark) -> None:
        """Store `record`, replacing any bookmark with the same title."""

    @abstractmethod
    def entries(self) -> list[Bookmark]:
        """Return all stored bookmarks."""

    @abstractmethod
    def get(self, title: str) -> Bookmark | None:
        """Return the bookmark named `title`."""


class UrlOpener(ABC):
    """Opens URLs outside the application."""

    @abstractmethod
    def open(self, url: str) -> None:  # noqa: A003
        """Open `url`."""
