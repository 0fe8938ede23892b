"""Host facilities: credentials, bookmarks and URL opening."""

from __future__ import annotations

from wikiview.backends.bookmarks import JsonBookmarkStore
from wikiview.backends.credentials import (
    ChainCredentialStore,
    NetrcCredentialStore,
    StaticCredentialStore,
)
from wikiview.backends.opener import BrowserUrlOpener
from wikiview.backends.protocol import BookmarkStore, Credential, CredentialStore, UrlOpener

__all__ = [
    "BookmarkStore",
    "BrowserUrlOpener",
    "ChainCredentialStore",
    "Credential",
    "CredentialStore",
    "JsonBookmarkStore",
    "NetrcCredentialStore",
    "StaticCredentialStore",
    "UrlOpener",
]
