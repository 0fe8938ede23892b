"""Wiring of settings and host facilities into a :class:`Navigator`."""

from __future__ import annotations

import httpx

from wikiview.api.client import ConfluenceClient
from wikiview.backends.bookmarks import JsonBookmarkStore
from wikiview.backends.credentials import ChainCredentialStore, NetrcCredentialStore, StaticCredentialStore
from wikiview.backends.opener import BrowserUrlOpener
from wikiview.backends.protocol import BookmarkStore, Credential, CredentialStore, UrlOpener
from wikiview.config import Settings
from wikiview.render.renderer import SoupRenderer
from wikiview.view import Navigator


def build_credential_store(settings: Settings) -> CredentialStore:
    stores: list[CredentialStore] = []
    if settings.username and settings.api_token:
        stores.append(
            StaticCredentialStore(settings.host, Credential(username=settings.username, secret=settings.api_token))
        )
    stores.append(NetrcCredentialStore(settings.netrc_path))
    return ChainCredentialStore(stores)


def build_navigator(
    settings: Settings,
    *,
    credentials: CredentialStore | None = None,
    bookmarks: BookmarkStore | None = None,
    opener: UrlOpener | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Navigator:
    """Create a navigator with default host facilities, any of which can be replaced."""

    if not settings.host:
        raise ValueError("Missing WIKIVIEW_HOST. Set it in environment variables or .env.")

    client = ConfluenceClient(
        settings,
        credentials or build_credential_store(settings),
        transport=transport,
    )
    return Navigator(
        settings=settings,
        client=client,
        renderer=SoupRenderer(),
        bookmarks=bookmarks or JsonBookmarkStore(settings.bookmarks_file),
        opener=opener or BrowserUrlOpener(),
    )
