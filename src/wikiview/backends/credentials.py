"""Credential stores backed by netrc files and settings."""

from __future__ import annotations

import netrc
from pathlib import Path

from wikiview.backends.protocol import Credential, CredentialStore
from wikiview.logging import get_logger

logger = get_logger(__name__)


class NetrcCredentialStore(CredentialStore):
    """Read credentials from a netrc/authinfo style file.

    Entries look like ``machine example.atlassian.net login me@example.com password TOKEN``.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path else Path.home() / ".netrc"

    def lookup(self, host: str) -> Credential | None:
        if not self.path.exists():
            logger.debug("netrc file %s does not exist", self.path)
            return None
        try:
            entries = netrc.netrc(str(self.path))
        except netrc.NetrcParseError as e:
            logger.warning("Failed to parse %s: %s", self.path, e)
            return None

        auth = entries.authenticators(host)
        if auth is None:
            return None
        login, _account, password = auth
        if not login or not password:
            return None
        return Credential(username=login, secret=password)


class StaticCredentialStore(CredentialStore):
    """A single credential valid for one host (from environment settings)."""

    def __init__(self, host: str, credential: Credential) -> None:
        self._host = host
        self._credential = credential

    def lookup(self, host: str) -> Credential | None:
        if host == self._host:
            return self._credential
        return None


class ChainCredentialStore(CredentialStore):
    """Ask each store in order and return the first hit."""

    def __init__(self, stores: list[CredentialStore]) -> None:
        self._stores = list(stores)

    def lookup(self, host: str) -> Credential | None:
        for store in self._stores:
            credential = store.lookup(host)
            if credential is not None:
                return credential
        return None
