"""Authenticated request dispatcher for the REST API."""

from __future__ import annotations

import base64
import inspect
import time
from collections.abc import Iterable, Mapping
from typing import Any, Callable
from urllib.parse import quote, urlsplit

import httpx

from wikiview.backends.protocol import Credential, CredentialStore
from wikiview.config import Settings
from wikiview.errors import ApiError, AuthError
from wikiview.logging import get_logger

logger = get_logger(__name__)

QueryParams = Mapping[str, str] | Iterable[tuple[str, str]]
ResponseCallback = Callable[[httpx.Response], Any]


def build_query_string(params: QueryParams | None) -> str:
    """Percent-encode `params` into a `?k=v&k=v` suffix.

    Pairs keep their input order. Returns an empty string when there is nothing to encode.
    """

    if not params:
        return ""
    items = params.items() if isinstance(params, Mapping) else params
    pairs = [f"{quote(str(k), safe='')}={quote(str(v), safe='')}" for k, v in items]
    if not pairs:
        return ""
    return "?" + "&".join(pairs)


def basic_auth_header(credential: Credential) -> str:
    raw = f"{credential.username}:{credential.secret}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


class ConfluenceClient:
    """Issue authenticated requests against `https://<host>`.

    One request is in flight per call; there is no retry, cancellation or deduplication.
    """

    def __init__(
        self,
        settings: Settings,
        credentials: CredentialStore,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._credentials = credentials
        self._transport = transport

    @property
    def host(self) -> str:
        return self._settings.host

    @property
    def base_url(self) -> str:
        return f"https://{self._settings.host}"

    def _auth_headers(self) -> dict[str, str]:
        credential = self._credentials.lookup(self.host)
        if credential is None:
            raise AuthError(self.host)
        return {"Authorization": basic_auth_header(credential)}

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self._settings.http_timeout_s),
            follow_redirects=True,
            transport=self._transport,
        )

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        params: QueryParams | None = None,
        body: bytes | str | None = None,
        callback: ResponseCallback | None = None,
    ) -> Any:
        """Send one request and complete with its response.

        Args:
            path: Resource path, e.g. `/wiki/rest/api/search`, or an absolute URL.
            method: HTTP verb.
            headers: Extra request headers.
            params: Query parameters, encoded with :func:`build_query_string`.
            body: Optional request body.
            callback: Continuation invoked with the response. Its result (awaited if needed)
                becomes the return value.

        Returns:
            The response, or the callback's result.

        Raises:
            AuthError: No credential for the configured host.
            ApiError: The transport failed or the response status is not 200.
        """

        url = self._resolve(path) + build_query_string(params)
        request_headers = {"Accept": "application/json"}
        request_headers.update(headers or {})
        if self._is_own_host(url):
            request_headers.update(self._auth_headers())
        else:
            logger.debug("Not sending credentials to foreign host for %s", url)

        started = time.monotonic()
        try:
            async with self._client() as client:
                response = await client.request(method, url, headers=request_headers, content=body)
        except httpx.HTTPError as e:
            raise ApiError(f"{method} {path} failed: {e}") from e

        logger.debug(
            "%s %s -> %s (%d ms)",
            method,
            path,
            response.status_code,
            int((time.monotonic() - started) * 1000),
        )

        if response.status_code != 200:
            raise ApiError(
                f"{method} {path} failed with status {response.status_code}",
                status_code=response.status_code,
            )

        if callback is None:
            return response
        result = callback(response)
        if inspect.isawaitable(result):
            return await result
        return result

    async def get_json(self, path: str, *, params: QueryParams | None = None) -> Any:
        """GET `path` and decode the JSON body."""

        response = await self.request(path, params=params)
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"GET {path} returned a non-JSON body", status_code=response.status_code) from e

    async def fetch_bytes(self, url: str) -> bytes:
        """GET `url` (absolute or host-relative) with credentials and return the raw body."""

        response = await self.request(url, headers={"Accept": "*/*"})
        return response.content

    def _is_own_host(self, url: str) -> bool:
        return urlsplit(url).hostname == self.host.split(":")[0].lower()

    def _resolve(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        if not path.startswith("/"):
            path = "/" + path
        return self.base_url + path
