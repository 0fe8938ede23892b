"""Error taxonomy.

Every error is terminal for the action that raised it. None are retried.
"""

from __future__ import annotations


class WikiviewError(RuntimeError):
    """Base class for errors surfaced to the user."""


class AuthError(WikiviewError):
    """No credential is stored for the configured host."""

    def __init__(self, host: str) -> None:
        super().__init__(f"No credentials found for host {host!r}")
        self.host = host


class ApiError(WikiviewError):
    """The API answered with a status other than 200, or an unusable payload."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotALinkError(WikiviewError):
    """Link activation was requested where no page link exists."""

    def __init__(self, point: int) -> None:
        super().__init__(f"Not a link at position {point}")
        self.point = point
