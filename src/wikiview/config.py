"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `WIKIVIEW_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """wikiview settings.

    All fields are environment-configurable. Prefix is `WIKIVIEW_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="WIKIVIEW_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    log_level: str = Field(default="WARNING")

    # Site
    host: str = Field(default="")
    # Must contain both `{host}` and `{path}` placeholders.
    browser_url_template: str = Field(default="https://{host}/wiki{path}")

    # Credentials. Env values win over the netrc entry for `host`.
    username: str | None = Field(default=None)
    api_token: str | None = Field(default=None)
    netrc_path: Path | None = Field(default=None)

    # Networking
    http_timeout_s: float = Field(default=30.0, ge=1.0, le=300.0)
    search_limit: int = Field(default=100, ge=1, le=1000)

    # Bookmarks
    bookmarks_file: Path = Field(default=Path.home() / ".wikiview" / "bookmarks.json")

    def browser_url(self, relative_path: str) -> str:
        """Expand :attr:`browser_url_template` for a page's relative link."""

        return self.browser_url_template.format(host=self.host, path=relative_path)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("WIKIVIEW_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
