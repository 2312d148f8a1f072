"""Core configuration.

Notes:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Adapters (HTTP, filesystem defaults) read their settings from here.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "stepwise-io"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "stepwise-io"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "stepwise-io"
    return Path.home() / ".config" / "stepwise-io"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Application settings.

    Read from `STEPWISE_*` environment variables, then `./.env`, then the
    per-user `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="STEPWISE_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    user_agent: str = Field(
        default="Mercateo/rust-for-node-developers",
        description="User-Agent header sent with every request (empty: no header).",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds (None: wait indefinitely).",
    )
    follow_redirects: bool = Field(
        default=False,
        description="Follow HTTP redirects instead of returning the 3xx response.",
    )

    user_url: str = Field(
        default="https://api.github.com/users/donaldpipowitch",
        min_length=8,
        description="Default URL for `fetch`.",
    )
    repos_url: str = Field(
        default="https://api.github.com/users/donaldpipowitch/repos",
        min_length=8,
        description="Default URL for `repos`.",
    )

    hello_path: Path = Field(
        default=Path("hello.txt"),
        description="First input of `concat` (and default for `read`).",
    )
    world_path: Path = Field(
        default=Path("world.txt"),
        description="Second input of `concat`.",
    )
    output_path: Path = Field(
        default=Path("hello-world.txt"),
        description="Output of `concat`.",
    )
