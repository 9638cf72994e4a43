"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP) read configuration the same way everywhere.
- Owns the base-URL resolution every remote call depends on.
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
        return base / "infocast"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "infocast"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "infocast"
    return Path.home() / ".config" / "infocast"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Write/update variables in the user's global .env file."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        try:
            existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))
        except OSError:
            existing = {}

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# infocast user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Loaded once per process: environment first, then the project `.env`,
    then the per-user `.env`. A missing base URL is not an error here; it
    only becomes one when a remote call needs it.
    """

    model_config = SettingsConfigDict(
        env_prefix="INFOCAST_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str | None = Field(
        default=None,
        description="Root address of the remote service (e.g. http://localhost:8080).",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="infocast/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )


class ConfigMissingError(RuntimeError):
    """Raised when a required setting is absent or empty."""

    def __init__(self, setting: str) -> None:
        super().__init__(f"{setting} is not configured")
        self.setting = setting


class ConfigResolver:
    """Resolves the remote service base URL from already-loaded settings."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def resolve_base_url(self) -> str:
        """Return the configured base URL without a trailing slash.

        Raises `ConfigMissingError` when the value is absent or blank.
        """

        base_url = (self._settings.api_base_url or "").strip().rstrip("/")
        if not base_url:
            raise ConfigMissingError("api_base_url")
        return base_url
