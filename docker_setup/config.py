"""
Central configuration for docker-setup.
Uses Pydantic BaseSettings for type-safe configuration from environment variables.
"""

import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env relative to this file (docker_setup/config.py → project root)
_ENV_FILE = Path(__file__).parent.parent / ".env"


def _load_env_file() -> None:
    """
    Load .env into os.environ, but only for keys that are currently unset
    or set to empty strings. Explicit non-empty container env vars always win.
    """
    if not _ENV_FILE.exists():
        return
    from dotenv import dotenv_values
    for key, value in dotenv_values(_ENV_FILE).items():
        if value and not os.environ.get(key):
            os.environ[key] = value


# Run at import time so Settings() sees the correct values
_load_env_file()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Stored raw; only the exact string "true" enables one-shot mode
    oneshot_raw: str = Field(default="", validation_alias="ONESHOT")

    # ── Hook commands ───────────────────────────────────────────────────────────
    routes_init: str | None = None
    routes_exit: str | None = None
    pre_init_hook: str | None = None
    pre_exit_hook: str | None = None
    post_init_hook: str | None = None
    post_exit_hook: str | None = None

    # Shell used to run string commands
    hook_shell: str = "/bin/sh"

    # ── Logging ─────────────────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: str = "text"  # text | json
    logs_dir: str | None = None

    @field_validator("log_format")
    @classmethod
    def normalise_log_format(cls, value: str) -> str:
        # Unknown formats fall back to text, like unknown levels fall back to INFO
        value = value.strip().lower()
        if value not in ("text", "json"):
            return "text"
        return value

    @property
    def oneshot(self) -> bool:
        return self.oneshot_raw == "true"

    def command_for(self, env_var: str) -> str | None:
        """Return the hook command stored under env_var, or None if unset or empty."""
        name = env_var.lower()
        if name not in type(self).model_fields:
            return None
        value = getattr(self, name)
        if not value:
            return None
        return value


def get_settings() -> "Settings":
    """Return the application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


_settings: Settings | None = None


class _SettingsProxy:
    """Lazy proxy so `from docker_setup.config import settings` works without eager init."""
    def __getattr__(self, name):
        return getattr(get_settings(), name)


settings = _SettingsProxy()  # type: ignore[assignment]
