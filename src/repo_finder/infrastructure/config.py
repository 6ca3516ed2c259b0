"""Application configuration: loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_cache_dir() -> Path:
    return Path.home() / ".cache" / "repo-finder"


class Settings(BaseSettings):
    """Central configuration loaded from ``REPOS_*`` env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_prefix="REPOS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("REPOS_GITHUB_TOKEN", "GITHUB_TOKEN"),
    )
    github_api_url: str = "https://api.github.com"
    cache_dir: Path = Field(default_factory=_default_cache_dir)
    log_level: str = "WARNING"
    http_timeout: float | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
