"""Client configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from doclient import __version__

DEFAULT_API_URL = "https://api.digitalocean.com/"


def _ensure_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else f"{url}/"


class Settings(BaseSettings):
    """Client settings loaded from environment variables and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    access_token: str | None = Field(
        default=None,
        alias="DIGITALOCEAN_ACCESS_TOKEN",
    )
    api_url: str = Field(
        default=DEFAULT_API_URL,
        alias="DIGITALOCEAN_API_URL",
    )

    # Transport
    user_agent: str = Field(
        default=f"doclient/{__version__}",
        alias="DOCLIENT_USER_AGENT",
    )
    request_timeout: float = Field(
        default=30.0,
        alias="DOCLIENT_TIMEOUT",
        description="Request timeout in seconds",
    )

    # doctl-style YAML config file
    config_file: str = Field(
        default="~/.config/doctl/config.yaml",
        alias="DOCLIENT_CONFIG_FILE",
    )

    @field_validator("api_url", mode="before")
    @classmethod
    def normalize_api_url(cls, v: str) -> str:
        """Relative paths resolve against the base URL, so it must end with '/'."""
        return _ensure_trailing_slash(v)


class FileConfig:
    """Credentials loaded from a doctl-style YAML config file."""

    def __init__(self, config_path: str | None = None):
        self._config: dict[str, Any] = {}
        if config_path:
            self.load(config_path)

    def load(self, config_path: str) -> None:
        """Load configuration from YAML file."""
        path = Path(config_path).expanduser()
        if path.exists():
            with open(path) as f:
                data = yaml.safe_load(f)
            # Anything but a mapping at the top level carries no settings.
            self._config = data if isinstance(data, dict) else {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key."""
        return self._config.get(key, default)

    @property
    def access_token(self) -> str | None:
        return self.get("access-token") or None

    @property
    def api_url(self) -> str | None:
        url = self.get("api-url")
        if not url:
            return None
        return _ensure_trailing_slash(url)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache
def get_file_config() -> FileConfig:
    """Get cached YAML config file instance."""
    settings = get_settings()
    return FileConfig(settings.config_file)
