"""Environment-driven settings for the USWDS MCP server."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SERVER_NAME = "uswds-mcp-server"
SERVER_VERSION = "0.2.0"

_TRUTHY = {"true", "1", "yes", "on"}
_LOG_LEVELS = {"debug", "info", "warning", "error"}


class Settings(BaseSettings):
    """Process-wide configuration, read once from the environment.

    Attributes:
        use_react_components: Render React-USWDS content unless a call overrides it.
        log_level: Logging verbosity; ``debug`` enables argument logging.
        api_key: Single API key accepted by the Lambda transport, if any.
        environment: ``development`` disables origin validation.
        rate_limit_per_minute: Requests allowed per API key per minute.
        rate_limit_per_day: Requests allowed per API key per day.
        cache_ttl_seconds: Lifetime of cached tool responses.
        cache_dir: Directory for the file-backed response cache layer.
        tailwind_docs_base_url: Root of the USWDS Tailwind documentation site.
        http_timeout_seconds: Timeout for documentation fetches.
    """

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    use_react_components: bool = False
    log_level: str = "info"
    api_key: str | None = None
    environment: Literal["development", "production"] = "production"
    rate_limit_per_minute: int = Field(default=100, ge=1)
    rate_limit_per_day: int = Field(default=10_000, ge=1)
    cache_ttl_seconds: float = Field(default=3600.0, gt=0)
    cache_dir: str = "/tmp/mcp-cache"
    tailwind_docs_base_url: str = "https://v2.uswds-tailwind.com"
    http_timeout_seconds: float = Field(default=10.0, gt=0)

    @field_validator("use_react_components", mode="before")
    @classmethod
    def _parse_flag(cls, value: object) -> bool:
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in _TRUTHY

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        level = str(value or "info").strip().lower()
        return level if level in _LOG_LEVELS else "info"

    @field_validator("environment", mode="before")
    @classmethod
    def _normalize_environment(cls, value: object) -> str:
        env = str(value or "production").strip().lower()
        return "development" if env in {"dev", "development"} else "production"

    @property
    def is_development(self) -> bool:
        """Whether the server runs in development mode."""
        return self.environment == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached process settings."""
    return Settings()
