"""Application settings loaded from environment variables via pydantic-settings.

Two sources are read, in priority order:

  1. Environment variables, e.g. ``CACHE_TTL_SECONDS=60`` (always win)
  2. A ``.env`` file in the working directory (local development)

Field ``cache_ttl_seconds`` maps to env var ``CACHE_TTL_SECONDS``; defaults
apply when neither source sets a value.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Groupie Tracker application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === Upstream API ===
    groupie_api_base_url: str = "https://groupietrackers.herokuapp.com/api"
    http_timeout_seconds: float = 10.0

    # === Response cache ===
    cache_ttl_seconds: float = 300.0  # 5 minutes
    cache_max_size: int = 1000

    # === App Config ===
    app_host: str = "0.0.0.0"
    app_port: int = 8080
    app_env: str = "development"
    log_level: str = "INFO"
    cors_allowed_origins: list[str] = ["*"]
