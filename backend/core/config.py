"""Application settings and configuration helpers."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strongly-typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="Metrics Backend", description="Human-readable service name.")
    environment: str = Field(default="local", description="Deployment environment identifier.")

    host: str = Field(default="0.0.0.0", description="Interface the HTTP listener binds to.")
    port: int = Field(default=5000, ge=1, le=65535, description="TCP port the HTTP listener binds to.")

    log_level: str = Field(default="INFO", description="Application log level.")

    random_seed: int | None = Field(
        default=None,
        description="Fixed seed for the metrics generator. If omitted, seeded from the current time.",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()
