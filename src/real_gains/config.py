"""Application configuration."""

import os

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    host: str = "0.0.0.0"
    port: int = Field(
        default=3000,
        validation_alias=AliasChoices("REAL_GAINS_PORT", "PORT", "port"),
    )
    environment: str = _ENVIRONMENT
    parser_latency_seconds: float = Field(default=0.5, ge=0.0)
    lookup_latency_seconds: float = Field(default=0.7, ge=0.0)
    analyze_timeout_seconds: float | None = 10.0
    strict_matching: bool = False
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="REAL_GAINS_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
        populate_by_name=True,
    )


def resolve_timeout(raw: float | None) -> float | None:
    """Normalize the analyze timeout; zero or negative disables it."""
    if raw is None or raw <= 0:
        return None
    return raw
