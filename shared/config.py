"""
Shared configuration management for the Showcase project feed.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ShowcaseSettings(BaseSettings):
    """Environment-driven settings (``SHOWCASE_*`` variables or ``.env``)."""

    model_config = SettingsConfigDict(
        env_prefix="SHOWCASE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Remote feed
    endpoint_url: Optional[str] = Field(default=None)
    http_timeout: float = Field(default=10.0)

    # Shared cache store; unset means in-process memory cache
    redis_url: Optional[str] = Field(default=None)
    cache_ttl: Optional[int] = Field(default=None)

    # Observability
    log_level: str = Field(default="info")


def get_settings(**overrides) -> ShowcaseSettings:
    """Build settings from the environment, with explicit overrides on top."""
    return ShowcaseSettings(**overrides)
