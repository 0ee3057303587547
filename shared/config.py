"""
Shared configuration management for the News Proxy service.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PROVIDER_BASE_URL = "https://gnews.io/api/v4"


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Environment
    env: str = Field(default="local", validation_alias="NEWS_ENV")
    log_level: str = Field(default="info", validation_alias="NEWS_LOG_LEVEL")

    # Upstream provider
    api_key: str = Field(validation_alias=AliasChoices("NEWS_API_KEY", "API_KEY"))
    provider_base_url: str = Field(default=DEFAULT_PROVIDER_BASE_URL, validation_alias="NEWS_PROVIDER_BASE_URL")
    upstream_timeout: float = Field(default=10.0, validation_alias="NEWS_UPSTREAM_TIMEOUT")

    # Response cache
    cache_ttl_seconds: int = Field(default=600, validation_alias="NEWS_CACHE_TTL_SECONDS")
    cache_check_period_seconds: int = Field(default=120, validation_alias="NEWS_CACHE_CHECK_PERIOD_SECONDS")
    cache_max_entries: int = Field(default=10000, validation_alias="NEWS_CACHE_MAX_ENTRIES")


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str = "news"
    host: str = Field(default="0.0.0.0", validation_alias="NEWS_HOST")
    port: int = Field(default=3000, validation_alias="NEWS_PORT")


def get_config(service_name: str, **overrides) -> ServiceConfig:
    """Get configuration for a specific service.

    Explicit overrides win over the environment; the upstream credential is
    read from the environment when not overridden.
    """
    overrides.setdefault("service_name", service_name)
    return ServiceConfig(**overrides)
