"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.errors import ConfigurationError
from .core.queries import DEFAULT_MEMBER_LIMIT
from .providers.coinmarketcap import BASE_URL, DEFAULT_TIMEOUT, MAX_LIMIT

API_KEY_ENV = "CMC_API_KEY"


class ProviderSettings(BaseSettings):
    """CoinMarketCap access and report behaviour."""

    model_config = SettingsConfigDict(
        env_prefix="CMC_",
        env_file=".env",
        extra="ignore",
    )

    api_key: str = Field(default="", description="CoinMarketCap Pro API key")
    base_url: str = Field(default=BASE_URL, description="CoinMarketCap API base URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="HTTP timeout in seconds")
    member_limit: int = Field(
        default=DEFAULT_MEMBER_LIMIT, ge=1, le=MAX_LIMIT, description="Category members requested per page"
    )
    paginate: bool = Field(default=False, description="Request every page of category members")
    allow_list_path: Path | None = Field(default=None, description="YAML file overriding the built-in allow-list")
    fail_fast: bool = Field(default=False, description="Abort on the first failing category")

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError(f"{API_KEY_ENV} environment variable is not set")
        return self.api_key


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        extra="ignore",
    )

    level: str = Field(default="WARNING", description="Log level")


class Settings(BaseSettings):
    """Main settings container."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    provider: ProviderSettings = Field(default_factory=ProviderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def load_settings() -> Settings:
    """Load settings from the environment and ``.env``."""
    try:
        return Settings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from exc
