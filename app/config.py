"""Application configuration models."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils import clamp

PER_CATEGORY_MIN = 6
PER_CATEGORY_MAX = 40


class Settings(BaseSettings):
    """Settings loaded from environment variables or a .env file."""

    app_name: str = Field(default="FlixCatalog", alias="APP_NAME")
    server_host: str = Field(default="0.0.0.0", alias="HOST")
    server_port: int = Field(default=5000, alias="PORT")

    tmdb_api_key: str | None = Field(default=None, alias="TMDB_API_KEY")
    tmdb_api_url: HttpUrl = Field(
        default="https://api.themoviedb.org/3", alias="TMDB_API_URL"
    )
    tmdb_image_base: str = Field(
        default="https://image.tmdb.org/t/p", alias="TMDB_IMAGE_BASE"
    )
    tmdb_timeout_ms: int = Field(
        default=15_000, alias="TMDB_TIMEOUT_MS", ge=100, le=120_000
    )
    tmdb_cooldown_ms: int = Field(
        default=300_000, alias="TMDB_COOLDOWN_MS", ge=0
    )
    tmdb_failure_threshold: int = Field(
        default=1, alias="TMDB_FAILURE_THRESHOLD", ge=1, le=100
    )
    tmdb_retry_attempts: int = Field(
        default=2, alias="TMDB_RETRY_ATTEMPTS", ge=1, le=10
    )
    tmdb_retry_backoff_ms: int = Field(
        default=400, alias="TMDB_RETRY_BACKOFF_MS", ge=0, le=10_000
    )
    tmdb_max_concurrency: int = Field(
        default=8, alias="TMDB_MAX_CONCURRENCY", ge=1, le=64
    )
    tmdb_language: str | None = Field(default="en-US", alias="TMDB_LANGUAGE")
    tmdb_region: str | None = Field(default="US", alias="TMDB_REGION")

    database_url: str | None = Field(default=None, alias="DATABASE_URL")

    catalog_per_category: int = Field(default=16, alias="CATALOG_PER_CATEGORY")
    listing_default_limit: int = Field(
        default=50, alias="LISTING_DEFAULT_LIMIT", ge=1, le=500
    )

    environment: Literal["development", "production"] = Field(
        default="development", alias="ENVIRONMENT"
    )

    @field_validator(
        "tmdb_api_key", "tmdb_language", "tmdb_region", "database_url", mode="before"
    )
    @classmethod
    def _strip_blank(cls, value: object) -> object:
        """Treat blank optional values as unset."""

        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
        return value

    @field_validator("catalog_per_category", mode="after")
    @classmethod
    def _clamp_per_category(cls, value: int) -> int:
        return clamp(value, PER_CATEGORY_MIN, PER_CATEGORY_MAX)

    @property
    def tmdb_enabled(self) -> bool:
        """Return whether the upstream catalog provider can be used at all."""

        return bool(self.tmdb_api_key)

    @property
    def store_enabled(self) -> bool:
        return bool(self.database_url)

    @property
    def tmdb_timeout_seconds(self) -> float:
        return self.tmdb_timeout_ms / 1000

    @property
    def tmdb_cooldown_seconds(self) -> float:
        return self.tmdb_cooldown_ms / 1000

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()  # type: ignore[call-arg]


settings = get_settings()
