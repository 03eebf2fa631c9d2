"""Application settings loaded from environment variables and `.env` files."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, HttpUrl, PositiveInt, SecretStr, field_validator
from pydantic.networks import PostgresDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Primary application settings for the Chronicle backend."""

    database_url: PostgresDsn = Field(alias="DATABASE_URL")
    supabase_url: HttpUrl = Field(alias="SUPABASE_URL")
    supabase_service_key: SecretStr = Field(alias="SUPABASE_SERVICE_ROLE_KEY")

    media_bucket: str = Field(default="media", min_length=1, alias="MEDIA_BUCKET")
    hero_folder: str = Field(default="branding", alias="HERO_FOLDER")
    featured_folder: str = Field(default="featured", alias="FEATURED_FOLDER")
    featured_limit: PositiveInt = Field(default=12, alias="FEATURED_LIMIT")
    homepage_card_limit: PositiveInt = Field(default=6, alias="HOMEPAGE_CARD_LIMIT")
    request_timeout_seconds: float = Field(default=20.0, gt=0, alias="REQUEST_TIMEOUT_SECONDS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("hero_folder", "featured_folder")
    @classmethod
    def _strip_slashes(cls, value: str) -> str:
        return value.strip().strip("/")

    @property
    def storage_base_url(self) -> str:
        """Root of the Supabase Storage REST API."""

        return f"{str(self.supabase_url).rstrip('/')}/storage/v1"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached instance of the application settings."""

    return Settings()


__all__ = ["Settings", "get_settings"]
