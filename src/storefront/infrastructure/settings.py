"""Application settings, loaded from the environment (and ``.env``)."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # Database
    DATABASE_URL: str = Field("sqlite:///storefront.db", description="SQLAlchemy database URL")
    DB_ECHO: bool = Field(False, description="Log SQL statements")

    # Identity (tokens are issued elsewhere; we only verify them)
    JWT_SECRET: str = Field("change-me", description="Shared secret used to verify bearer tokens")
    JWT_ALGORITHM: str = Field("HS256", description="Signing algorithm of bearer tokens")

    # HTTP
    API_PREFIX: str = Field("/api", description="Prefix for all API routes")
    HOST: str = Field("127.0.0.1", description="Bind address for `storefront serve`")
    PORT: int = Field(3001, description="Port for `storefront serve`")

    LOG_LEVEL: str = Field("INFO", description="Root log level")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
