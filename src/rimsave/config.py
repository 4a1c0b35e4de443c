"""Lightweight configuration for the save-file tools."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    log_level: str = Field(default="INFO", description="Root logging level")
    max_upload_bytes: int = Field(
        default=64 * 1024 * 1024,
        description="Largest save document accepted by the HTTP API",
        gt=0,
    )
    max_loaded_saves: int = Field(
        default=8,
        description="How many built games the API keeps in memory before evicting the oldest",
        gt=0,
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:4200", "http://127.0.0.1:4200"],
        description="Origins allowed to call the HTTP API",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
