"""Application configuration via environment variables."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Loaded from .env. Used by the scripts only; the library takes plain arguments."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    sitemap_dir: str = "./public/sitemaps"
    sitemap_base_url: str = ""
    sitemap_index_file: str = "sitemap-index.xml"
    default_change_frequency: str = "weekly"
    default_priority: float = 0.5

    @field_validator("default_priority")
    @classmethod
    def priority_in_range(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("default_priority must be between 0.0 and 1.0")
        return v
