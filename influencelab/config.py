"""Application configuration using Pydantic Settings.

Values can be overridden via environment variables or .env file.
"""
import os
from functools import lru_cache
from typing import Dict

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """SEO settings with environment variable support."""

    # ===== Canonical URLs =====
    SEO_BASE_URL: str = os.getenv("SEO_BASE_URL", "https://influencelab.uz")

    # ===== LED listings =====
    # Place name used when a listing has no location, per language
    SEO_DEFAULT_LOCATION_RU: str = os.getenv("SEO_DEFAULT_LOCATION_RU", "Ташкенте")
    SEO_DEFAULT_LOCATION_UZ: str = os.getenv("SEO_DEFAULT_LOCATION_UZ", "Toshkentda")
    SEO_DEFAULT_LOCATION_EN: str = os.getenv("SEO_DEFAULT_LOCATION_EN", "Tashkent")

    # ===== Validation =====
    # Raise on unknown content types instead of returning empty metadata
    SEO_STRICT_CONTENT_TYPES: bool = os.getenv("SEO_STRICT_CONTENT_TYPES", "false").lower() == "true"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    def default_locations(self) -> Dict[str, str]:
        """Per-language fallback place names keyed by language code."""
        return {
            "ru": self.SEO_DEFAULT_LOCATION_RU,
            "uz": self.SEO_DEFAULT_LOCATION_UZ,
            "en": self.SEO_DEFAULT_LOCATION_EN,
        }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
