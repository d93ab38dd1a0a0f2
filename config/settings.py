"""Environment-driven configuration using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

COMMUNITY_BASE_URL_V3 = "https://community-api.coinmetrics.io/v3/"


class Settings(BaseSettings):
    """All configuration comes from environment variables / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- CoinMetrics ---
    # Community API v3 works without a key, leave empty for anonymous access
    coinmetrics_api_key: str = ""
    coinmetrics_base_url: str = COMMUNITY_BASE_URL_V3

    # --- Observability ---
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    @property
    def is_authenticated(self) -> bool:
        return self.coinmetrics_api_key != ""


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
