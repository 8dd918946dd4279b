from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central configuration for geobounds-core.

    Reads env vars with prefix GEOBOUNDS_ and also loads from .env automatically.
    """

    model_config = SettingsConfigDict(
        env_prefix="GEOBOUNDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -------------------------
    # Logging
    # -------------------------
    log_level: str = Field(
        default="WARNING",
        description="Level for the parser logger. DEBUG shows every rejected coordinate string.",
        examples=["DEBUG", "INFO"],
    )
    log_format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
