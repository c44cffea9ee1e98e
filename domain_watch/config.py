"""
Configuration settings for Domain Watch.

Uses Pydantic Settings to load environment variables (or a `.env` file) for
logging and console rendering. The classification windows themselves are fixed
and are not configurable.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Rendering
    date_format: str = Field("%Y-%m-%d", alias="DATE_FORMAT")
    console_width: Optional[int] = Field(None, alias="CONSOLE_WIDTH")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
