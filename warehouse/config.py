"""
Configuration settings for the warehouse catalog.

Uses Pydantic Settings to load environment variables for logging and the
command driver defaults (input/output files and placement strategy). The
catalog geometry (10 buckets of 5) is fixed and deliberately not configurable.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Command driver defaults
    input_path: str = Field("everything.in", alias="WAREHOUSE_INPUT")
    output_path: str = Field("everything.out", alias="WAREHOUSE_OUTPUT")
    placement: str = Field("standard", alias="WAREHOUSE_PLACEMENT")

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
