"""Settings for the catalog, read from ``CATALOG_*`` environment variables.

A ``.env`` file in the working directory is honoured as well.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings."""

    # Storage
    backend: Literal["json", "sqlite"] = Field(default="json")
    data_dir: Path = Field(default=Path("./data"))

    # Logging
    log_level: str = Field(default="INFO")
    log_file: Path | None = Field(default=None)
    json_logs: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, v):
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return level

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def database_file(self) -> Path:
        return self.data_dir / "catalog.db"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
