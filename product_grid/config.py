"""
Configuration settings for the product grid engine.

Uses Pydantic Settings to load environment variables for pagination defaults,
seed data location, and logging. Values can also be supplied through a local
`.env` file.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PAGE_SIZE_OPTIONS: List[int] = [10, 20, 30, 40, 50]


class Settings(BaseSettings):
    # Pagination
    default_page_size: int = Field(10, alias="GRID_DEFAULT_PAGE_SIZE")
    page_size_options: List[int] = Field(
        default_factory=lambda: list(DEFAULT_PAGE_SIZE_OPTIONS),
        alias="GRID_PAGE_SIZE_OPTIONS",
    )

    # Seed data (None means the built-in sample products)
    seed_path: Optional[Path] = Field(None, alias="GRID_SEED_PATH")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _check_page_sizes(self) -> "Settings":
        if not self.page_size_options:
            raise ValueError("page_size_options must not be empty")
        if any(size <= 0 for size in self.page_size_options):
            raise ValueError("page sizes must be positive")
        if self.default_page_size not in self.page_size_options:
            raise ValueError(
                f"default_page_size={self.default_page_size} is not one of "
                f"{self.page_size_options}"
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["DEFAULT_PAGE_SIZE_OPTIONS", "Settings", "get_settings"]
