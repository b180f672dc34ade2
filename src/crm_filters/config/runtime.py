"""Pydantic-based runtime settings for the filter service and CLI.

Loads from environment variables (with optional .env file).
Invalid values fail fast at load time.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from ..domain.describe import NO_FILTERS_MESSAGE
from ..domain.fields import CONTACT_FIELDS, FieldCatalog


class FilterSettings(BaseSettings):
    """All configuration for the filter runtime, validated at startup."""

    model_config = {"env_prefix": "CRM_FILTERS_", "env_file": ".env", "env_file_encoding": "utf-8"}

    # --- Catalog ---
    catalog_path: Path | None = Field(
        default=None,
        description="JSON file with a field catalog replacing the built-in contact fields",
    )

    # --- Display ---
    empty_description: str = Field(
        default=NO_FILTERS_MESSAGE,
        min_length=1,
        description="Banner text when no filter is active",
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Level for the crm_filters logger")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level

    @field_validator("catalog_path")
    @classmethod
    def _catalog_exists(cls, v: Path | None) -> Path | None:
        if v is not None and not v.is_file():
            raise ValueError(f"catalog_path does not exist: {v}")
        return v

    def load_catalog(self) -> FieldCatalog:
        if self.catalog_path is None:
            return CONTACT_FIELDS
        return FieldCatalog.load(self.catalog_path)


@lru_cache(maxsize=1)
def get_settings() -> FilterSettings:
    """Return the singleton FilterSettings (cached after first call)."""
    return FilterSettings()
