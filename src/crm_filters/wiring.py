"""Composition root: single place where all wiring happens.

Call ``build_filter_service()`` to get a FilterService configured from
settings. No ad-hoc construction elsewhere.
"""

from __future__ import annotations

from .config.runtime import FilterSettings, get_settings
from .observability import configure_logging, get_logger
from .services.filter_service import FilterService


def build_filter_service(settings: FilterSettings | None = None) -> FilterService:
    """Construct a FilterService from settings."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    return FilterService(
        catalog=settings.load_catalog(),
        empty_description=settings.empty_description,
        logger=get_logger(),
    )
