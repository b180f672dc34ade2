"""Request DTOs for the filter service."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field

from ..domain.filters import FilterConfig


class FilterRequest(BaseModel):
    """Input DTO: records already loaded for the tenant plus the authored filter."""

    model_config = {"populate_by_name": True}

    records: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Row-like contact records from the persistence layer",
    )
    filter: FilterConfig | None = Field(
        default=None,
        validation_alias=AliasChoices("filter", "filter_config", "filterConfig"),
        description="Advanced filter; None means no filter",
    )
    lookup_maps: dict[str, dict[str | int, str | None]] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("lookup_maps", "lookupMaps"),
        description="field key -> (identifier -> label) from reference tables",
    )
    trace_id: str | None = Field(default=None, description="Caller correlation id")
