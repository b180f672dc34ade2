"""Response DTOs for the filter service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class FilterResponse(BaseModel):
    """Output DTO for one filter run."""

    records: list[dict[str, Any]] = Field(default_factory=list, description="Included records, input order")
    total: int = Field(..., ge=0, description="Records considered")
    matched: int = Field(..., ge=0, description="Records included")
    active: bool = Field(..., description="Whether the filter was applied at all")
    description: str = Field(..., description="Banner text for the filter")
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
