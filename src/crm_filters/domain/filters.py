"""Typed advanced-filter configuration: conditions, groups and the filter."""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from .fields import CONTACT_FIELDS, FieldCatalog, SemanticType
from .operators import OperatorId, default_operator_for


class LogicalOperator(str, Enum):
    """How results are combined."""

    AND = "AND"   # every result must be true
    OR = "OR"     # at least one result must be true

    def combine(self, results) -> bool:
        return all(results) if self is LogicalOperator.AND else any(results)


def _new_id() -> str:
    return uuid.uuid4().hex


def _parse_logical(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().upper()
    return value


class Condition(BaseModel):
    """A single (field, operator, value) leaf test."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: str | int = Field(default_factory=_new_id, description="Opaque condition id")
    field: str = Field(..., description="Field key from the catalog")
    operator: str = Field(default=OperatorId.equals.value, description="Operator id")
    value: str = Field(default="", description="Comparison value")

    @field_validator("operator", mode="before")
    @classmethod
    def _operator_str(cls, v: Any) -> str:
        if isinstance(v, OperatorId):
            return v.value
        return "" if v is None else str(v)

    @field_validator("value", mode="before")
    @classmethod
    def _value_str(cls, v: Any) -> str:
        if v is None:
            return ""
        if isinstance(v, Enum):
            return str(v.value)
        return str(v)


class Group(BaseModel):
    """Conditions combined by one shared logical operator."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: str | int = Field(default_factory=_new_id, description="Opaque group id")
    logical_operator: LogicalOperator = Field(
        default=LogicalOperator.AND,
        validation_alias=AliasChoices("logical_operator", "logicalOperator", "operator"),
        serialization_alias="logicalOperator",
    )
    conditions: tuple[Condition, ...] = Field(..., min_length=1)

    @field_validator("logical_operator", mode="before")
    @classmethod
    def _logical(cls, v: Any) -> Any:
        return _parse_logical(v)


class FilterConfig(BaseModel):
    """The full authored query: groups plus the operator combining them."""

    model_config = {"frozen": True, "populate_by_name": True}

    groups: tuple[Group, ...] = Field(..., min_length=1)
    group_operator: LogicalOperator = Field(
        default=LogicalOperator.AND,
        validation_alias=AliasChoices("group_operator", "groupOperator"),
        serialization_alias="groupOperator",
    )

    @field_validator("group_operator", mode="before")
    @classmethod
    def _logical(cls, v: Any) -> Any:
        return _parse_logical(v)

    def to_payload(self) -> dict[str, Any]:
        """Serialize with the builder's camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


def default_operator_for_field(key: str, catalog: FieldCatalog = CONTACT_FIELDS) -> OperatorId:
    """Operator a fresh condition on ``key`` starts with."""
    if catalog.semantic_type_for(key) is SemanticType.text:
        return OperatorId.starts_with
    return default_operator_for(catalog.semantic_type_for(key))


def default_condition(catalog: FieldCatalog = CONTACT_FIELDS) -> Condition:
    field = catalog.default_field
    return Condition(field=field, operator=default_operator_for_field(field, catalog).value, value="")


def default_group(catalog: FieldCatalog = CONTACT_FIELDS) -> Group:
    return Group(logical_operator=LogicalOperator.AND, conditions=(default_condition(catalog),))


def default_filter(catalog: FieldCatalog = CONTACT_FIELDS) -> FilterConfig:
    """The freshly-initialized filter the builder starts from."""
    return FilterConfig(groups=(default_group(catalog),), group_operator=LogicalOperator.AND)
