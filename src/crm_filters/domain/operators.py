"""Operator registry: supported comparisons per semantic type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .fields import SemanticType


class OperatorId(str, Enum):
    """Supported condition operators."""

    equals = "equals"               # value == needle
    not_equals = "not_equals"       # value != needle
    contains = "contains"           # needle in value
    not_contains = "not_contains"   # needle not in value
    starts_with = "starts_with"     # value starts with needle
    ends_with = "ends_with"         # value ends with needle
    is_empty = "is_empty"           # value blank, needle ignored
    is_not_empty = "is_not_empty"   # value not blank, needle ignored


@dataclass(frozen=True)
class OperatorSpec:
    """Display metadata for one operator within a semantic type."""

    id: OperatorId
    label: str
    phrase: str
    symbol: str

    @property
    def requires_value(self) -> bool:
        return requires_value(self.id)


_NO_OPERAND = frozenset({OperatorId.is_empty, OperatorId.is_not_empty})

TEXT_OPERATORS: tuple[OperatorSpec, ...] = (
    OperatorSpec(OperatorId.equals, "Equals", "equals", "="),
    OperatorSpec(OperatorId.not_equals, "Not Equals", "does not equal", "≠"),
    OperatorSpec(OperatorId.contains, "Contains", "contains", "⊃"),
    OperatorSpec(OperatorId.not_contains, "Does Not Contain", "does not contain", "⊅"),
    OperatorSpec(OperatorId.starts_with, "Starts With", "starts with", "⊲"),
    OperatorSpec(OperatorId.ends_with, "Ends With", "ends with", "⊳"),
    OperatorSpec(OperatorId.is_empty, "Is Empty", "is empty", "∅"),
    OperatorSpec(OperatorId.is_not_empty, "Is Not Empty", "is not empty", "≠∅"),
)

ENUMERATED_OPERATORS: tuple[OperatorSpec, ...] = (
    OperatorSpec(OperatorId.equals, "Is", "is", "="),
    OperatorSpec(OperatorId.not_equals, "Is Not", "is not", "≠"),
    OperatorSpec(OperatorId.is_empty, "Is Empty", "is empty", "∅"),
    OperatorSpec(OperatorId.is_not_empty, "Is Not Empty", "is not empty", "≠∅"),
)

_BY_TYPE: dict[SemanticType, tuple[OperatorSpec, ...]] = {
    SemanticType.text: TEXT_OPERATORS,
    SemanticType.enumerated: ENUMERATED_OPERATORS,
}

_PREDICATES: dict[OperatorId, Callable[[str, str], bool]] = {
    OperatorId.equals: lambda value, needle: value == needle,
    OperatorId.not_equals: lambda value, needle: value != needle,
    OperatorId.contains: lambda value, needle: needle in value,
    OperatorId.not_contains: lambda value, needle: needle not in value,
    OperatorId.starts_with: lambda value, needle: value.startswith(needle),
    OperatorId.ends_with: lambda value, needle: value.endswith(needle),
}


def normalize(value: str | None) -> str:
    """Trim and case-fold a value for comparison."""
    return (value or "").strip().casefold()


def parse_operator(operator: str | OperatorId | None) -> OperatorId | None:
    """Return the OperatorId for ``operator``, or None when unknown."""
    if isinstance(operator, OperatorId):
        return operator
    if not operator:
        return None
    try:
        return OperatorId(str(operator).strip().lower())
    except ValueError:
        return None


def operators_for(semantic_type: SemanticType) -> tuple[OperatorSpec, ...]:
    return _BY_TYPE[semantic_type]


def default_operator_for(semantic_type: SemanticType) -> OperatorId:
    return _BY_TYPE[semantic_type][0].id


def spec_for(operator: OperatorId, semantic_type: SemanticType) -> OperatorSpec | None:
    for spec in _BY_TYPE[semantic_type]:
        if spec.id is operator:
            return spec
    return None


def is_valid_operator(operator: str | OperatorId | None, semantic_type: SemanticType) -> bool:
    op = parse_operator(operator)
    return op is not None and spec_for(op, semantic_type) is not None


def resolve_operator(operator: str | OperatorId | None, semantic_type: SemanticType) -> OperatorId:
    """Return ``operator`` if it is valid for the type, otherwise ``equals``."""
    op = parse_operator(operator)
    if op is None or spec_for(op, semantic_type) is None:
        return OperatorId.equals
    return op


def requires_value(operator: str | OperatorId | None) -> bool:
    """False only for the empty checks; unknown operators take a value."""
    return parse_operator(operator) not in _NO_OPERAND


def is_blank(value: str | None) -> bool:
    return not (value or "").strip()


def compare(operator: OperatorId, value: str | None, needle: str | None) -> bool:
    """Apply ``operator`` to a field value and a condition value.

    Both sides are trimmed and case-folded. The empty checks look at the
    field value only.
    """
    if operator is OperatorId.is_empty:
        return is_blank(value)
    if operator is OperatorId.is_not_empty:
        return not is_blank(value)
    return _PREDICATES[operator](normalize(value), normalize(needle))
