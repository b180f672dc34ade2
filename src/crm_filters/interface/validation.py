"""Filter validation: catalog and operator checks with helpful feedback.

The evaluator degrades bad operators to ``equals``; this module is where
those mistakes are reported.
"""

from __future__ import annotations

from typing import Any

from crm_filters.domain.fields import CONTACT_FIELDS, FieldCatalog, SemanticType
from crm_filters.domain.filters import FilterConfig
from crm_filters.domain.operators import is_blank, is_valid_operator, parse_operator, requires_value


class ValidationResult:
    """Result of filter validation."""

    def __init__(self, is_valid: bool, errors: list[str] | None = None, warnings: list[str] | None = None):
        self.is_valid = is_valid
        self.errors = errors or []
        self.warnings = warnings or []

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON response."""
        return {
            "valid": self.is_valid,
            "errors": self.errors,
            "warnings": self.warnings,
        }

    def add_error(self, error: str) -> ValidationResult:
        """Add an error and return self for chaining."""
        self.errors.append(error)
        self.is_valid = False
        return self

    def add_warning(self, warning: str) -> ValidationResult:
        """Add a warning and return self for chaining."""
        self.warnings.append(warning)
        return self


def validate_filter_config(
    config: FilterConfig | None,
    catalog: FieldCatalog = CONTACT_FIELDS,
) -> ValidationResult:
    """Validate a FilterConfig against ``catalog``.

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult(is_valid=True)
    if config is None:
        return result

    for g_index, group in enumerate(config.groups, start=1):
        for c_index, condition in enumerate(group.conditions, start=1):
            where = f"group {g_index}, condition {c_index}"
            descriptor = catalog.get(condition.field)
            if descriptor is None:
                result.add_warning(f"{where}: unknown field {condition.field!r}; treated as text")

            semantic_type = catalog.semantic_type_for(condition.field)
            operator = parse_operator(condition.operator)
            if operator is None:
                result.add_error(f"{where}: unknown operator {condition.operator!r}")
                continue
            if not is_valid_operator(operator, semantic_type):
                result.add_error(
                    f"{where}: operator {operator.value!r} not valid for "
                    f"{semantic_type.value} field {condition.field!r}"
                )
                continue

            if not requires_value(operator):
                continue
            if is_blank(condition.value):
                result.add_warning(f"{where}: blank value for {operator.value!r}")
            elif (
                descriptor is not None
                and descriptor.semantic_type is SemanticType.enumerated
                and not descriptor.allows(condition.value)
            ):
                result.add_warning(
                    f"{where}: {condition.value!r} is not an allowed value of {condition.field!r}"
                )
    return result
