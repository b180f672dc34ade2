"""Advanced filter engine for the staffing CRM contact screen."""

from .domain import (
    CONTACT_FIELDS,
    Condition,
    FieldCatalog,
    FieldDescriptor,
    FilterConfig,
    FilterEvaluator,
    Group,
    LogicalOperator,
    LookupMaps,
    OperatorId,
    RecordProjector,
    SemanticType,
    apply_advanced_filters,
    describe_filter,
    is_filter_empty,
)

__version__ = "0.1.0"
__all__ = [
    "CONTACT_FIELDS",
    "Condition",
    "FieldCatalog",
    "FieldDescriptor",
    "FilterConfig",
    "FilterEvaluator",
    "Group",
    "LogicalOperator",
    "LookupMaps",
    "OperatorId",
    "RecordProjector",
    "SemanticType",
    "apply_advanced_filters",
    "describe_filter",
    "is_filter_empty",
]
