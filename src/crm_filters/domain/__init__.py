"""Domain layer for the advanced contact filter."""

from .describe import NO_FILTERS_MESSAGE, describe_filter
from .evaluator import (
    ConditionEvaluator,
    FilterEvaluator,
    apply_advanced_filters,
    is_filter_empty,
)
from .fields import CONTACT_FIELDS, FieldCatalog, FieldDescriptor, FieldOption, SemanticType
from .filters import (
    Condition,
    FilterConfig,
    Group,
    LogicalOperator,
    default_condition,
    default_filter,
    default_group,
)
from .operators import (
    ENUMERATED_OPERATORS,
    TEXT_OPERATORS,
    OperatorId,
    OperatorSpec,
    operators_for,
    resolve_operator,
)
from .projector import LookupMaps, ProjectedRecord, RecordProjector

__all__ = [
    "CONTACT_FIELDS",
    "Condition",
    "ConditionEvaluator",
    "ENUMERATED_OPERATORS",
    "FieldCatalog",
    "FieldDescriptor",
    "FieldOption",
    "FilterConfig",
    "FilterEvaluator",
    "Group",
    "LogicalOperator",
    "LookupMaps",
    "NO_FILTERS_MESSAGE",
    "OperatorId",
    "OperatorSpec",
    "ProjectedRecord",
    "RecordProjector",
    "SemanticType",
    "TEXT_OPERATORS",
    "apply_advanced_filters",
    "default_condition",
    "default_filter",
    "default_group",
    "describe_filter",
    "is_filter_empty",
    "operators_for",
    "resolve_operator",
]
