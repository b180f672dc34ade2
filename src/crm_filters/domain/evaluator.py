"""Advanced filter evaluation over in-memory records."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from .fields import CONTACT_FIELDS, FieldCatalog
from .filters import Condition, FilterConfig, Group, LogicalOperator
from .operators import (
    OperatorId,
    compare,
    is_blank,
    is_valid_operator,
    requires_value,
    resolve_operator,
)
from .projector import LookupMaps, ProjectedRecord, RecordProjector

_LOGGER = logging.getLogger("crm_filters.evaluator")

RecordT = TypeVar("RecordT", bound=Mapping[str, Any])


class ConditionEvaluator:
    """Evaluate one condition against a projected record."""

    def __init__(self, catalog: FieldCatalog = CONTACT_FIELDS) -> None:
        self._catalog = catalog

    def resolve(self, condition: Condition) -> OperatorId:
        """Operator actually applied for ``condition``; warns when it falls back."""
        semantic_type = self._catalog.semantic_type_for(condition.field)
        operator = resolve_operator(condition.operator, semantic_type)
        if not is_valid_operator(condition.operator, semantic_type):
            _LOGGER.warning(
                "operator_fallback",
                extra={
                    "field": condition.field,
                    "operator": condition.operator,
                    "semantic_type": semantic_type.value,
                    "fallback": operator.value,
                },
            )
        return operator

    def evaluate(
        self,
        condition: Condition,
        projected: Mapping[str, str | None],
        operator: OperatorId | None = None,
    ) -> bool:
        if operator is None:
            operator = self.resolve(condition)
        value = projected.get(condition.field) or ""
        return compare(operator, value, condition.value)


# Conditions paired with their resolved operators, one entry per group
_ResolvedGroup = tuple[LogicalOperator, tuple[tuple[Condition, OperatorId], ...]]


class FilterEvaluator:
    """Combine condition results per group, then group results per filter."""

    def __init__(self, catalog: FieldCatalog = CONTACT_FIELDS) -> None:
        self._catalog = catalog
        self._projector = RecordProjector(catalog)
        self._conditions = ConditionEvaluator(catalog)

    @property
    def catalog(self) -> FieldCatalog:
        return self._catalog

    def _resolve_group(self, group: Group) -> _ResolvedGroup:
        return group.logical_operator, tuple((c, self._conditions.resolve(c)) for c in group.conditions)

    def _evaluate_resolved(self, resolved: _ResolvedGroup, projected: ProjectedRecord) -> bool:
        logical, pairs = resolved
        if len(pairs) == 1:
            condition, operator = pairs[0]
            return self._conditions.evaluate(condition, projected, operator)
        return logical.combine(self._conditions.evaluate(c, projected, op) for c, op in pairs)

    def evaluate_group(self, group: Group, projected: ProjectedRecord) -> bool:
        return self._evaluate_resolved(self._resolve_group(group), projected)

    def evaluate_projected(self, config: FilterConfig, projected: ProjectedRecord) -> bool:
        return config.group_operator.combine(
            self.evaluate_group(g, projected) for g in config.groups
        )

    def matches(
        self,
        record: Mapping[str, Any],
        config: FilterConfig,
        lookup_maps: LookupMaps | Mapping[str, Mapping[Any, Any]] | None = None,
    ) -> bool:
        return self.evaluate_projected(config, self._projector.project(record, lookup_maps))

    def is_empty(self, config: FilterConfig | None) -> bool:
        return is_filter_empty(config, self._catalog)

    def apply(
        self,
        records: Sequence[RecordT],
        config: FilterConfig | None,
        lookup_maps: LookupMaps | Mapping[str, Mapping[Any, Any]] | None = None,
    ) -> list[RecordT]:
        """Return the records the filter includes, in input order.

        Operators are resolved once per call; a fallback warns once per condition.
        """
        if config is None or self.is_empty(config):
            return list(records)
        resolved = [self._resolve_group(g) for g in config.groups]
        projected_records = self._projector.project_many(records, lookup_maps)
        return [
            record
            for record, projected in zip(records, projected_records)
            if config.group_operator.combine(self._evaluate_resolved(r, projected) for r in resolved)
        ]


def is_filter_empty(config: FilterConfig | None, catalog: FieldCatalog = CONTACT_FIELDS) -> bool:
    """True only for the untouched default filter.

    One group holding one condition on the catalog default field, with a
    value-taking operator and a blank value. The empty checks always count
    as active.
    """
    if config is None:
        return True
    if len(config.groups) != 1 or len(config.groups[0].conditions) != 1:
        return False
    condition = config.groups[0].conditions[0]
    return (
        condition.field == catalog.default_field
        and requires_value(condition.operator)
        and is_blank(condition.value)
    )


def apply_advanced_filters(
    records: Sequence[RecordT],
    filter_config: FilterConfig | None,
    lookup_maps: LookupMaps | Mapping[str, Mapping[Any, Any]] | None = None,
    catalog: FieldCatalog = CONTACT_FIELDS,
) -> list[RecordT]:
    """Filter ``records`` with ``filter_config`` after projecting lookup ids."""
    return FilterEvaluator(catalog).apply(records, filter_config, lookup_maps)
