"""Pure edits on a FilterConfig that keep the group/condition invariants.

Every function returns a new FilterConfig; inputs are never mutated.
"""

from __future__ import annotations

from typing import Any

from .fields import CONTACT_FIELDS, FieldCatalog
from .filters import (
    Condition,
    FilterConfig,
    Group,
    LogicalOperator,
    default_condition,
    default_filter,
    default_group,
)
from .operators import default_operator_for


def _replace_group(config: FilterConfig, group_id: str | int, group: Group) -> FilterConfig:
    groups = tuple(group if g.id == group_id else g for g in config.groups)
    return config.model_copy(update={"groups": groups})


def _find_group(config: FilterConfig, group_id: str | int) -> Group:
    for group in config.groups:
        if group.id == group_id:
            return group
    raise KeyError(f"unknown group id {group_id!r}")


def add_condition(
    config: FilterConfig, group_id: str | int, catalog: FieldCatalog = CONTACT_FIELDS
) -> FilterConfig:
    group = _find_group(config, group_id)
    conditions = group.conditions + (default_condition(catalog),)
    return _replace_group(config, group_id, group.model_copy(update={"conditions": conditions}))


def remove_condition(
    config: FilterConfig,
    group_id: str | int,
    condition_id: str | int,
    catalog: FieldCatalog = CONTACT_FIELDS,
) -> FilterConfig:
    """Drop a condition; the last one is replaced by a fresh default condition."""
    group = _find_group(config, group_id)
    remaining = tuple(c for c in group.conditions if c.id != condition_id)
    if not remaining:
        remaining = (default_condition(catalog),)
    return _replace_group(config, group_id, group.model_copy(update={"conditions": remaining}))


def update_condition(
    config: FilterConfig,
    group_id: str | int,
    condition_id: str | int,
    catalog: FieldCatalog = CONTACT_FIELDS,
    **changes: Any,
) -> FilterConfig:
    """Apply ``changes`` (field, operator, value) to one condition.

    Moving to a field of another semantic type resets the operator to that
    type's first operator and clears the value.
    """
    group = _find_group(config, group_id)
    updated: list[Condition] = []
    for condition in group.conditions:
        if condition.id != condition_id:
            updated.append(condition)
            continue
        data = condition.model_dump()
        data.update(changes)
        new_field = changes.get("field")
        if new_field is not None and new_field != condition.field:
            old_type = catalog.semantic_type_for(condition.field)
            new_type = catalog.semantic_type_for(new_field)
            if old_type is not new_type:
                data["operator"] = default_operator_for(new_type).value
                data["value"] = ""
        updated.append(Condition.model_validate(data))
    return _replace_group(config, group_id, group.model_copy(update={"conditions": tuple(updated)}))


def add_group(config: FilterConfig, catalog: FieldCatalog = CONTACT_FIELDS) -> FilterConfig:
    return config.model_copy(update={"groups": config.groups + (default_group(catalog),)})


def remove_group(
    config: FilterConfig, group_id: str | int, catalog: FieldCatalog = CONTACT_FIELDS
) -> FilterConfig:
    """Drop a group; the last one is replaced by a fresh default group."""
    remaining = tuple(g for g in config.groups if g.id != group_id)
    if not remaining:
        remaining = (default_group(catalog),)
    return config.model_copy(update={"groups": remaining})


def set_group_operator(
    config: FilterConfig, group_id: str | int, operator: LogicalOperator | str
) -> FilterConfig:
    group = _find_group(config, group_id)
    updated = Group.model_validate({**group.model_dump(), "logical_operator": operator})
    return _replace_group(config, group_id, updated)


def set_filter_operator(config: FilterConfig, operator: LogicalOperator | str) -> FilterConfig:
    return FilterConfig.model_validate({**config.model_dump(), "group_operator": operator})


def clear(catalog: FieldCatalog = CONTACT_FIELDS) -> FilterConfig:
    return default_filter(catalog)
