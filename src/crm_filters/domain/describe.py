"""Human-readable summary of an active filter for the status banner."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .evaluator import is_filter_empty
from .fields import CONTACT_FIELDS, FieldCatalog, SemanticType
from .filters import Condition, FilterConfig, Group
from .operators import parse_operator, requires_value, spec_for

_LOGGER = logging.getLogger("crm_filters.describe")

NO_FILTERS_MESSAGE = "No filters applied"


def _condition_text(condition: Condition, catalog: FieldCatalog) -> str:
    label = catalog.label_for(condition.field)
    semantic_type = catalog.semantic_type_for(condition.field)
    operator = parse_operator(condition.operator)
    spec = spec_for(operator, semantic_type) if operator is not None else None
    if spec is None and operator is not None:
        # Valid operator id on the wrong field type
        spec = spec_for(operator, SemanticType.text)
    phrase = spec.phrase if spec else str(condition.operator)

    if not requires_value(condition.operator):
        return f"{label} {phrase}"

    value = condition.value
    descriptor = catalog.get(condition.field)
    if descriptor is not None:
        value = descriptor.option_label(value) or value
    return f'{label} {phrase} "{value}"'


def _group_text(group: Group, catalog: FieldCatalog, wrap: bool) -> str:
    joiner = f" {group.logical_operator.value} "
    text = joiner.join(_condition_text(c, catalog) for c in group.conditions)
    if wrap and len(group.conditions) > 1:
        return f"({text})"
    return text


def describe_filter(
    config: FilterConfig | Mapping[str, Any] | None,
    catalog: FieldCatalog = CONTACT_FIELDS,
    empty_message: str = NO_FILTERS_MESSAGE,
) -> str:
    """Summarize ``config`` as one line, e.g. ``First Name starts with "Jo"``.

    Display only: malformed input and the untouched default filter yield
    ``empty_message``. Unknown field or operator ids are shown raw.
    """
    if config is None:
        return empty_message
    if not isinstance(config, FilterConfig):
        try:
            config = FilterConfig.model_validate(config)
        except (ValidationError, TypeError, ValueError) as exc:
            _LOGGER.debug("describe_unparseable", extra={"error": str(exc)})
            return empty_message
    if is_filter_empty(config, catalog):
        return empty_message

    wrap = len(config.groups) > 1
    joiner = f" {config.group_operator.value} "
    return joiner.join(_group_text(g, catalog, wrap) for g in config.groups)

