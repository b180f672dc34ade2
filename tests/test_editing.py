"""Authoring helper tests: edits keep groups and filters non-empty."""

import pytest

from crm_filters.domain import editing
from crm_filters.domain.evaluator import is_filter_empty
from crm_filters.domain.filters import Condition, FilterConfig, Group, LogicalOperator, default_filter


def _config() -> FilterConfig:
    return FilterConfig(
        groups=[
            Group(
                id="g1",
                conditions=[
                    Condition(id="c1", field="first_name", operator="contains", value="jo"),
                    Condition(id="c2", field="visa_status", operator="equals", value="H1B"),
                ],
            )
        ]
    )


class TestConditionEdits:
    """Add, remove and update conditions."""

    def test_add_condition_appends_default(self):
        config = editing.add_condition(_config(), "g1")
        conditions = config.groups[0].conditions
        assert len(conditions) == 3
        assert conditions[-1].field == "first_name"
        assert conditions[-1].value == ""

    def test_remove_condition(self):
        config = editing.remove_condition(_config(), "g1", "c1")
        assert [c.id for c in config.groups[0].conditions] == ["c2"]

    def test_removing_last_condition_resets_to_default(self):
        config = editing.remove_condition(_config(), "g1", "c1")
        config = editing.remove_condition(config, "g1", "c2")
        conditions = config.groups[0].conditions
        assert len(conditions) == 1
        assert conditions[0].operator == "starts_with"
        assert is_filter_empty(config)

    def test_field_change_across_types_resets_operator_and_value(self):
        config = editing.update_condition(_config(), "g1", "c1", field="country")
        condition = config.groups[0].conditions[0]
        assert condition.field == "country"
        assert condition.operator == "equals"
        assert condition.value == ""

    def test_field_change_within_type_keeps_operator(self):
        config = editing.update_condition(_config(), "g1", "c1", field="last_name")
        condition = config.groups[0].conditions[0]
        assert condition.operator == "contains"
        assert condition.value == "jo"

    def test_value_update(self):
        config = editing.update_condition(_config(), "g1", "c2", value="OPT")
        assert config.groups[0].conditions[1].value == "OPT"

    def test_original_not_mutated(self):
        original = _config()
        editing.update_condition(original, "g1", "c1", value="zz")
        assert original.groups[0].conditions[0].value == "jo"

    def test_unknown_group_raises(self):
        with pytest.raises(KeyError):
            editing.add_condition(_config(), "missing")


class TestGroupEdits:
    """Add and remove groups, switch operators."""

    def test_add_and_remove_group(self):
        config = editing.add_group(_config())
        assert len(config.groups) == 2
        config = editing.remove_group(config, "g1")
        assert len(config.groups) == 1
        assert config.groups[0].id != "g1"

    def test_removing_last_group_resets_to_default(self):
        config = editing.remove_group(_config(), "g1")
        assert len(config.groups) == 1
        assert is_filter_empty(config)

    def test_operators(self):
        config = editing.set_group_operator(_config(), "g1", "or")
        assert config.groups[0].logical_operator is LogicalOperator.OR
        config = editing.set_filter_operator(config, LogicalOperator.OR)
        assert config.group_operator is LogicalOperator.OR

    def test_clear_returns_default(self):
        cleared = editing.clear()
        assert is_filter_empty(cleared)
        assert cleared.groups[0].conditions[0].field == default_filter().groups[0].conditions[0].field
