"""RecordProjector tests: identifiers resolve to labels and never leak."""

import copy

from crm_filters.domain.fields import CONTACT_FIELDS, FieldCatalog, FieldDescriptor
from crm_filters.domain.id_coercion import identifier_key, to_nullable_number_id
from crm_filters.domain.projector import LookupMaps, RecordProjector

_LOOKUPS = {
    "job_title": {26: "Java Full Stack Developer", 55: "Registered Nurse (RN)"},
    "visa_status": {"34": "H1B", "32": "OPT"},
}


def _project(record: dict, lookups: dict | None = None) -> dict[str, str]:
    return RecordProjector(CONTACT_FIELDS).project(record, lookups if lookups is not None else _LOOKUPS)


class TestIdentifierResolution:
    """Identifier attributes resolve through the lookup maps."""

    def test_id_attribute_resolves_to_label(self):
        projected = _project({"job_title_id": 26, "visa_status_id": 34})
        assert projected["job_title"] == "Java Full Stack Developer"
        assert projected["visa_status"] == "H1B"

    def test_identifier_stored_under_field_key(self):
        projected = _project({"job_title": 26})
        assert projected["job_title"] == "Java Full Stack Developer"

    def test_digit_string_identifier_resolves(self):
        projected = _project({"visa_status": " 32 "})
        assert projected["visa_status"] == "OPT"

    def test_unresolvable_identifier_projects_empty(self):
        projected = _project({"job_title_id": 999, "visa_status": 12})
        assert projected["job_title"] == ""
        assert projected["visa_status"] == ""

    def test_missing_lookup_table_projects_empty_not_raw_id(self):
        projected = _project({"job_title_id": 26}, lookups={})
        assert projected["job_title"] == ""


class TestPassThrough:
    """Plain strings pass through unchanged."""

    def test_plain_string_unchanged(self):
        projected = _project({"first_name": "John", "job_title": "Staff Nurse"})
        assert projected["first_name"] == "John"
        assert projected["job_title"] == "Staff Nurse"

    def test_empty_id_attribute_falls_back_to_field_key(self):
        projected = _project({"job_title_id": None, "job_title": "Engineer"})
        assert projected["job_title"] == "Engineer"

    def test_none_projects_empty(self):
        projected = _project({"email": None})
        assert projected["email"] == ""

    def test_numbers_without_lookup_are_stringified(self):
        projected = _project({"phone": 5551234})
        assert projected["phone"] == "5551234"

    def test_every_catalog_field_present(self):
        projected = _project({})
        assert set(projected) == set(CONTACT_FIELDS.keys())
        assert all(v == "" for v in projected.values())


class TestProjectionPurity:
    """Projection never mutates its inputs and never raises."""

    def test_inputs_not_mutated(self):
        record = {"job_title_id": 26, "first_name": "John"}
        lookups = copy.deepcopy(_LOOKUPS)
        before_record, before_lookups = copy.deepcopy(record), copy.deepcopy(lookups)
        _project(record, lookups)
        assert record == before_record
        assert lookups == before_lookups

    def test_custom_catalog_only_projects_its_fields(self):
        catalog = FieldCatalog(fields=(FieldDescriptor(key="skill", id_attribute="skill_id"),))
        projected = RecordProjector(catalog).project(
            {"skill_id": "7", "first_name": "x"}, {"skill": {7: "Kotlin"}}
        )
        assert projected == {"skill": "Kotlin"}

    def test_project_many_keeps_order(self):
        rows = [{"job_title_id": 55}, {"job_title_id": 26}]
        projected = RecordProjector().project_many(rows, _LOOKUPS)
        assert [p["job_title"] for p in projected] == [
            "Registered Nurse (RN)",
            "Java Full Stack Developer",
        ]


class TestLookupMaps:
    """Identifier keys are normalized."""

    def test_int_and_string_keys_match(self):
        maps = LookupMaps({"job_title": {26: "Java"}})
        assert maps.label_for("job_title", 26) == "Java"
        assert maps.label_for("job_title", "26") == "Java"
        assert maps.label_for("job_title", 26.0) == "Java"
        assert maps.label_for("job_title", None) is None
        assert maps.label_for("city", 26) is None

    def test_coerce_reuses_instance(self):
        maps = LookupMaps({})
        assert LookupMaps.coerce(maps) is maps


class TestIdCoercion:
    """Identifier coercion mirrors what select widgets hand over."""

    def test_number_shapes(self):
        assert to_nullable_number_id(26) == 26
        assert to_nullable_number_id(" 26 ") == 26
        assert to_nullable_number_id(26.0) == 26
        assert to_nullable_number_id({"id": "5"}) == 5
        assert to_nullable_number_id({"value": 9}) == 9

    def test_non_numbers(self):
        assert to_nullable_number_id(None) is None
        assert to_nullable_number_id("") is None
        assert to_nullable_number_id("abc") is None
        assert to_nullable_number_id(2.5) is None
        assert to_nullable_number_id(True) is None
        assert to_nullable_number_id([1]) is None

    def test_identifier_key(self):
        assert identifier_key(26) == "26"
        assert identifier_key("H1B ") == "H1B"
        assert identifier_key("  ") is None
