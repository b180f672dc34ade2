"""Field catalog: the filterable contact attributes and their semantic types."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Iterator

from pydantic import BaseModel, Field, model_validator


class SemanticType(str, Enum):
    """How a field is matched."""

    text = "text"               # free-form string matching
    enumerated = "enumerated"   # closed value set, matched by identity


class FieldOption(BaseModel):
    """One permitted value of an enumerated field."""

    model_config = {"frozen": True}

    value: str = Field(..., description="Stored value")
    label: str = Field(..., description="Display label")


class FieldDescriptor(BaseModel):
    """A single filterable attribute."""

    model_config = {"frozen": True}

    key: str = Field(..., min_length=1, description="Field key used by conditions")
    label: str = Field(default="", description="Display label")
    semantic_type: SemanticType = Field(default=SemanticType.text)
    allowed_values: tuple[FieldOption, ...] | None = Field(
        default=None,
        description="Permitted values, enumerated fields only",
    )
    id_attribute: str | None = Field(
        default=None,
        description="Raw record attribute holding a foreign-key identifier for this field",
    )

    @model_validator(mode="after")
    def _check_shape(self) -> FieldDescriptor:
        if self.semantic_type is SemanticType.enumerated and not self.allowed_values:
            raise ValueError(f"enumerated field {self.key!r} needs allowed_values")
        if self.semantic_type is SemanticType.text and self.allowed_values is not None:
            raise ValueError(f"text field {self.key!r} cannot declare allowed_values")
        if not self.label:
            object.__setattr__(self, "label", self.key.replace("_", " ").title())
        return self

    def option_label(self, value: str) -> str | None:
        """Label of the allowed value matching ``value`` (case-insensitive)."""
        if not self.allowed_values:
            return None
        wanted = value.strip().casefold()
        for option in self.allowed_values:
            if option.value.casefold() == wanted:
                return option.label
        return None

    def allows(self, value: str) -> bool:
        """True when ``value`` matches an allowed value or its label."""
        if not self.allowed_values:
            return True
        wanted = value.strip().casefold()
        return any(
            wanted in (option.value.casefold(), option.label.casefold())
            for option in self.allowed_values
        )


class FieldCatalog(BaseModel):
    """Immutable registry of filterable fields."""

    model_config = {"frozen": True}

    fields: tuple[FieldDescriptor, ...] = Field(..., min_length=1)
    default_field: str = Field(default="", description="Field used by fresh conditions")

    @model_validator(mode="after")
    def _check_keys(self) -> FieldCatalog:
        seen: set[str] = set()
        for descriptor in self.fields:
            if descriptor.key in seen:
                raise ValueError(f"duplicate field key {descriptor.key!r}")
            seen.add(descriptor.key)
        if not self.default_field:
            object.__setattr__(self, "default_field", self.fields[0].key)
        elif self.default_field not in seen:
            raise ValueError(f"default_field {self.default_field!r} is not catalogued")
        return self

    def __iter__(self) -> Iterator[FieldDescriptor]:  # type: ignore[override]
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, key: object) -> bool:
        return any(d.key == key for d in self.fields)

    def get(self, key: str) -> FieldDescriptor | None:
        for descriptor in self.fields:
            if descriptor.key == key:
                return descriptor
        return None

    def keys(self) -> list[str]:
        return [d.key for d in self.fields]

    def label_for(self, key: str) -> str:
        descriptor = self.get(key)
        return descriptor.label if descriptor else str(key)

    def semantic_type_for(self, key: str) -> SemanticType:
        """Unknown keys are treated as text."""
        descriptor = self.get(key)
        return descriptor.semantic_type if descriptor else SemanticType.text

    @classmethod
    def from_json(cls, raw: str | bytes) -> FieldCatalog:
        data = json.loads(raw)
        if isinstance(data, list):
            data = {"fields": data}
        return cls.model_validate(data)

    @classmethod
    def load(cls, path: Path | str) -> FieldCatalog:
        """Load a catalog from a JSON file (a list of fields or a catalog object)."""
        with open(path, encoding="utf-8") as f:
            return cls.from_json(f.read())


def _options(*pairs: tuple[str, str]) -> tuple[FieldOption, ...]:
    return tuple(FieldOption(value=v, label=l) for v, l in pairs)


def _same(*values: str) -> tuple[FieldOption, ...]:
    return tuple(FieldOption(value=v, label=v) for v in values)


CONTACT_FIELDS = FieldCatalog(
    fields=(
        # Basic info
        FieldDescriptor(key="first_name", label="First Name"),
        FieldDescriptor(key="last_name", label="Last Name"),
        FieldDescriptor(key="email", label="Email"),
        FieldDescriptor(key="phone", label="Phone"),
        # Contact type & status
        FieldDescriptor(
            key="contact_type",
            label="Contact Type",
            semantic_type=SemanticType.enumerated,
            allowed_values=_options(
                ("it_candidate", "IT Candidate"),
                ("healthcare_candidate", "Healthcare Candidate"),
                ("vendor_client", "Vendor/Client"),
                ("empanelment_contact", "Empanelment Contact"),
                ("internal_india", "Internal India"),
                ("internal_usa", "Internal USA"),
            ),
        ),
        FieldDescriptor(
            key="status",
            label="Status",
            semantic_type=SemanticType.enumerated,
            id_attribute="workflow_status_id",
            allowed_values=_options(
                ("Initial Contact", "Initial Contact"),
                ("Spoke to candidate", "Spoke to candidate"),
                ("Resume needs to be prepared", "Resume needs to be prepared"),
                ("Resume prepared and sent for review", "Resume prepared"),
                ("Assigned to Recruiter", "Assigned to Recruiter"),
                ("Recruiter started marketing", "Recruiter started marketing"),
                ("Placed into Job", "Placed into Job"),
                ("Candidate declined marketing", "Candidate declined"),
                ("Candidate on vacation", "On vacation"),
                ("Candidate not responding", "Not responding"),
                ("Exclusive roles only", "Exclusive roles"),
            ),
        ),
        # Professional info
        FieldDescriptor(
            key="visa_status",
            label="Visa Status",
            semantic_type=SemanticType.enumerated,
            id_attribute="visa_status_id",
            allowed_values=_same(
                "F1", "OPT", "STEM OPT", "H1B", "H4", "H4 EAD", "GC EAD", "GC", "USC"
            ),
        ),
        FieldDescriptor(key="job_title", label="Job Title", id_attribute="job_title_id"),
        FieldDescriptor(
            key="years_experience",
            label="Years of Experience",
            semantic_type=SemanticType.enumerated,
            id_attribute="years_experience_id",
            allowed_values=_options(
                ("0", "0"),
                ("1 to 3", "1 to 3"),
                ("4 to 6", "4 to 6"),
                ("7 to 9", "7 to 9"),
                ("10 -15", "10 to 15"),
                ("15+", "15+"),
            ),
        ),
        # Location
        FieldDescriptor(
            key="country",
            label="Country",
            semantic_type=SemanticType.enumerated,
            id_attribute="country_id",
            allowed_values=_same("USA", "India"),
        ),
        FieldDescriptor(key="state", label="State", id_attribute="state_id"),
        FieldDescriptor(key="city", label="City", id_attribute="city_id"),
        # Other
        FieldDescriptor(
            key="referral_source",
            label="Referral Source",
            semantic_type=SemanticType.enumerated,
            id_attribute="referral_source_id",
            allowed_values=_options(
                ("FB", "Facebook"),
                ("Google", "Google"),
                ("Friend", "Friend"),
            ),
        ),
        FieldDescriptor(key="remarks", label="Remarks"),
    ),
    default_field="first_name",
)
