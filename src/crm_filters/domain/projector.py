"""RecordProjector: resolve foreign-key attributes into the labels users filter on."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .fields import CONTACT_FIELDS, FieldCatalog, FieldDescriptor
from .id_coercion import identifier_key

ProjectedRecord = dict[str, str]


class LookupMaps:
    """Read-only ``field key -> (identifier -> label)`` mapping.

    Identifiers are normalized so ``26``, ``"26"`` and ``" 26 "`` hit the
    same entry. The source mapping is copied, never mutated.
    """

    __slots__ = ("_maps",)

    def __init__(self, maps: Mapping[str, Mapping[Any, Any]] | None = None) -> None:
        normalized: dict[str, dict[str, str]] = {}
        for field, table in (maps or {}).items():
            entries: dict[str, str] = {}
            for identifier, label in (table or {}).items():
                key = identifier_key(identifier)
                if key is None or label is None:
                    continue
                entries[key] = str(label)
            normalized[str(field)] = entries
        self._maps = normalized

    @classmethod
    def coerce(cls, maps: LookupMaps | Mapping[str, Mapping[Any, Any]] | None) -> LookupMaps:
        if isinstance(maps, LookupMaps):
            return maps
        return cls(maps)

    def has_field(self, field: str) -> bool:
        return field in self._maps

    def label_for(self, field: str, identifier: Any) -> str | None:
        table = self._maps.get(field)
        if not table:
            return None
        key = identifier_key(identifier)
        if key is None:
            return None
        return table.get(key)

    def fields(self) -> list[str]:
        return list(self._maps)

    def __len__(self) -> int:
        return len(self._maps)

    def __repr__(self) -> str:
        return f"LookupMaps(fields={self.fields()!r})"


def _is_identifier(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class RecordProjector:
    """Flatten raw records into ``field key -> label`` strings for evaluation."""

    def __init__(self, catalog: FieldCatalog = CONTACT_FIELDS) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> FieldCatalog:
        return self._catalog

    def project(
        self,
        record: Mapping[str, Any],
        lookup_maps: LookupMaps | Mapping[str, Mapping[Any, Any]] | None = None,
    ) -> ProjectedRecord:
        """Return the projected view of ``record``; never raises, never leaks ids."""
        maps = LookupMaps.coerce(lookup_maps)
        return {d.key: self._project_field(d, record, maps) for d in self._catalog}

    def project_many(
        self,
        records: Iterable[Mapping[str, Any]],
        lookup_maps: LookupMaps | Mapping[str, Mapping[Any, Any]] | None = None,
    ) -> list[ProjectedRecord]:
        maps = LookupMaps.coerce(lookup_maps)
        return [self.project(r, maps) for r in records]

    def _project_field(
        self,
        descriptor: FieldDescriptor,
        record: Mapping[str, Any],
        maps: LookupMaps,
    ) -> str:
        # Identifier attribute wins when populated
        if descriptor.id_attribute:
            raw_id = record.get(descriptor.id_attribute)
            if raw_id is not None and raw_id != "":
                return maps.label_for(descriptor.key, raw_id) or ""

        raw = record.get(descriptor.key)
        if raw is None:
            return ""
        if isinstance(raw, str):
            if maps.has_field(descriptor.key):
                label = maps.label_for(descriptor.key, raw)
                if label is not None:
                    return label
            return raw
        if _is_identifier(raw) and (descriptor.id_attribute or maps.has_field(descriptor.key)):
            return maps.label_for(descriptor.key, raw) or ""
        return str(raw)
