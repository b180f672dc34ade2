"""Normalize foreign-key identifiers coming from rows and select widgets."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_DIGITS_RE = re.compile(r"^\d+$")


def to_nullable_number_id(value: Any) -> int | None:
    """Return ``value`` as an integer id, or None when it is not one.

    Accepts ints, integral floats, digit-only strings and the ``{"id": ...}``
    / ``{"value": ...}`` shapes produced by select components.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        trimmed = value.strip()
        if _DIGITS_RE.match(trimmed):
            return int(trimmed)
        return None
    if isinstance(value, Mapping):
        if "id" in value:
            return to_nullable_number_id(value["id"])
        if "value" in value:
            return to_nullable_number_id(value["value"])
    return None


def identifier_key(value: Any) -> str | None:
    """Canonical lookup key: numeric ids as digits, other strings trimmed."""
    number = to_nullable_number_id(value)
    if number is not None:
        return str(number)
    if isinstance(value, str):
        trimmed = value.strip()
        return trimmed or None
    return None
