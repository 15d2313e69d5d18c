"""Read-only access to consultation records.

A consultation record is the nested JSON mapping captured by the consultation
UI. Scorers only ever read from it, and every accessor here tolerates missing
paths and unexpected shapes by returning None / False instead of raising.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

IntelligenceRecord = Mapping[str, Any]

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def get_nested_value(record: Any, path: str) -> Any:
    """
    Resolve a dotted path ("brand.logoUrl") against a nested mapping.

    Args:
        record: Consultation record (any value is accepted)
        path: Dotted path of mapping keys

    Returns:
        The value at the path, or None if any segment is missing
    """
    current = record
    for segment in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(segment)
        if current is None:
            return None
    return current


def has_value(value: Any) -> bool:
    """Whether a resolved value counts as captured."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, _SEQUENCE_TYPES):
        return len(value) > 0
    if isinstance(value, Mapping):
        return len(value) > 0
    if isinstance(value, float) and math.isnan(value):
        return False
    return True


def string_value(value: Any) -> str | None:
    """
    Display string for a captured value.

    Strings are stripped (the literal "null" left behind by some extractors
    counts as absent). For sequences the first non-blank string item is used.
    """
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped or stripped == "null":
            return None
        return stripped
    if isinstance(value, (list, tuple)):
        for item in value:
            if isinstance(item, str) and item.strip():
                return item.strip()
    return None


def first_value(record: Any, keys: Iterable[str]) -> Any:
    """Return the first captured value among ``keys``, in order."""
    for key in keys:
        value = get_nested_value(record, key)
        if has_value(value):
            return value
    return None


def first_string(record: Any, keys: Iterable[str]) -> str | None:
    """Return the first usable display string among ``keys``, in order."""
    for key in keys:
        text = string_value(get_nested_value(record, key))
        if text:
            return text
    return None


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 rounding away from zero for positives."""
    return int(math.floor(value + 0.5))


def percentage(part: float, whole: float) -> int:
    """Integer percentage of ``part`` in ``whole``; 0 when ``whole`` is not positive."""
    if whole <= 0:
        return 0
    return round_half_up(100 * part / whole)
