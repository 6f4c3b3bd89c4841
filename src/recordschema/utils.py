"""
RecordSchema Utilities

Helpers shared by FieldDef, Schema and RecordState:
- get_path: dot-notation lookup over mappings and attributes
- stringify: render any value for an error message
- read_value / has_value / write_value: record access for mappings
  and plain attribute objects
"""
from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from .absent import ABSENT, is_absent


# =============================================================================
# Path Resolution
# =============================================================================

def get_path(obj: Any, path: str, default: Any = None) -> Any:
    """
    Resolve a dot-notation path to a value.

    Supports:
    - Dictionary keys: "config.fields"
    - Object attributes: "schema.field_defaults"
    - Mixed nesting: "schema.fields.name"

    Args:
        obj: The root object to resolve from
        path: Dot-notation path
        default: Returned when any step of the path is missing

    Returns:
        The resolved value, or ``default``
    """
    if obj is None:
        return default

    current = obj
    for part in path.split("."):
        if isinstance(current, Mapping):
            if part not in current:
                return default
            current = current[part]
        elif hasattr(current, part):
            current = getattr(current, part)
        else:
            return default

    return current


# =============================================================================
# Message Rendering
# =============================================================================

def stringify(value: Any) -> str:
    """Render a value for an error message. Never raises."""
    if isinstance(value, str):
        return value
    if is_absent(value):
        return "undefined"
    try:
        return str(value)
    except Exception:
        return "-unreadable-string-"


# =============================================================================
# Record Access
# =============================================================================

def read_value(record: Any, name: str) -> Any:
    """Read a field from a record, ABSENT if the record lacks it."""
    if record is None:
        return ABSENT
    if isinstance(record, Mapping):
        return record.get(name, ABSENT)
    return getattr(record, name, ABSENT)


def has_value(record: Any, name: str) -> bool:
    """Check if the record itself carries a field (any value, None included)."""
    if isinstance(record, Mapping):
        return name in record
    return name in getattr(record, "__dict__", {})


def write_value(record: Any, name: str, value: Any) -> None:
    """Set a field on a record."""
    if isinstance(record, MutableMapping):
        record[name] = value
    else:
        setattr(record, name, value)
