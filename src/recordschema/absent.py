"""
Absent sentinel.

ABSENT marks "no value supplied" and is distinct from every real value,
None included. It renders as ``undefined`` in error messages.
"""
from __future__ import annotations

from typing import Any


class _Absent:
    """Singleton type of ABSENT."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __str__(self) -> str:
        return "undefined"

    def __copy__(self) -> "_Absent":
        return self

    def __deepcopy__(self, memo: dict) -> "_Absent":
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


def is_absent(value: Any) -> bool:
    """Check if value is the ABSENT sentinel."""
    return value is ABSENT
