"""
RecordSchema Field State

The outcome of validating one field's value.

A FieldState is frozen: re-validating a field produces a new FieldState
rather than changing an existing one.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .absent import ABSENT
from .exceptions import InvalidArgumentError
from .utils import stringify


@dataclass(frozen=True)
class FieldState:
    """
    Result of validating a single field.

    Attributes:
        name: Field name (matches the FieldDef that produced it)
        value: The raw value that was validated
        errors: Error entries; strings or structured objects from validators
        checked: False when validation was skipped (e.g. by a field filter)
    """
    name: str
    value: Any = ABSENT
    errors: list[Any] = field(default_factory=list)
    checked: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidArgumentError(
                message=f"FieldState name must be a non-empty string, got: {self.name!r}",
                details={"name": repr(self.name)},
            )
        if isinstance(self.errors, (str, bytes)) or not isinstance(self.errors, Sequence):
            raise InvalidArgumentError(
                message=f"FieldState errors for '{self.name}' must be a sequence",
                details={"field": self.name, "errors": repr(self.errors)},
            )
        object.__setattr__(self, "errors", list(self.errors))
        object.__setattr__(self, "checked", bool(self.checked))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FieldState:
        """Build a FieldState from a mapping with name/value/errors/checked keys."""
        if not isinstance(data, Mapping):
            raise InvalidArgumentError(
                message=f"FieldState.from_dict expects a mapping, got {type(data).__name__}",
                details={"data": repr(data)},
            )
        return cls(
            name=data.get("name"),
            value=data.get("value", ABSENT),
            errors=data.get("errors", []),
            checked=data.get("checked", True),
        )

    @property
    def is_valid(self) -> bool:
        """True when there are no errors."""
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "value": None if self.value is ABSENT else self.value,
            "errors": list(self.errors),
            "checked": self.checked,
            "is_valid": self.is_valid,
        }

    def __str__(self) -> str:
        if not self.errors:
            return ""
        return f"{self.name} errors: {','.join(stringify(e) for e in self.errors)}"
