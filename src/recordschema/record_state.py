"""
RecordSchema Record State

Aggregates the per-field FieldStates of one record validation pass.
"""
from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING, Any, Optional

from .absent import ABSENT, is_absent
from .field_state import FieldState
from .utils import read_value

if TYPE_CHECKING:
    from .schema import Schema

logger = logging.getLogger(__name__)


class RecordState:
    """
    Validation result for a whole record.

    Holds the record by reference and a back reference to the schema.
    ``fields`` has one FieldState per schema field, in schema order.
    Fields outside ``filter`` get an unchecked, error-free FieldState.
    """

    def __init__(
        self,
        record: Any,
        schema: Schema,
        filter: Optional[Collection[str]] = None,
    ) -> None:
        self.record = record
        self.schema = schema
        self.filter = filter
        self.fields: dict[str, FieldState] = {}
        self.validate(record, filter)

    def validate(
        self,
        record: Any = None,
        filter: Any = ABSENT,
    ) -> RecordState:
        """
        (Re)validate a record, replacing ``fields``.

        Args:
            record: Record to validate (defaults to the stored record)
            filter: Field names to check. Omit it to keep the stored
                filter; pass None to clear it and check every field

        Returns:
            self
        """
        if record is not None:
            self.record = record
        if not is_absent(filter):
            self.filter = filter
        if isinstance(self.filter, str):
            self.filter = [self.filter]

        fields: dict[str, FieldState] = {}
        for name, field_def in self.schema.fields.items():
            value = read_value(self.record, name)
            if self.filter is not None and name not in self.filter:
                fields[name] = FieldState(name, value, [], checked=False)
                continue
            fields[name] = field_def.validate(value)
        self.fields = fields

        logger.debug(
            "Validated record against schema %s: %d fields, %d invalid",
            self.schema.name, len(fields), len(self.invalid_fields),
        )
        return self

    @property
    def is_valid(self) -> bool:
        """True when every field state is valid (vacuously true for no fields)."""
        valid = True
        for state in self.fields.values():
            valid = valid and state.is_valid
        return valid

    @property
    def invalid_fields(self) -> list[str]:
        """Names of invalid fields, in schema order."""
        return [name for name, state in self.fields.items() if not state.is_valid]

    @property
    def errors(self) -> dict[str, list[Any]]:
        """Error lists of invalid fields, keyed by field name."""
        return {
            name: list(state.errors)
            for name, state in self.fields.items()
            if not state.is_valid
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema": self.schema.name,
            "is_valid": self.is_valid,
            "filter": list(self.filter) if self.filter is not None else None,
            "fields": {name: state.to_dict() for name, state in self.fields.items()},
        }

    def __str__(self) -> str:
        return "\n".join(str(state) for state in self.fields.values() if not state.is_valid)

    def __repr__(self) -> str:
        return f"RecordState(schema={self.schema.name!r}, is_valid={self.is_valid!r})"
