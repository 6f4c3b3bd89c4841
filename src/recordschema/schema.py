"""
RecordSchema Schema

A named, ordered set of FieldDefs that validates whole records and fills
in default values.

Usage:
    schema = Schema("user", {
        "name": {"type": "string", "required": True},
        "age": "integer",
        "created": {"type": "date", "default_value": datetime.now},
    })

    state = schema.validate({"age": 14})
    state.is_valid                  # False
    state.fields["name"].errors     # ["name: undefined is not a string"]

    record = schema.instance({"name": "Bob"})
    # {"name": "Bob", "created": datetime(...)}
"""
from __future__ import annotations

import logging
from collections.abc import Collection, Mapping
from typing import Any, Iterator, Optional

from .config import parse_instance_config
from .exceptions import InvalidFieldSpecError, UnknownFieldError
from .field_def import FieldDef
from .field_state import FieldState
from .predicates import PredicateRegistry
from .record_state import RecordState
from .utils import has_value, write_value

logger = logging.getLogger(__name__)


class Schema:
    """
    Ordered mapping of field name -> FieldDef.

    Attributes:
        name: Schema name, used in diagnostics
        fields: FieldDefs keyed by name, in insertion order
        field_defaults: Config merged under every field's own config
        registry: Predicate registry shared by this schema's fields
    """

    def __init__(
        self,
        name: str,
        fields: Any = None,
        field_defaults: Optional[Mapping[str, Any]] = None,
        registry: Optional[PredicateRegistry] = None,
    ) -> None:
        if field_defaults is not None and not isinstance(field_defaults, Mapping):
            raise InvalidFieldSpecError(
                message=f"field_defaults must be a mapping, got {type(field_defaults).__name__}",
                details={"field_defaults": repr(field_defaults)},
                schema_name=name,
            )

        self.name = name
        self.fields: dict[str, FieldDef] = {}
        self.field_defaults: dict[str, Any] = dict(field_defaults or {})
        self.registry = registry if registry is not None else PredicateRegistry()

        if not fields:
            return

        if isinstance(fields, Mapping):
            for field_name, spec in fields.items():
                self.add_field(field_name, spec)
        elif isinstance(fields, (list, tuple)):
            for entry in fields:
                self._add_entry(entry)
        else:
            raise InvalidFieldSpecError(
                message=f"Schema fields must be a mapping or a sequence, got {type(fields).__name__}",
                details={"fields": repr(fields)},
                schema_name=name,
            )

    def _add_entry(self, entry: Any) -> None:
        """Add one item of a sequence-form field list."""
        if isinstance(entry, str):
            self.add_field(entry)
        elif isinstance(entry, Mapping):
            self.add_field(entry)
        elif isinstance(entry, (list, tuple)) and len(entry) == 2:
            self.add_field(entry[0], entry[1])
        else:
            raise InvalidFieldSpecError(
                message=f"Schema '{self.name}' field entry must be a name, "
                        f"a (name, spec) pair or a mapping with a 'name' key",
                details={"entry": repr(entry)},
                schema_name=self.name,
            )

    def add_field(self, name: Any, spec: Any = None) -> FieldDef:
        """
        Define (or redefine) a field.

        ``name`` may itself be a config mapping carrying a "name" key.
        An existing field with the same name is replaced.

        Returns:
            The new FieldDef
        """
        if isinstance(name, Mapping):
            if "name" not in name:
                raise InvalidFieldSpecError(
                    message=f"Schema '{self.name}' field config has no 'name' key",
                    details={"config": repr(name)},
                    schema_name=self.name,
                )
            return self.add_field(name["name"], name)

        field_def = FieldDef(name, spec, schema=self)
        if name in self.fields:
            logger.debug("Schema %s: redefining field %s", self.name, name)
        self.fields[name] = field_def
        return field_def

    def get_field(self, name: str) -> FieldDef:
        """
        Get a FieldDef by name.

        Raises:
            UnknownFieldError: If the schema has no such field
        """
        if name not in self.fields:
            raise UnknownFieldError(
                message=f"Schema {self.name} has no field {name}",
                details={"field": name, "known": list(self.fields)},
                schema_name=self.name,
            )
        return self.fields[name]

    def has_field(self, name: str) -> bool:
        return name in self.fields

    @property
    def field_names(self) -> list[str]:
        return list(self.fields)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(
        self,
        record: Any,
        filter: Optional[Collection[str]] = None,
    ) -> RecordState:
        """Validate a record; fields outside ``filter`` are left unchecked."""
        return RecordState(record, self, filter)

    def validate_field(self, name: str, value: Any) -> FieldState:
        """Validate a single value against one field."""
        return self.get_field(name).validate(value)

    # -------------------------------------------------------------------------
    # Instantiation
    # -------------------------------------------------------------------------

    def instance(
        self,
        record: Any = None,
        config: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Fill in a record's missing fields from field defaults.

        The record is mutated in place and returned; values it already
        has are never overwritten.

        Args:
            record: Mapping or attribute object; a new dict when None
            config: Optional ``fields`` (names to process, default all)
                and ``limit_to_schema`` (default True)

        Returns:
            The same record

        Raises:
            UnknownFieldError: If a requested field is not in the schema
                and ``limit_to_schema`` is set
        """
        options = parse_instance_config(config)
        if record is None:
            record = {}

        names = options.field_names if options.field_names is not None else self.field_names

        # Unknown names are rejected before the record is touched.
        unknown = [n for n in names if n not in self.fields]
        if unknown and options.limit_to_schema:
            raise UnknownFieldError(
                message=f"Schema {self.name} has no field {unknown[0]}",
                details={"fields": unknown},
                schema_name=self.name,
            )

        for field_name in names:
            if field_name not in self.fields or has_value(record, field_name):
                continue

            field_def = self.fields[field_name]
            if field_def.has_default:
                write_value(record, field_name, field_def.resolve_default())
                logger.debug("Schema %s: applied default for %s", self.name, field_name)

        return record

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[FieldDef]:
        return iter(self.fields.values())

    def __repr__(self) -> str:
        return f"Schema(name={self.name!r}, fields={self.field_names!r})"
