"""
RecordSchema - Runtime Schema Validation for Records

Named field definitions with type/validator rules, aggregated into schemas
that validate whole records and fill in default values.

Key Features:
- Type checks by predicate name ("string", "integer", ...)
- Validator chains with short-circuit or accumulate-errors semantics
- Per-record validation with optional field filters
- Default-value instantiation that never overwrites existing values
- Validation failures are data; configuration mistakes raise

Quick Start:
    from recordschema import Schema

    schema = Schema("user", {
        "name": {"type": "string", "required": True},
        "age": "integer",
    })

    state = schema.validate({"name": "Bob", "age": 22})
    assert state.is_valid

Version: 0.1.0
"""
from __future__ import annotations

import logging

__version__ = "0.1.0"

from .absent import ABSENT, is_absent
from .config import FieldConfig, InstanceConfig
from .exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidFieldSpecError,
    RecordSchemaError,
    UnknownFieldError,
    UnknownPredicateError,
)
from .field_def import FieldDef
from .field_state import FieldState
from .predicates import BUILTIN_PREDICATES, PredicateKind, PredicateRegistry
from .record_state import RecordState
from .schema import Schema
from .utils import get_path

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Sentinel
    "ABSENT",
    "is_absent",
    # Core
    "Schema",
    "FieldDef",
    "FieldState",
    "RecordState",
    # Config
    "FieldConfig",
    "InstanceConfig",
    # Predicates
    "BUILTIN_PREDICATES",
    "PredicateKind",
    "PredicateRegistry",
    # Helpers
    "get_path",
    # Exceptions
    "RecordSchemaError",
    "InvalidArgumentError",
    "ConfigurationError",
    "UnknownPredicateError",
    "UnknownFieldError",
    "InvalidFieldSpecError",
]
