"""
RecordSchema Field Definition

A single field's validation contract: type check, validator chain,
required flag and default value.

Validators:
A validator is either
1. a callable returning a falsy value when there are NO errors, and True
   (or an error message / structured error) when there ARE errors,
2. a string naming a registered predicate (fails when the predicate
   returns False),
3. a list/tuple of (1) and/or (2), applied in order.

Field specs:
- "string"                    -> {"type": "string"}
- callable or list/tuple      -> {"validator": spec}
- mapping                     -> full config (see config.FieldConfig)
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

from .absent import ABSENT, is_absent
from .config import FieldConfig, parse_field_config
from .exceptions import ConfigurationError, InvalidFieldSpecError
from .field_state import FieldState
from .predicates import PredicateKind, PredicateRegistry
from .utils import get_path, stringify

if TYPE_CHECKING:
    from .schema import Schema


# =============================================================================
# Spec Normalization
# =============================================================================

def normalize_spec(name: str, spec: Any) -> Mapping[str, Any]:
    """
    Resolve a loose field spec into a config mapping.

    Raises:
        InvalidFieldSpecError: If the spec is none of the accepted shapes
    """
    if spec is None:
        return {}
    if isinstance(spec, str):
        return {"type": spec}
    if callable(spec) or isinstance(spec, (list, tuple)):
        return {"validator": spec}
    if isinstance(spec, Mapping):
        return spec
    raise InvalidFieldSpecError(
        message=f"Field '{name}' spec must be a type name, predicate, "
                f"list of predicates or config mapping, got {type(spec).__name__}",
        details={"field": name, "spec": repr(spec)},
    )


# =============================================================================
# Field Definition
# =============================================================================

class FieldDef:
    """
    Validation rules for one named field.

    Built once from a spec and not changed afterwards; redefining a field
    on a schema replaces the FieldDef.
    """

    def __init__(
        self,
        name: str,
        spec: Any = None,
        schema: Optional[Schema] = None,
        registry: Optional[PredicateRegistry] = None,
    ) -> None:
        if not isinstance(name, str) or not name:
            raise ConfigurationError(
                message=f"Field name must be a non-empty string, got: {name!r}",
                details={"name": repr(name)},
                schema_name=getattr(schema, "name", None),
            )

        defaults = get_path(schema, "field_defaults", None) or {}
        config = parse_field_config(name, normalize_spec(name, spec), defaults)

        self.name = name
        self.schema = schema
        if registry is None:
            registry = get_path(schema, "registry")
        self.registry = registry if registry is not None else PredicateRegistry()
        self.config: FieldConfig = config

        self.type: Optional[str] = config.type
        self.validator: Any = config.validator
        self.required: bool = config.required
        self.stop_if_invalid: bool = config.stop_if_invalid
        self.default_value: Any = config.default_value
        self.invalid_message: str = (
            config.invalid_message if config.invalid_message is not None else f"{name} invalid"
        )
        self.required_message: str = (
            config.required_message if config.required_message is not None else f"{name} required"
        )

    @property
    def has_default(self) -> bool:
        return not is_absent(self.default_value)

    @property
    def has_validator(self) -> bool:
        return not is_absent(self.validator) and self.validator is not None

    def resolve_default(self) -> Any:
        """
        Materialize the default value.

        Callables are invoked as zero-argument producers, except on fields
        whose declared type is "function": those hold the callable itself.
        """
        if not self.has_default:
            return ABSENT
        if callable(self.default_value) and self.type != PredicateKind.FUNCTION.value:
            return self.default_value()
        return self.default_value

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def _run_test(self, value: Any, test: Any) -> Any:
        """Apply one validator entry. Returns a falsy value when there is no error."""
        if isinstance(test, str):
            return not self.registry.get(test)(value)
        if callable(test):
            return test(value)
        raise InvalidFieldSpecError(
            message=f"Field '{self.name}' has a bad validator: {test!r}",
            details={"field": self.name, "validator": repr(test)},
            schema_name=getattr(self.schema, "name", None),
        )

    def _error_entry(self, error: Any) -> Any:
        return self.invalid_message if error is True else error

    def validate(self, value: Any = ABSENT) -> FieldState:
        """
        Validate a value against this field's rules.

        Args:
            value: The raw value; ABSENT when the record lacks the field

        Returns:
            FieldState with any validation errors

        Raises:
            ConfigurationError: If a predicate name is unknown or a
                validator entry is neither a string nor a callable
        """
        if (is_absent(value) or not value) and not self.required:
            return FieldState(self.name, value)

        errors: list[Any] = []

        if self.type is not None:
            if self._run_test(value, self.type):
                errors.append(f"{self.name}: {stringify(value)} is not a {self.type}")

        if self.required and not value and not errors:
            errors.append(self.required_message)

        if errors and self.stop_if_invalid:
            return FieldState(self.name, value, errors)

        if isinstance(self.validator, (list, tuple)):
            for test in self.validator:
                if errors and self.stop_if_invalid:
                    break
                error = self._run_test(value, test)
                if error:
                    errors.append(self._error_entry(error))
        elif self.has_validator:
            error = self._run_test(value, self.validator)
            if error:
                errors.append(self._error_entry(error))

        return FieldState(self.name, value, errors)

    def __repr__(self) -> str:
        return (
            f"FieldDef(name={self.name!r}, type={self.type!r}, "
            f"required={self.required!r}, has_default={self.has_default!r})"
        )
