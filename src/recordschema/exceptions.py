"""
RecordSchema Exception Hierarchy

Exceptions raised for programmer mistakes in schema construction and use.
Data validation failures are never raised; they are reported as entries in
FieldState.errors.

Exception codes follow the pattern: RS_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class RecordSchemaError(Exception):
    """
    Base exception for all RecordSchema errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (RS_*)
        details: Additional context about the error
        schema_name: Name of the schema involved, if any
    """
    message: str
    code: str = "RS_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    schema_name: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @property
    def field_name(self) -> Optional[str]:
        """Name of the field involved, when the raiser recorded one."""
        return self.details.get("field")

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.field_name:
            parts.append(f"(field: {self.field_name})")
        if self.schema_name:
            parts.append(f"(schema: {self.schema_name})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.field_name:
            result["field"] = self.field_name
        if self.details:
            result["details"] = self.details
        if self.schema_name:
            result["schema_name"] = self.schema_name
        return result


# =============================================================================
# Argument Errors
# =============================================================================

@dataclass
class InvalidArgumentError(RecordSchemaError):
    """A value object was constructed with arguments of the wrong shape."""
    code: str = "RS_INVALID_ARGUMENT"


# =============================================================================
# Configuration Errors
# =============================================================================

@dataclass
class ConfigurationError(RecordSchemaError):
    """
    Schema or field definition is unusable.

    Signals a programming mistake, never bad data. Raised synchronously
    and aborts the whole validate/instance call.
    """
    code: str = "RS_CONFIGURATION_ERROR"


@dataclass
class UnknownPredicateError(ConfigurationError):
    """Predicate name is not registered."""
    code: str = "RS_UNKNOWN_PREDICATE"


@dataclass
class UnknownFieldError(ConfigurationError):
    """Field name is not defined in the schema."""
    code: str = "RS_UNKNOWN_FIELD"


@dataclass
class InvalidFieldSpecError(ConfigurationError):
    """Field spec or config mapping has the wrong shape."""
    code: str = "RS_INVALID_FIELD_SPEC"
