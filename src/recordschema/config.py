"""
RecordSchema Config Models

Pydantic models for the loose config mappings accepted at the API boundary:
- FieldConfig: per-field options (merged over a schema's field defaults)
- InstanceConfig: options for Schema.instance()

Keys may be given in snake_case or camelCase (``default_value`` or
``defaultValue``). Unrecognized keys are ignored.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .absent import ABSENT
from .exceptions import InvalidFieldSpecError


class FieldConfig(BaseModel):
    """Recognized options of a single field definition."""
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
        arbitrary_types_allowed=True,
        frozen=True,
    )

    type: Optional[str] = Field(None, description="Registered predicate name")
    validator: Any = Field(ABSENT, description="Predicate, predicate name, or sequence of them")
    required: bool = False
    default_value: Any = Field(ABSENT, description="Literal default or zero-argument producer")
    required_message: Optional[str] = None
    invalid_message: Optional[str] = None
    stop_if_invalid: bool = True

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value: Any) -> Any:
        """Empty names mean untyped; enum members collapse to their value."""
        if value is None or value == "":
            return None
        if isinstance(value, str):
            return str(getattr(value, "value", value))
        return value


class InstanceConfig(BaseModel):
    """Options for Schema.instance()."""
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    field_names: Optional[list[str]] = Field(None, alias="fields")
    limit_to_schema: bool = True


# =============================================================================
# Parsing
# =============================================================================

def parse_field_config(
    name: str,
    params: Mapping[str, Any],
    defaults: Optional[Mapping[str, Any]] = None,
) -> FieldConfig:
    """
    Merge params over defaults and validate the result.

    Each mapping is parsed on its own first, so a camelCase key in the
    defaults never outranks the snake_case spelling in the params.

    Raises:
        InvalidFieldSpecError: If a recognized key has the wrong shape
    """
    merged: dict[str, Any] = {}
    for source in (defaults or {}, params):
        config = _validate_field_config(name, dict(source))
        merged.update({key: getattr(config, key) for key in config.model_fields_set})
    return _validate_field_config(name, merged)


def _validate_field_config(name: str, data: Mapping[str, Any]) -> FieldConfig:
    try:
        return FieldConfig.model_validate(data)
    except ValidationError as e:
        raise InvalidFieldSpecError(
            message=f"Field '{name}' config is invalid: {e.error_count()} errors",
            details={"field": name, "errors": e.errors(include_context=False)},
        )


def parse_instance_config(config: Optional[Mapping[str, Any]]) -> InstanceConfig:
    """
    Validate the config mapping passed to Schema.instance().

    Raises:
        InvalidFieldSpecError: If the config has the wrong shape
    """
    if config is None:
        return InstanceConfig()
    if isinstance(config, InstanceConfig):
        return config
    if not isinstance(config, Mapping):
        raise InvalidFieldSpecError(
            message=f"Instance config must be a mapping, got {type(config).__name__}",
            details={"config": repr(config)},
        )
    try:
        return InstanceConfig.model_validate(dict(config))
    except ValidationError as e:
        raise InvalidFieldSpecError(
            message=f"Instance config is invalid: {e.error_count()} errors",
            details={"errors": e.errors(include_context=False)},
        )
