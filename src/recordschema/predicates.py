"""
RecordSchema Predicate Registry

Type predicates looked up by name from field definitions.

Key components:
- PredicateKind: The built-in predicate names
- BUILTIN_PREDICATES: Implementation of each built-in kind
- PredicateRegistry: Name -> predicate lookup, extensible per application

A type predicate returns True when the value IS of the named type. This is
the opposite polarity of a field validator, which returns a truthy value
when there IS an error.

Registries are plain objects injected into Schema/FieldDef; there is no
module-level mutable registry.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any, Callable, Iterator, Optional, Union

from .exceptions import ConfigurationError, UnknownPredicateError

Predicate = Callable[[Any], Any]


# =============================================================================
# Built-in Predicate Kinds
# =============================================================================

class PredicateKind(str, Enum):
    """Names of the predicates every registry starts with."""
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    DATE = "date"
    FUNCTION = "function"
    NULL = "null"
    EMPTY = "empty"


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """Real numbers and Decimals, excluding bools and NaN."""
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, Decimal) and value.is_nan():
        return False
    return True


def is_integer(value: Any) -> bool:
    """Integral numbers, including integral floats such as 2.0."""
    if not is_number(value):
        return False
    if isinstance(value, int):
        return True
    if not _is_finite(value):
        return False
    try:
        return value % 1 == 0
    except (TypeError, ArithmeticError):
        return False


def is_decimal(value: Any) -> bool:
    """Finite numbers with a fractional part."""
    if not is_number(value) or not _is_finite(value):
        return False
    return not is_integer(value)


def _is_finite(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    try:
        return math.isfinite(value)
    except OverflowError:
        # Too large for a float, but still finite.
        return True


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_date(value: Any) -> bool:
    # datetime is a subclass of date
    return isinstance(value, date)


def is_function(value: Any) -> bool:
    return callable(value)


def is_null(value: Any) -> bool:
    return value is None


def is_empty(value: Any) -> bool:
    """None, or a string/collection of length zero."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict, set, frozenset, Mapping)):
        return len(value) == 0
    return False


BUILTIN_PREDICATES: dict[PredicateKind, Predicate] = {
    PredicateKind.STRING: is_string,
    PredicateKind.NUMBER: is_number,
    PredicateKind.INTEGER: is_integer,
    PredicateKind.DECIMAL: is_decimal,
    PredicateKind.BOOLEAN: is_boolean,
    PredicateKind.ARRAY: is_array,
    PredicateKind.OBJECT: is_object,
    PredicateKind.DATE: is_date,
    PredicateKind.FUNCTION: is_function,
    PredicateKind.NULL: is_null,
    PredicateKind.EMPTY: is_empty,
}


# =============================================================================
# Registry
# =============================================================================

def _key(name: Union[str, PredicateKind]) -> str:
    if isinstance(name, PredicateKind):
        return name.value
    return name


class PredicateRegistry:
    """
    A registry of named predicates.

    Starts with the built-in kinds unless ``include_builtins`` is False.
    Applications register their own predicates by name; registering an
    existing name replaces it.
    """

    def __init__(
        self,
        predicates: Optional[Mapping[str, Predicate]] = None,
        include_builtins: bool = True,
    ) -> None:
        self._predicates: dict[str, Predicate] = {}
        if include_builtins:
            for kind, predicate in BUILTIN_PREDICATES.items():
                self._predicates[kind.value] = predicate
        for name, predicate in (predicates or {}).items():
            self.register(name, predicate)

    def register(self, name: Union[str, PredicateKind], predicate: Predicate) -> None:
        """Add or replace a predicate."""
        key = _key(name)
        if not isinstance(key, str) or not key:
            raise ConfigurationError(
                message=f"Predicate name must be a non-empty string, got: {name!r}",
                details={"name": repr(name)},
            )
        if not callable(predicate):
            raise ConfigurationError(
                message=f"Predicate '{key}' must be callable",
                details={"name": key, "predicate": repr(predicate)},
            )
        self._predicates[key] = predicate

    def unregister(self, name: Union[str, PredicateKind]) -> None:
        """Remove a predicate. Unknown names raise UnknownPredicateError."""
        key = _key(name)
        if key not in self._predicates:
            raise UnknownPredicateError(
                message=f"Predicate '{key}' is not registered",
                details={"name": key},
            )
        del self._predicates[key]

    def has(self, name: Union[str, PredicateKind]) -> bool:
        """Check if a predicate is registered."""
        key = _key(name)
        return isinstance(key, str) and key in self._predicates

    def get(self, name: Union[str, PredicateKind]) -> Predicate:
        """
        Get a predicate by name.

        Raises:
            UnknownPredicateError: If no predicate has that name
        """
        if not self.has(name):
            raise UnknownPredicateError(
                message=f"Predicate '{_key(name)}' is not registered",
                details={"name": str(_key(name)), "known": self.names()},
            )
        return self._predicates[_key(name)]

    def names(self) -> list[str]:
        """All registered names, sorted."""
        return sorted(self._predicates)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __len__(self) -> int:
        return len(self._predicates)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
