"""
Pytest configuration and fixtures for RecordSchema tests.

Puts ``src`` on the import path and provides schema factories shared by
the test modules.
"""
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Allow ``from recordschema import ...`` without an install
_SRC = Path(__file__).resolve().parent.parent / "src"
if _SRC.exists():
    sys.path.insert(0, str(_SRC))

from recordschema import PredicateRegistry, Schema  # noqa: E402


# =============================================================================
# Factory Helpers
# =============================================================================

def make_user_schema(**field_overrides) -> Schema:
    """Create the user schema used across the suite."""
    fields = {
        "name": {"type": "string", "required": True},
        "age": "integer",
    }
    fields.update(field_overrides)
    return Schema("user", fields)


def make_created_schema(now: datetime) -> Schema:
    """Create a user schema whose 'created' field defaults to ``now``."""
    return Schema("user", {
        "name": "string",
        "age": "integer",
        "created": {
            "required": False,
            "type": "date",
            "default_value": lambda: now,
            "validator": lambda value: value > datetime.now(),
        },
    })


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def user_schema() -> Schema:
    return make_user_schema()


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 15, 12, 30)


@pytest.fixture
def created_schema(now) -> Schema:
    return make_created_schema(now)


@pytest.fixture
def registry() -> PredicateRegistry:
    """A registry with the built-ins plus an application predicate."""
    reg = PredicateRegistry()
    reg.register("even", lambda value: isinstance(value, int) and value % 2 == 0)
    return reg
