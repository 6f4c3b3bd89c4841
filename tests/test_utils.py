"""
Tests for RecordSchema utilities and config models

Tests cover:
- get_path over mappings and attributes
- stringify rendering
- Record access helpers
- Config parsing
- The ABSENT sentinel
"""
import copy
import pickle
from types import SimpleNamespace

import pytest

from recordschema import ABSENT, FieldConfig, InvalidFieldSpecError, get_path, is_absent
from recordschema.config import parse_field_config, parse_instance_config
from recordschema.utils import has_value, read_value, stringify, write_value


# =============================================================================
# Path Resolution Tests
# =============================================================================

class TestGetPath:
    """Tests for get_path."""

    def test_mapping_path(self):
        assert get_path({"a": {"b": 2}}, "a.b") == 2

    def test_attribute_path(self):
        obj = SimpleNamespace(config=SimpleNamespace(limit=3))
        assert get_path(obj, "config.limit") == 3

    def test_mixed_path(self):
        obj = SimpleNamespace(config={"fields": ["a"]})
        assert get_path(obj, "config.fields") == ["a"]

    def test_missing_returns_default(self):
        assert get_path({"a": {}}, "a.b", "fallback") == "fallback"
        assert get_path(None, "a", 7) == 7

    def test_present_none_is_returned(self):
        assert get_path({"a": None}, "a", 7) is None


# =============================================================================
# Rendering and Record Access Tests
# =============================================================================

class TestHelpers:
    """Tests for stringify and record access."""

    @pytest.mark.parametrize("value,expected", [
        ("text", "text"),
        (2, "2"),
        (None, "None"),
        (ABSENT, "undefined"),
        ([1, 2], "[1, 2]"),
    ])
    def test_stringify(self, value, expected):
        assert stringify(value) == expected

    def test_stringify_unreadable(self):
        class Broken:
            def __str__(self):
                raise RuntimeError("no")

        assert stringify(Broken()) == "-unreadable-string-"

    def test_read_value(self):
        assert read_value({"a": 1}, "a") == 1
        assert read_value({}, "a") is ABSENT
        assert read_value(SimpleNamespace(a=1), "a") == 1
        assert read_value(SimpleNamespace(), "a") is ABSENT
        assert read_value(None, "a") is ABSENT

    def test_has_and_write_value(self):
        record = {}
        assert not has_value(record, "a")
        write_value(record, "a", None)
        assert has_value(record, "a")

        obj = SimpleNamespace()
        write_value(obj, "a", 1)
        assert has_value(obj, "a")
        assert obj.a == 1


# =============================================================================
# Config Tests
# =============================================================================

class TestConfig:
    """Tests for FieldConfig and InstanceConfig parsing."""

    def test_defaults(self):
        config = FieldConfig()
        assert config.type is None
        assert config.validator is ABSENT
        assert config.default_value is ABSENT
        assert config.required is False
        assert config.stop_if_invalid is True

    def test_params_override_defaults(self):
        config = parse_field_config("f", {"required": False}, {"required": True, "type": "string"})
        assert config.required is False
        assert config.type == "string"

    def test_defaults_parsed_before_merge(self):
        config = parse_field_config(
            "f",
            {"default_value": 2, "requiredMessage": "needed"},
            {"defaultValue": 1, "required_message": "missing", "stopIfInvalid": False},
        )
        assert config.default_value == 2
        assert config.required_message == "needed"
        assert config.stop_if_invalid is False

    def test_bad_defaults_rejected(self):
        with pytest.raises(InvalidFieldSpecError):
            parse_field_config("f", {}, {"stopIfInvalid": []})

    def test_error_details(self):
        with pytest.raises(InvalidFieldSpecError) as exc_info:
            parse_field_config("f", {"required": []})
        assert exc_info.value.details["field"] == "f"
        assert exc_info.value.details["errors"]

    def test_instance_config_defaults(self):
        config = parse_instance_config(None)
        assert config.field_names is None
        assert config.limit_to_schema is True

    def test_instance_config_aliases(self):
        config = parse_instance_config({"fields": ("a", "b"), "limitToSchema": False})
        assert config.field_names == ["a", "b"]
        assert config.limit_to_schema is False


# =============================================================================
# Sentinel Tests
# =============================================================================

class TestAbsent:
    """Tests for the ABSENT sentinel."""

    def test_distinct_from_none(self):
        assert ABSENT is not None
        assert is_absent(ABSENT)
        assert not is_absent(None)

    def test_falsy(self):
        assert not ABSENT

    def test_singleton_survives_copy_and_pickle(self):
        assert copy.copy(ABSENT) is ABSENT
        assert copy.deepcopy(ABSENT) is ABSENT
        assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT

    def test_rendering(self):
        assert repr(ABSENT) == "ABSENT"
        assert str(ABSENT) == "undefined"
