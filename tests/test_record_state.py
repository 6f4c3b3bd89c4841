"""
Tests for RecordSchema RecordState

Tests cover:
- Aggregate validity
- Re-validation
- Error summaries and serialization
"""
from recordschema import ABSENT, RecordState, Schema


class TestRecordState:
    """Tests for RecordState."""

    def test_keeps_record_by_reference(self, user_schema):
        record = {"name": "Bob", "age": 22}
        state = RecordState(record, user_schema)
        assert state.record is record
        assert state.schema is user_schema
        assert state.filter is None

    def test_one_state_per_schema_field(self, user_schema):
        state = RecordState({}, user_schema)
        assert list(state.fields) == ["name", "age"]
        assert state.fields["age"].value is ABSENT

    def test_is_valid_is_conjunction(self, user_schema):
        assert RecordState({"name": "Bob"}, user_schema).is_valid
        assert not RecordState({"name": "Bob", "age": 1.5}, user_schema).is_valid

    def test_revalidate_after_change(self, user_schema):
        record = {"age": 14}
        state = user_schema.validate(record)
        assert not state.is_valid

        record["name"] = "Bob"
        assert state.validate().is_valid
        assert state.fields["name"].value == "Bob"

    def test_revalidate_other_record(self, user_schema):
        state = user_schema.validate({"name": "Bob"})
        other = {"name": 5}
        state.validate(other)
        assert state.record is other
        assert not state.is_valid

    def test_revalidate_keeps_filter(self, user_schema):
        state = user_schema.validate({"age": "x"}, ["name"])
        state.validate({"name": "Bob", "age": "x"})
        assert state.is_valid
        assert state.fields["age"].checked is False

    def test_revalidate_none_clears_filter(self, user_schema):
        state = user_schema.validate({"age": "x"}, ["name"])
        state.validate(None, None)
        assert state.filter is None
        assert state.fields["age"].checked is True
        assert state.invalid_fields == ["name", "age"]

    def test_string_filter(self, user_schema):
        state = user_schema.validate({"age": "x"}, "age")
        assert state.fields["name"].checked is False
        assert state.invalid_fields == ["age"]

    def test_errors(self, user_schema):
        state = user_schema.validate({"name": 3, "age": "x"})
        assert state.errors == {
            "name": ["name: 3 is not a string"],
            "age": ["age: x is not a integer"],
        }
        assert state.invalid_fields == ["name", "age"]

    def test_str(self, user_schema):
        state = user_schema.validate({"age": "x"})
        assert str(state) == (
            "name errors: name: undefined is not a string\n"
            "age errors: age: x is not a integer"
        )
        assert str(user_schema.validate({"name": "Bob"})) == ""

    def test_to_dict(self, user_schema):
        data = user_schema.validate({"name": "Bob"}).to_dict()
        assert data["schema"] == "user"
        assert data["is_valid"] is True
        assert data["filter"] is None
        assert data["fields"]["name"]["value"] == "Bob"
        assert data["fields"]["age"]["value"] is None

    def test_empty_schema(self):
        state = RecordState({}, Schema("empty"))
        assert state.fields == {}
        assert state.is_valid
