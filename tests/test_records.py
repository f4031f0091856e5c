"""Tests for record and optional schemas."""

import msgpack
import pytest

from wire_schema import (
    NotAnObject,
    SchemaDefinitionError,
    TypeMismatch,
    bool_,
    optional,
    record,
    str_,
)


def test_optional_accepts_none(roundtrip) -> None:
    some_optional_bool = optional(bool_("someBool"))
    assert roundtrip(some_optional_bool, None) is None
    assert roundtrip(some_optional_bool, True) is True
    assert roundtrip(some_optional_bool, False) is False


def test_optional_failure_names_inner_schema() -> None:
    maybe_flag = optional(bool_("flag"))
    assert maybe_flag.name == "flag"
    with pytest.raises(TypeMismatch) as exc_info:
        maybe_flag.validate("yes")
    assert exc_info.value.schema_name == "flag"


def test_record_optional_fields(roundtrip) -> None:
    some_rec = record("someRec", {
        "prop1": optional(bool_("prop1")),
        "prop2": optional(str_("prop2")),
    })
    value = {"prop1": None, "prop2": None}
    assert roundtrip(some_rec, value) == value


def test_missing_key_and_explicit_none_are_equivalent(roundtrip) -> None:
    some_rec = record("someRec", {"note": optional(str_("note"))})
    assert roundtrip(some_rec, {}) == {"note": None}
    assert roundtrip(some_rec, {"note": None}) == {"note": None}
    assert some_rec.deserialize(msgpack.packb({})) == {"note": None}


def test_shallow_record_roundtrip(roundtrip) -> None:
    some_rec = record("someRec", {
        "prop1": bool_("prop1", True),
        "prop2": str_("prop2"),
        "_prop3": optional(str_("prop3")),
    })
    value1 = {"prop1": True, "prop2": "hello world", "_prop3": None}
    value2 = {"prop1": True, "prop2": "goodbye world", "_prop3": "hello universe"}
    assert roundtrip(some_rec, value1) == value1
    assert roundtrip(some_rec, value2) == value2


def test_nested_record_roundtrip(roundtrip) -> None:
    some_rec = record("someRec", {
        "nestedRec": record("nestedRec", {
            "prop1": str_("nestedProp1"),
            "prop2": str_("nestedProp2"),
        }),
        "prop1": str_("topLevelProp1"),
        "prop2": bool_("topLevelProp2"),
    })
    value = {"nestedRec": {"prop1": "hello", "prop2": "world"}, "prop1": "test", "prop2": True}
    assert roundtrip(some_rec, value) == value


def test_unknown_fields_are_dropped() -> None:
    user = record("user", {"id": str_("id"), "username": str_("username")})
    payload = user.serialize({"id": "1", "username": "a", "email": "x@y.com"})
    assert msgpack.unpackb(payload) == {"id": "1", "username": "a"}
    assert user.deserialize(payload) == {"id": "1", "username": "a"}


def test_unknown_fields_are_dropped_on_deserialize() -> None:
    full = record("full", {"prop": str_("prop"), "prop2": str_("prop2"), "prop3": str_("prop3")})
    partial = record("partial", {"prop": str_("prop")})
    value = {"prop": "hello world", "prop2": "this should disappear", "prop3": "begone demons"}
    assert partial.deserialize(full.serialize(value)) == {"prop": "hello world"}


def test_pruned_payload_fails_wider_schema() -> None:
    full = record("full", {"prop": str_("prop"), "prop2": str_("prop2")})
    partial = record("partial", {"prop": str_("prop")})
    payload = partial.serialize({"prop": "hello", "prop2": "gone"})
    with pytest.raises(TypeMismatch) as exc_info:
        full.deserialize(payload)
    assert str(exc_info.value) == (
        "Expected prop2 to be string but found type NoneType instead, with value None (at /prop2)"
    )


def test_first_failing_field_in_declaration_order_is_reported() -> None:
    pair = record("pair", {"b": str_("b"), "a": str_("a")})
    with pytest.raises(TypeMismatch) as exc_info:
        pair.validate({"a": 1, "b": 2})
    assert exc_info.value.path == ["b"]


def test_nested_error_path() -> None:
    outer = record("outer", {"inner": record("inner", {"flag": bool_("flag")})})
    with pytest.raises(TypeMismatch) as exc_info:
        outer.validate({"inner": {"flag": "no"}})
    assert exc_info.value.pointer == "/inner/flag"


def test_record_rejects_non_mapping() -> None:
    some_rec = record("someRec", {"a": str_("a")})
    for value in (["a"], "a", None, 3):
        with pytest.raises(NotAnObject, match="to be object"):
            some_rec.validate(value)


def test_ignored_fields_are_skipped_and_omitted() -> None:
    some_rec = record("someRec", {"a": str_("a"), "b": str_("b")})
    assert some_rec.validate({"a": "x", "b": 3}, frozenset({"b"})) == {"a": "x"}


def test_has_field_and_validate_field() -> None:
    some_rec = record("someRec", {"a": str_("a")})
    assert some_rec.has_field("a")
    assert not some_rec.has_field("b")
    assert some_rec.validate_field("a", "ok") == "ok"
    with pytest.raises(TypeMismatch):
        some_rec.validate_field("a", 1)
    with pytest.raises(KeyError):
        some_rec.validate_field("b", "ok")


def test_field_order_is_preserved() -> None:
    some_rec = record("someRec", {"z": str_("z"), "a": str_("a"), "m": str_("m")})
    assert some_rec.field_names == ("z", "a", "m")
    assert list(some_rec.validate({"a": "1", "m": "2", "z": "3"})) == ["z", "a", "m"]


def test_record_fields_are_read_only() -> None:
    fields = {"a": str_("a")}
    some_rec = record("someRec", fields)
    fields["b"] = str_("b")
    assert not some_rec.has_field("b")
    with pytest.raises(TypeError):
        some_rec.fields["c"] = str_("c")


def test_record_rejects_non_schema_fields() -> None:
    with pytest.raises(SchemaDefinitionError, match="is not a schema"):
        record("someRec", {"a": str})
