"""Tests for the wire-schema command line interface."""

import json
import logging
import textwrap

import msgpack
import pytest

from wire_schema.cli import load_schema, main
from wire_schema import SchemaDefinitionError

SCHEMA_MODULE = textwrap.dedent(
    """
    from wire_schema import bytes_, num, optional, record, str_

    user = record("user", {
        "id": str_("id"),
        "username": str_("username"),
        "avatar": optional(bytes_("avatar")),
    })
    reading = record("reading", {"value": num("value")})
    not_a_schema = 42
    """
)


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def schema_ref(tmp_path, monkeypatch) -> str:
    (tmp_path / "cli_test_schemas.py").write_text(SCHEMA_MODULE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return "cli_test_schemas:user"


def _run(argv) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


def test_encode_then_decode(schema_ref, tmp_path, capsys) -> None:
    source = tmp_path / "user.json"
    source.write_text(json.dumps({"id": "1", "username": "a", "email": "x@y.com"}), encoding="utf-8")
    payload = tmp_path / "user.bin"

    assert _run(["encode", schema_ref, str(source), "-o", str(payload)]) == 0
    assert msgpack.unpackb(payload.read_bytes()) == {"id": "1", "username": "a", "avatar": None}

    assert _run(["decode", schema_ref, str(payload)]) == 0
    assert json.loads(capsys.readouterr().out) == {"id": "1", "username": "a", "avatar": None}


def test_decode_prints_bytes_as_base64(schema_ref, tmp_path, capsys) -> None:
    payload = tmp_path / "user.bin"
    payload.write_bytes(msgpack.packb({"id": "1", "username": "a", "avatar": b"\x00\x01"}, use_bin_type=True))
    assert _run(["decode", schema_ref, str(payload), "--indent", "0"]) == 0
    assert json.loads(capsys.readouterr().out)["avatar"] == "AAE="


def test_decode_invalid_payload_fails(schema_ref, tmp_path, capsys) -> None:
    payload = tmp_path / "user.bin"
    payload.write_bytes(msgpack.packb({"id": 1}))
    assert _run(["decode", schema_ref, str(payload)]) == 1
    assert "Expected id to be string" in capsys.readouterr().err


def test_decode_corrupt_payload_fails(schema_ref, tmp_path) -> None:
    payload = tmp_path / "user.bin"
    payload.write_bytes(b"\x83\xa2id")
    assert _run(["decode", schema_ref, str(payload)]) == 1


def test_encode_rejects_bad_json(schema_ref, tmp_path) -> None:
    source = tmp_path / "user.json"
    source.write_text("{not json", encoding="utf-8")
    assert _run(["encode", schema_ref, str(source), "-o", str(tmp_path / "out.bin")]) == 1


def test_json_schema_command(schema_ref, capsys) -> None:
    assert _run(["json-schema", schema_ref]) == 0
    schema = json.loads(capsys.readouterr().out)
    assert schema["title"] == "user"
    assert schema["required"] == ["id", "username"]


def test_missing_input_file_fails(schema_ref, tmp_path) -> None:
    assert _run(["decode", schema_ref, str(tmp_path / "missing.bin")]) == 1


def test_load_schema_errors(schema_ref) -> None:
    with pytest.raises(SchemaDefinitionError, match="Expected format"):
        load_schema("cli_test_schemas")
    with pytest.raises(SchemaDefinitionError, match="not found"):
        load_schema("cli_test_schemas:missing")
    with pytest.raises(SchemaDefinitionError, match="is not a schema"):
        load_schema("cli_test_schemas:not_a_schema")
    with pytest.raises(SchemaDefinitionError, match="Cannot import"):
        load_schema("no_such_module_for_wire_schema:user")


def test_decode_refuses_non_json_numbers(schema_ref, tmp_path, capsys) -> None:
    payload = tmp_path / "reading.bin"
    payload.write_bytes(msgpack.packb({"value": float("nan")}))
    assert _run(["decode", "cli_test_schemas:reading", str(payload)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "cannot be represented as JSON" in captured.err


def test_encode_large_integer(schema_ref, tmp_path) -> None:
    source = tmp_path / "reading.json"
    source.write_text('{"value": 1180591620717411303424}', encoding="utf-8")
    payload = tmp_path / "reading.bin"
    assert _run(["encode", "cli_test_schemas:reading", str(source), "-o", str(payload)]) == 0
    assert msgpack.unpackb(payload.read_bytes()) == {"value": float(2 ** 70)}


def test_verbose_logs_stay_off_stdout(schema_ref, tmp_path, capsys) -> None:
    payload = tmp_path / "user.bin"
    payload.write_bytes(msgpack.packb({"id": "1", "username": "a"}))
    assert _run(["-v", "decode", schema_ref, str(payload)]) == 0
    captured = capsys.readouterr()
    assert json.loads(captured.out) == {"id": "1", "username": "a", "avatar": None}
    assert "DEBUG" in captured.err
