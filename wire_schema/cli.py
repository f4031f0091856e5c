#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for encoding, decoding and describing payloads with a schema."""

import argparse
import importlib
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .exceptions import SchemaDefinitionError, SchemaError
from .json_schema import to_json_schema, to_jsonable
from .models import SchemaSpec
from .utils.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def load_schema(reference: str) -> SchemaSpec:
    """Resolve a ``package.module:attribute`` reference to a schema node."""
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise SchemaDefinitionError(
            f"Invalid schema reference: '{reference}'. Expected format: 'package.module:attribute'"
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise SchemaDefinitionError(f"Cannot import schema module '{module_name}': {exc}") from exc

    spec = module
    for part in attribute.split("."):
        try:
            spec = getattr(spec, part)
        except AttributeError as exc:
            raise SchemaDefinitionError(f"Schema '{attribute}' not found in module '{module_name}'") from exc
    if not isinstance(spec, SchemaSpec):
        raise SchemaDefinitionError(f"'{reference}' is not a schema, got: {type(spec).__name__}")
    logger.debug(f"Loaded schema '{spec.name}' from {reference}")
    return spec


def _dumps(data, indent: int) -> str:
    try:
        return json.dumps(data, indent=indent, allow_nan=False)
    except ValueError as exc:
        raise SchemaError(f"Output cannot be represented as JSON (NaN or infinite number): {exc}") from exc


def _read_input(path: Optional[str]) -> bytes:
    if path is None or path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _cmd_decode(args: argparse.Namespace) -> None:
    spec = load_schema(args.schema)
    value = spec.deserialize(_read_input(args.input))
    print(_dumps(to_jsonable(value), args.indent))


def _cmd_encode(args: argparse.Namespace) -> None:
    spec = load_schema(args.schema)
    try:
        value = json.loads(_read_input(args.input))
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Input is not valid JSON: {exc}") from exc
    data = spec.serialize(value)
    if args.output is None or args.output == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        Path(args.output).write_bytes(data)
        logger.info(f"Wrote {len(data)} bytes to {args.output}")


def _cmd_json_schema(args: argparse.Namespace) -> None:
    spec = load_schema(args.schema)
    print(_dumps(to_json_schema(spec), args.indent))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wire-schema",
        description="Validate and (de)serialize MessagePack payloads against a schema",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode = subparsers.add_parser("decode", help="Decode a payload and print it as JSON")
    decode.add_argument("schema", help="Schema reference, e.g. 'my_pkg.schemas:user'")
    decode.add_argument("input", nargs="?", default=None, help="Payload file (default: stdin)")
    decode.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    decode.set_defaults(func=_cmd_decode)

    encode = subparsers.add_parser("encode", help="Encode a JSON document into a payload")
    encode.add_argument("schema", help="Schema reference, e.g. 'my_pkg.schemas:user'")
    encode.add_argument("input", nargs="?", default=None, help="JSON file (default: stdin)")
    encode.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")
    encode.set_defaults(func=_cmd_encode)

    describe = subparsers.add_parser("json-schema", help="Print the JSON Schema of a schema")
    describe.add_argument("schema", help="Schema reference, e.g. 'my_pkg.schemas:user'")
    describe.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    describe.set_defaults(func=_cmd_json_schema)

    return parser


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the wire-schema CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        args.func(args)
    except SchemaError as exc:
        logger.error(str(exc))
        sys.exit(1)
    except OSError as exc:
        logger.error(f"I/O error: {exc}")
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
