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

"""Scalar schema nodes: booleans, strings, numbers and byte blobs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import AbstractSet, Any, Dict, Tuple

from ..exceptions import LiteralMismatch, TypeMismatch
from .base import NO_IGNORED_FIELDS, SchemaSpec


def _with_enum(schema: Dict[str, Any], literals: tuple) -> Dict[str, Any]:
    if literals:
        schema["enum"] = list(literals)
    return schema


@dataclass(frozen=True)
class BoolSpec(SchemaSpec):
    name: str
    literals: Tuple[bool, ...] = ()

    def validate(self, value: Any, ignored_fields: AbstractSet[str] = NO_IGNORED_FIELDS) -> bool:
        if not isinstance(value, bool):
            raise TypeMismatch(self.name, "boolean", value)
        if self.literals and value not in self.literals:
            raise LiteralMismatch(self.name, self.literals, value)
        return value

    def json_schema(self) -> Dict[str, Any]:
        return _with_enum({"type": "boolean", "title": self.name}, self.literals)


@dataclass(frozen=True)
class StrSpec(SchemaSpec):
    name: str
    literals: Tuple[str, ...] = ()

    def validate(self, value: Any, ignored_fields: AbstractSet[str] = NO_IGNORED_FIELDS) -> str:
        if not isinstance(value, str):
            raise TypeMismatch(self.name, "string", value)
        if self.literals and value not in self.literals:
            raise LiteralMismatch(self.name, self.literals, value)
        return value

    def json_schema(self) -> Dict[str, Any]:
        return _with_enum({"type": "string", "title": self.name}, self.literals)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# msgpack integers are int64 or uint64
_WIRE_INT_MIN = -(2 ** 63)
_WIRE_INT_MAX = 2 ** 64 - 1


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


@dataclass(frozen=True)
class NumSpec(SchemaSpec):
    """Number schema.

    Literal membership uses ``==``, except that a NaN value matches any NaN
    literal; plain equality would reject NaN even when it is listed.

    Integers outside the int64/uint64 range are widened to float64 before the
    literal check.
    """

    name: str
    literals: Tuple[float, ...] = ()

    def _is_literal(self, value: Any) -> bool:
        if _is_nan(value):
            return any(_is_nan(literal) for literal in self.literals)
        return any(value == literal for literal in self.literals)

    def validate(self, value: Any, ignored_fields: AbstractSet[str] = NO_IGNORED_FIELDS) -> float:
        if not _is_number(value):
            raise TypeMismatch(self.name, "number", value)
        if isinstance(value, int) and not _WIRE_INT_MIN <= value <= _WIRE_INT_MAX:
            try:
                value = float(value)
            except OverflowError:
                raise TypeMismatch(self.name, "number within float64 range", value) from None
        if self.literals and not self._is_literal(value):
            raise LiteralMismatch(self.name, self.literals, value)
        return value

    def json_schema(self) -> Dict[str, Any]:
        return _with_enum({"type": "number", "title": self.name}, self.literals)


@dataclass(frozen=True)
class BytesSpec(SchemaSpec):
    name: str

    def validate(self, value: Any, ignored_fields: AbstractSet[str] = NO_IGNORED_FIELDS) -> bytes:
        if not isinstance(value, (bytes, bytearray)):
            raise TypeMismatch(self.name, "bytes", value)
        return value

    def json_schema(self) -> Dict[str, Any]:
        return {"type": "string", "contentEncoding": "base64", "title": self.name}
