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

"""Record and record-extension schema nodes."""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import AbstractSet, Any, Dict, Mapping, Tuple

from ..exceptions import NotAnObject, SchemaDefinitionError, ValidationError
from .base import NO_IGNORED_FIELDS, RecordLike, SchemaSpec
from .containers import OptionalSpec


def _freeze_fields(owner: str, fields: Mapping[str, SchemaSpec]) -> Mapping[str, SchemaSpec]:
    for key, spec in fields.items():
        if not isinstance(key, str):
            raise SchemaDefinitionError(f"Field names of '{owner}' must be strings, got: {key!r}")
        if not isinstance(spec, SchemaSpec):
            raise SchemaDefinitionError(f"Field '{key}' of '{owner}' is not a schema: {spec!r}")
    return MappingProxyType(dict(fields))


def _object_schema(name: str, fields: Mapping[str, SchemaSpec]) -> Dict[str, Any]:
    return {
        "type": "object",
        "title": name,
        "properties": {key: spec.json_schema() for key, spec in fields.items()},
        "required": [key for key, spec in fields.items() if not isinstance(spec, OptionalSpec)],
    }


def _overlay(base: Dict[str, Any], own: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay the properties of ``own`` on an object (or anyOf of objects) schema."""
    if "anyOf" in base:
        return {**base, "anyOf": [_overlay(option, own) for option in base["anyOf"]]}
    properties = {**base.get("properties", {}), **own["properties"]}
    required = [key for key in base.get("required", []) if key not in own["properties"]]
    return {**base, "properties": properties, "required": required + own["required"]}


@dataclass(frozen=True)
class RecordSpec(RecordLike):
    """Validates a mapping against a table of named fields.

    Input keys outside the table are dropped from the result. Fields are
    checked in table order and the first failure is raised.
    """

    name: str
    fields: Mapping[str, SchemaSpec]

    def __post_init__(self):
        object.__setattr__(self, "fields", _freeze_fields(self.name, self.fields))

    def __hash__(self) -> int:
        return hash((self.name, tuple(self.fields.items())))

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(self.fields)

    def has_field(self, name: str) -> bool:
        return name in self.fields

    def validate_field(self, name: str, value: Any) -> Any:
        return self.fields[name].validate(value)

    def validate(self, value: Any, ignored_fields: AbstractSet[str] = NO_IGNORED_FIELDS) -> Dict[str, Any]:
        if not isinstance(value, MappingABC):
            raise NotAnObject(self.name, value)
        result: Dict[str, Any] = {}
        for key, spec in self.fields.items():
            if key in ignored_fields:
                continue
            try:
                result[key] = spec.validate(value.get(key))
            except ValidationError as exc:
                exc.prepend(key)
                raise
        return result

    def json_schema(self) -> Dict[str, Any]:
        return _object_schema(self.name, self.fields)


@dataclass(frozen=True)
class ExtendSpec(RecordLike):
    """Adds fields to a record-like base, overriding base fields of the same name."""

    name: str
    base: RecordLike
    fields: Mapping[str, SchemaSpec]
    _own: RecordSpec = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.base, RecordLike):
            raise SchemaDefinitionError(
                f"Base of extension '{self.name}' must be a record, extension or union, "
                f"got: {type(self.base).__name__}"
            )
        object.__setattr__(self, "fields", _freeze_fields(self.name, self.fields))
        object.__setattr__(self, "_own", RecordSpec(self.name, self.fields))

    def __hash__(self) -> int:
        return hash((self.name, self.base, tuple(self.fields.items())))

    @property
    def field_names(self) -> Tuple[str, ...]:
        inherited = tuple(key for key in self.base.field_names if key not in self.fields)
        return tuple(self.fields) + inherited

    def has_field(self, name: str) -> bool:
        return name in self.fields or self.base.has_field(name)

    def validate_field(self, name: str, value: Any) -> Any:
        if name in self.fields:
            return self.fields[name].validate(value)
        return self.base.validate_field(name, value)

    def validate(self, value: Any, ignored_fields: AbstractSet[str] = NO_IGNORED_FIELDS) -> Dict[str, Any]:
        shadowed = frozenset(self.fields) | frozenset(ignored_fields)
        base_result = self.base.validate(value, shadowed)
        own_result = self._own.validate(value, ignored_fields)
        return {**base_result, **own_result}

    def json_schema(self) -> Dict[str, Any]:
        merged = _overlay(self.base.json_schema(), self._own.json_schema())
        merged["title"] = self.name
        return merged
