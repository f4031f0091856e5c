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

"""Wrapper schema nodes: optional values and homogeneous lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Any, Dict, List

from ..exceptions import NotAnArray, ValidationError
from .base import NO_IGNORED_FIELDS, SchemaSpec


@dataclass(frozen=True)
class OptionalSpec(SchemaSpec):
    """Accepts ``None`` in addition to whatever ``inner`` accepts.

    A record field that is missing from its input is read as ``None`` too, so
    both forms of absence validate to the same value.
    """

    inner: SchemaSpec

    @property
    def name(self) -> str:
        return self.inner.name

    def validate(self, value: Any, ignored_fields: AbstractSet[str] = NO_IGNORED_FIELDS) -> Any:
        if value is None:
            return None
        return self.inner.validate(value)

    def json_schema(self) -> Dict[str, Any]:
        return {"anyOf": [self.inner.json_schema(), {"type": "null"}]}


@dataclass(frozen=True)
class ListSpec(SchemaSpec):
    name: str
    item: SchemaSpec

    def validate(self, value: Any, ignored_fields: AbstractSet[str] = NO_IGNORED_FIELDS) -> List[Any]:
        if not isinstance(value, (list, tuple)):
            raise NotAnArray(self.name, value)
        result = []
        for idx, element in enumerate(value):
            try:
                result.append(self.item.validate(element))
            except ValidationError as exc:
                exc.prepend(idx)
                raise
        return result

    def json_schema(self) -> Dict[str, Any]:
        return {"type": "array", "title": self.name, "items": self.item.json_schema()}
