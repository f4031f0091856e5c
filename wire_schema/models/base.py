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

"""Base classes shared by every schema node."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AbstractSet, Any, Dict, Optional, Tuple

from ..codec import DEFAULT_CODEC, Codec


NO_IGNORED_FIELDS: AbstractSet[str] = frozenset()


class SchemaSpec(ABC):
    """An immutable description of an accepted value shape.

    Subclasses are frozen dataclasses and may be shared freely between parent
    schemas and threads.
    """

    name: str

    @abstractmethod
    def validate(self, value: Any, ignored_fields: AbstractSet[str] = NO_IGNORED_FIELDS) -> Any:
        """Return the sanitized value or raise :class:`ValidationError`.

        ``ignored_fields`` is only meaningful for record-like schemas; other
        schemas accept and disregard it.
        """

    @abstractmethod
    def json_schema(self) -> Dict[str, Any]:
        """Describe this node as a JSON Schema fragment."""

    def serialize(self, value: Any, codec: Optional[Codec] = None) -> bytes:
        validated = self.validate(value)
        return (codec or DEFAULT_CODEC).pack(validated)

    def deserialize(self, data: bytes, codec: Optional[Codec] = None) -> Any:
        unpacked = (codec or DEFAULT_CODEC).unpack(data)
        return self.validate(unpacked)


class RecordLike(SchemaSpec):
    """Capability of schemas that validate mappings field by field.

    Records, extensions and unions implement it so they can be nested in
    each other.
    """

    @property
    @abstractmethod
    def field_names(self) -> Tuple[str, ...]:
        """All field names this schema may produce, in declaration order."""

    @abstractmethod
    def has_field(self, name: str) -> bool:
        """Return True if validated values always carry ``name``."""

    @abstractmethod
    def validate_field(self, name: str, value: Any) -> Any:
        """Validate ``value`` against the schema of the single field ``name``."""
