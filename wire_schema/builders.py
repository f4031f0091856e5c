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

"""Builder functions for composing schemas.

Example::

    user = record("user", {
        "id": str_("id"),
        "username": str_("username"),
        "email": optional(str_("email")),
    })
    payload = user.serialize({"id": "1", "username": "a"})

Names that would shadow builtins carry a trailing underscore.
"""

from typing import Mapping, Optional, Sequence

from .models import (
    BoolSpec,
    BytesSpec,
    ExtendSpec,
    ListSpec,
    NumSpec,
    OptionalSpec,
    RecordLike,
    RecordSpec,
    SchemaSpec,
    StrSpec,
    UnionSpec,
)


def bool_(name: str, literal: Optional[bool] = None) -> BoolSpec:
    return BoolSpec(name, () if literal is None else (literal,))


def str_(name: str, *literals: str) -> StrSpec:
    return StrSpec(name, tuple(literals))


def num(name: str, *literals: float) -> NumSpec:
    return NumSpec(name, tuple(literals))


def bytes_(name: str) -> BytesSpec:
    return BytesSpec(name)


def optional(schema: SchemaSpec) -> OptionalSpec:
    return OptionalSpec(schema)


def record(name: str, fields: Mapping[str, SchemaSpec]) -> RecordSpec:
    return RecordSpec(name, fields)


def extend(name: str, base: RecordLike, fields: Mapping[str, SchemaSpec]) -> ExtendSpec:
    return ExtendSpec(name, base, fields)


def union(name: str, discriminator: str, branches: Sequence[RecordLike]) -> UnionSpec:
    """Build a discriminated union.

    Raises:
        MissingDiscriminator: If a branch has no ``discriminator`` field.
    """
    return UnionSpec(name, discriminator, tuple(branches))


def list_(name: str, item: SchemaSpec) -> ListSpec:
    return ListSpec(name, item)
