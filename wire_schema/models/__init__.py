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

"""Schema node types."""

from .base import RecordLike, SchemaSpec
from .containers import ListSpec, OptionalSpec
from .records import ExtendSpec, RecordSpec
from .scalars import BoolSpec, BytesSpec, NumSpec, StrSpec
from .union import UnionSpec

__all__ = [
    "SchemaSpec",
    "RecordLike",
    "BoolSpec",
    "StrSpec",
    "NumSpec",
    "BytesSpec",
    "OptionalSpec",
    "ListSpec",
    "RecordSpec",
    "ExtendSpec",
    "UnionSpec",
]
