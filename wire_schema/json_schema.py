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

"""JSON Schema reflection of schema nodes.

Byte blobs have no JSON counterpart; they are described as base64 strings and
:func:`to_jsonable` converts them the same way, so the JSON form of any value
accepted by a schema conforms to that schema's JSON Schema.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from jsonschema import Draft202012Validator

from .exceptions import format_pointer
from .models import SchemaSpec


DRAFT = "https://json-schema.org/draft/2020-12/schema"


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    json_path: Optional[str] = None


def to_json_schema(spec: SchemaSpec) -> Dict[str, Any]:
    """Return a standalone JSON Schema document describing ``spec``.

    Raises:
        jsonschema.exceptions.SchemaError: If the generated document is not a
            valid draft 2020-12 schema.
    """
    schema = {"$schema": DRAFT, **spec.json_schema()}
    Draft202012Validator.check_schema(schema)
    return schema


def to_jsonable(value: Any) -> Any:
    """Convert a validated value into JSON-compatible data."""
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


def json_schema_issues(spec: SchemaSpec, value: Any) -> List[SchemaIssue]:
    """Check the JSON form of ``value`` against the reflected schema of ``spec``.

    Unlike :meth:`SchemaSpec.validate`, every violation is reported. Issues
    are ordered by their location.
    """
    validator = Draft202012Validator(to_json_schema(spec))
    errors = sorted(validator.iter_errors(to_jsonable(value)), key=lambda e: [str(p) for p in e.absolute_path])
    return [SchemaIssue(message=e.message, json_path=format_pointer(list(e.absolute_path))) for e in errors]
