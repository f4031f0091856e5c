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

"""Custom exceptions for the wire_schema package."""

from typing import Any, List, Optional, Union


PathToken = Union[str, int]


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def format_pointer(path: List[PathToken]) -> str:
    """Render a list of keys/indices as a JSON pointer (``/a/0/b``)."""
    return "".join(f"/{_jp_escape(str(token))}" for token in path)


class SchemaError(Exception):
    """Base exception for all wire_schema errors."""
    pass


class SchemaDefinitionError(SchemaError):
    """Exception raised when schema nodes are composed incorrectly."""
    pass


class MissingDiscriminator(SchemaDefinitionError):
    """Exception raised when a union branch lacks the discriminator field."""

    def __init__(self, union_name: str, branch_name: str, discriminator: str):
        super().__init__(
            f'Subschema "{branch_name}" of union type "{union_name}" '
            f'is missing discriminator property "{discriminator}"'
        )
        self.union_name = union_name
        self.branch_name = branch_name
        self.discriminator = discriminator


class DecodeError(SchemaError):
    """Exception raised when the codec cannot decode a payload."""
    pass


class ValidationError(SchemaError):
    """A value was rejected by a schema node.

    Attributes:
        schema_name: Name of the schema node that rejected the value.
        expected: Human-readable description of what was expected.
        value: The offending value.
        path: Keys and indices leading from the outermost schema to the
            failing node. Filled in while the error propagates upwards.
    """

    def __init__(self, schema_name: str, expected: str, value: Any, message: Optional[str] = None):
        self.schema_name = schema_name
        self.expected = expected
        self.value = value
        self.path: List[PathToken] = []
        self._message = message or (
            f"Expected {schema_name} to be {expected} but found type "
            f"{type(value).__name__} instead, with value {value!r}"
        )
        super().__init__(self._message)

    def prepend(self, token: PathToken) -> None:
        self.path.insert(0, token)

    @property
    def pointer(self) -> str:
        return format_pointer(self.path)

    def __str__(self) -> str:
        if self.path:
            return f"{self._message} (at {self.pointer})"
        return self._message


class TypeMismatch(ValidationError):
    """The runtime kind of a value does not match the schema's kind."""
    pass


class NotAnObject(TypeMismatch):
    """A record-like schema received a value that is not a mapping."""

    def __init__(self, schema_name: str, value: Any):
        super().__init__(schema_name, "object", value)


class NotAnArray(TypeMismatch):
    """A list schema received a value that is not a sequence."""

    def __init__(self, schema_name: str, value: Any):
        super().__init__(schema_name, "array", value)


class LiteralMismatch(ValidationError):
    """A value of the right kind is not one of the permitted literals."""

    def __init__(self, schema_name: str, literals: tuple, value: Any):
        allowed = ", ".join(repr(literal) for literal in literals)
        super().__init__(
            schema_name,
            f"one of [{allowed}]",
            value,
            message=f"Expected {schema_name} to be one of values [{allowed}] but found {value!r} instead",
        )
        self.literals = literals


class NoMatchingBranch(ValidationError):
    """No branch of a union accepted the value."""

    def __init__(self, schema_name: str, branch_names: List[str], value: Any):
        super().__init__(schema_name, f"one of [{', '.join(branch_names)}]", value)
        self.branch_names = branch_names
