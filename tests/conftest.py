"""Shared fixtures for the wire_schema test suite."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from wire_schema import SchemaSpec


@pytest.fixture
def roundtrip() -> Callable[[SchemaSpec, Any], Any]:
    """Serialize then deserialize a value with the same schema."""

    def _roundtrip(spec: SchemaSpec, value: Any) -> Any:
        return spec.deserialize(spec.serialize(value))

    return _roundtrip
