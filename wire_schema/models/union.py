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

"""Discriminated union of record-like schemas.

A value is matched against the branches in declaration order. Each branch is
probed by validating only its discriminator field; the first branch whose
probe passes is selected and the value is then validated against that branch
in full. Branches are not indexed by discriminator literal, so when several
branches accept the same discriminator value the earliest one wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, Any, Dict, Optional, Tuple

from ..exceptions import (
    MissingDiscriminator,
    NoMatchingBranch,
    SchemaDefinitionError,
    ValidationError,
)
from .base import NO_IGNORED_FIELDS, RecordLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnionSpec(RecordLike):
    name: str
    discriminator: str
    branches: Tuple[RecordLike, ...]

    def __post_init__(self):
        object.__setattr__(self, "branches", tuple(self.branches))
        if not self.branches:
            raise SchemaDefinitionError(f"Union type '{self.name}' must have at least one branch")
        for branch in self.branches:
            if not isinstance(branch, RecordLike):
                raise SchemaDefinitionError(
                    f"Subschema of union type '{self.name}' must be a record, extension or union, "
                    f"got: {type(branch).__name__}"
                )
            if not branch.has_field(self.discriminator):
                raise MissingDiscriminator(self.name, branch.name, self.discriminator)

    @property
    def field_names(self) -> Tuple[str, ...]:
        names: Dict[str, None] = {}
        for branch in self.branches:
            names.update(dict.fromkeys(branch.field_names))
        return tuple(names)

    def has_field(self, name: str) -> bool:
        return all(branch.has_field(name) for branch in self.branches)

    def validate_field(self, name: str, value: Any) -> Any:
        # Every branch must accept the value; the last branch's result is kept.
        result = None
        for branch in self.branches:
            result = branch.validate_field(name, value)
        return result

    def _probe(self, branch: RecordLike, value: Any) -> bool:
        ignored = frozenset(branch.field_names) - {self.discriminator}
        try:
            branch.validate(value, ignored)
        except ValidationError:
            return False
        return True

    def select_branch(self, value: Any) -> Optional[RecordLike]:
        """Return the first branch whose discriminator accepts ``value``, if any."""
        for branch in self.branches:
            if self._probe(branch, value):
                return branch
        return None

    def validate(self, value: Any, ignored_fields: AbstractSet[str] = NO_IGNORED_FIELDS) -> Dict[str, Any]:
        branch = self.select_branch(value)
        if branch is None:
            raise NoMatchingBranch(self.name, [b.name for b in self.branches], value)
        logger.debug(f"Union '{self.name}' resolved to branch '{branch.name}'")
        return branch.validate(value, ignored_fields)

    def json_schema(self) -> Dict[str, Any]:
        return {"title": self.name, "anyOf": [branch.json_schema() for branch in self.branches]}
