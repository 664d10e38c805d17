# Copyright 2025 CrownOps Engineering
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

"""Violation records produced by the registry checks.

Violations are data, not exceptions: every check collects all of them so a
single run surfaces every problem in the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar

from codereg.core.model_types import ViolationKind
from codereg.core.type_aliases import DottedPath, ErrorCodeValue
from codereg.json import JSONMapping, normalize_enums_for_json


@dataclass(slots=True, frozen=True)
class Violation:
    """Base record: a message that names the offending location."""

    kind: ClassVar[ViolationKind]
    message: str

    def to_payload(self) -> JSONMapping:
        """Return a JSON-compatible mapping describing the violation."""
        payload: JSONMapping = {"kind": self.kind.value}
        for item in fields(self):
            payload[item.name] = normalize_enums_for_json(getattr(self, item.name))
        return payload


@dataclass(slots=True, frozen=True)
class RangeViolation(Violation):
    """A code lies outside its category range, is not an integer, or has no range."""

    kind: ClassVar[ViolationKind] = ViolationKind.RANGE
    path: DottedPath
    code: ErrorCodeValue
    expected: str | None


@dataclass(slots=True, frozen=True)
class DuplicateCodeViolation(Violation):
    """A code already used by an earlier descriptor appears again."""

    kind: ClassVar[ViolationKind] = ViolationKind.DUPLICATE_CODE
    path: DottedPath
    code: ErrorCodeValue
    first_path: DottedPath


@dataclass(slots=True, frozen=True)
class MarkerMismatch(Violation):
    """The next-code marker is missing, unparsable, or not ``max + 1``."""

    kind: ClassVar[ViolationKind] = ViolationKind.MARKER_MISMATCH
    source: str | None
    expected: int
    actual: int | None


__all__ = [
    "DuplicateCodeViolation",
    "MarkerMismatch",
    "RangeViolation",
    "Violation",
]
