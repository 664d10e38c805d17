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

"""Results returned by registry checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from codereg.core.model_types import CheckName

if TYPE_CHECKING:
    from codereg.json import JSONMapping

    from .violations import Violation


@dataclass(slots=True, frozen=True)
class CheckResult:
    """Outcome of one check: pass/fail plus every violation it found.

    Attributes:
        check: Which check produced the result.
        violations: All violations, in traversal order.
        checked: Number of descriptors (or marker reads) examined.
    """

    check: CheckName
    violations: tuple[Violation, ...] = ()
    checked: int = 0

    @property
    def passed(self) -> bool:
        """Return ``True`` when the check found no violations."""
        return not self.violations

    @property
    def message(self) -> str:
        """Return a human-readable summary, one violation per line."""
        if self.passed:
            return f"{self.check} check passed ({self.checked} checked)"
        return "\n".join(violation.message for violation in self.violations)

    def to_payload(self) -> JSONMapping:
        """Return a JSON-compatible mapping of the result."""
        return {
            "check": self.check.value,
            "passed": self.passed,
            "checked": self.checked,
            "violations": [violation.to_payload() for violation in self.violations],
        }


@dataclass(slots=True, frozen=True)
class RegistryReport:
    """Results of all checks run against one catalog snapshot."""

    results: tuple[CheckResult, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        """Return ``True`` when every check passed."""
        return all(result.passed for result in self.results)

    @property
    def violation_count(self) -> int:
        """Return the total number of violations across checks."""
        return sum(len(result.violations) for result in self.results)

    @property
    def failed_checks(self) -> tuple[CheckName, ...]:
        """Return the names of the checks that failed."""
        return tuple(result.check for result in self.results if not result.passed)

    def result_for(self, check: CheckName) -> CheckResult | None:
        """Return the result of ``check`` if it ran."""
        for result in self.results:
            if result.check is check:
                return result
        return None

    def to_payload(self) -> JSONMapping:
        """Return a JSON-compatible mapping of the report."""
        return {
            "passed": self.passed,
            "violation_count": self.violation_count,
            "checks": [result.to_payload() for result in self.results],
        }


__all__ = ["CheckResult", "RegistryReport"]
