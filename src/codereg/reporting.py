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

"""Rendering of registry reports for terminals and machines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codereg.core.model_types import ReportFormat
from codereg.json import dumps

if TYPE_CHECKING:
    from codereg.registry.results import CheckResult, RegistryReport


def _render_result(result: CheckResult) -> list[str]:
    status = "PASS" if result.passed else "FAIL"
    lines = [f"{status} {result.check} ({result.checked} checked)"]
    lines.extend(f"  - {violation.message}" for violation in result.violations)
    return lines


def render_text(report: RegistryReport) -> str:
    """Return one status line per check, violations indented below it."""
    lines: list[str] = []
    for result in report.results:
        lines.extend(_render_result(result))
    failed = len(report.failed_checks)
    total = len(report.results)
    if failed:
        lines.append(f"{failed} of {total} checks failed ({report.violation_count} violation(s))")
    else:
        lines.append(f"all {total} checks passed")
    return "\n".join(lines)


def render_json(report: RegistryReport) -> str:
    """Return the report as an indented JSON document."""
    return dumps(report.to_payload())


def render_report(report: RegistryReport, report_format: ReportFormat | str = ReportFormat.TEXT) -> str:
    """Render ``report`` in the requested format."""
    selected = report_format if isinstance(report_format, ReportFormat) else ReportFormat.from_str(report_format)
    if selected is ReportFormat.JSON:
        return render_json(report)
    return render_text(report)


__all__ = ["render_json", "render_report", "render_text"]
