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

"""Unit tests for check results, report rendering and pytest helpers."""

from __future__ import annotations

import json

import pytest

from codereg.core.model_types import CheckName, ReportFormat
from codereg.registry import CheckResult, CodeRange, MarkerMismatch, RangeViolation, RegistryReport, code_in_range
from codereg.reporting import render_json, render_report, render_text
from codereg.testing import assert_check_passed, assert_match, assert_registry_valid

pytestmark = pytest.mark.unit

COMPILER = CodeRange(min=1001, max=1999)

RANGE_VIOLATION = RangeViolation(
    message="expected compiler.errC's error code '2000' to be in the range 1001-1999",
    path="compiler.errC",
    code=2000,
    expected="1001-1999",
)
MARKER_VIOLATION = MarkerMismatch(
    message="expected 'Next error code: 2001' in MARKER.txt, found 1003",
    source="MARKER.txt",
    expected=2001,
    actual=1003,
)


def _failing_report() -> RegistryReport:
    return RegistryReport(
        results=(
            CheckResult(check=CheckName.RANGE, violations=(RANGE_VIOLATION,), checked=3),
            CheckResult(check=CheckName.UNIQUENESS, checked=3),
            CheckResult(check=CheckName.NEXT_CODE, violations=(MARKER_VIOLATION,), checked=1),
        ),
    )


def test_check_result_message() -> None:
    assert CheckResult(check=CheckName.UNIQUENESS, checked=4).message == "uniqueness check passed (4 checked)"
    failed = CheckResult(check=CheckName.RANGE, violations=(RANGE_VIOLATION,), checked=1)
    assert failed.message == RANGE_VIOLATION.message


def test_report_aggregates() -> None:
    report = _failing_report()
    assert not report.passed
    assert report.violation_count == 2
    assert report.failed_checks == (CheckName.RANGE, CheckName.NEXT_CODE)
    assert RegistryReport().passed


def test_violation_payload_includes_kind() -> None:
    assert RANGE_VIOLATION.to_payload() == {
        "kind": "range_violation",
        "message": RANGE_VIOLATION.message,
        "path": "compiler.errC",
        "code": 2000,
        "expected": "1001-1999",
    }


def test_render_text_lists_violations_under_failed_checks() -> None:
    text = render_text(_failing_report())
    assert text.splitlines() == [
        "FAIL range (3 checked)",
        f"  - {RANGE_VIOLATION.message}",
        "PASS uniqueness (3 checked)",
        "FAIL next_code (1 checked)",
        f"  - {MARKER_VIOLATION.message}",
        "2 of 3 checks failed (2 violation(s))",
    ]


def test_render_text_for_passing_report() -> None:
    report = RegistryReport(results=(CheckResult(check=CheckName.RANGE, checked=2),))
    assert render_text(report).splitlines()[-1] == "all 1 checks passed"


def test_render_json_payload() -> None:
    payload = json.loads(render_json(_failing_report()))
    assert payload["passed"] is False
    assert payload["violation_count"] == 2
    assert [check["check"] for check in payload["checks"]] == ["range", "uniqueness", "next_code"]
    assert payload["checks"][2]["violations"][0]["kind"] == "marker_mismatch"


def test_render_report_dispatches_on_format() -> None:
    report = _failing_report()
    assert render_report(report, "json") == render_json(report)
    assert render_report(report, ReportFormat.TEXT) == render_text(report)
    with pytest.raises(ValueError, match="Unknown report format"):
        _ = render_report(report, "xml")


def test_assert_helpers_raise_with_messages() -> None:
    assert_match(code_in_range(1001, COMPILER, "compiler.errA"))
    with pytest.raises(AssertionError, match="to be in the range 1001-1999"):
        assert_match(code_in_range(2000, COMPILER, "compiler.errC"))
    with pytest.raises(AssertionError, match="range check failed"):
        assert_check_passed(_failing_report().results[0])
    with pytest.raises(AssertionError, match="2 of 3 checks failed"):
        assert_registry_valid(_failing_report())
    assert_registry_valid(RegistryReport())
