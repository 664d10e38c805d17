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

"""Unit tests for the combined registry run."""

from __future__ import annotations

import logging

import pytest

from codereg.core.model_types import CheckName
from codereg.registry import (
    DuplicateCodeViolation,
    MarkerMismatch,
    MarkerSource,
    RangeViolation,
    validate_registry,
)

pytestmark = pytest.mark.unit

RANGES = {"compiler": {"min": 1001, "max": 1999}}


def test_valid_catalog_passes_all_checks() -> None:
    report = validate_registry(
        {"compiler": {"errA": {"code": 1001}, "errB": {"code": 1002}}},
        RANGES,
        marker=MarkerSource.from_text("Next error code: 1003"),
    )
    assert report.passed
    assert [result.check for result in report.results] == [
        CheckName.RANGE,
        CheckName.UNIQUENESS,
        CheckName.NEXT_CODE,
    ]


def test_duplicate_fails_only_uniqueness() -> None:
    report = validate_registry(
        {"compiler": {"errA": {"code": 1001}, "errB": {"code": 1001}}},
        RANGES,
        marker=MarkerSource.from_text("Next error code: 1002"),
    )
    assert report.failed_checks == (CheckName.UNIQUENESS,)
    uniqueness = report.result_for(CheckName.UNIQUENESS)
    assert uniqueness is not None
    (violation,) = uniqueness.violations
    assert isinstance(violation, DuplicateCodeViolation)
    assert (violation.path, violation.code) == ("compiler.errB", 1001)


def test_out_of_range_code_moves_the_expected_marker() -> None:
    report = validate_registry(
        {"compiler": {"errA": {"code": 1001}, "errB": {"code": 1002}, "errC": {"code": 2000}}},
        RANGES,
        marker=MarkerSource.from_text("Next error code: 1003"),
    )
    assert report.failed_checks == (CheckName.RANGE, CheckName.NEXT_CODE)
    range_result = report.result_for(CheckName.RANGE)
    marker_result = report.result_for(CheckName.NEXT_CODE)
    assert range_result is not None
    assert marker_result is not None
    (range_violation,) = range_result.violations
    assert isinstance(range_violation, RangeViolation)
    assert range_violation.path == "compiler.errC"
    (marker_violation,) = marker_result.violations
    assert isinstance(marker_violation, MarkerMismatch)
    assert marker_violation.expected == 2001


def test_missing_marker_does_not_stop_other_checks() -> None:
    report = validate_registry(
        {"compiler": {"errA": {"code": 1001}, "errB": {"code": 1002}}},
        RANGES,
        marker=MarkerSource.from_text("no marker in this file"),
    )
    assert report.failed_checks == (CheckName.NEXT_CODE,)
    assert report.violation_count == 1


def test_nested_group_is_validated_against_category_range() -> None:
    report = validate_registry({"compiler": {"subgroup": {"errD": {"code": 1050}}}}, RANGES)
    range_result = report.result_for(CheckName.RANGE)
    assert range_result is not None
    assert range_result.checked == 1
    assert report.passed


def test_marker_check_is_skipped_without_marker() -> None:
    report = validate_registry({"compiler": {}}, RANGES)
    assert report.result_for(CheckName.NEXT_CODE) is None


def test_explicit_floor_and_category() -> None:
    report = validate_registry(
        {"compiler": {"errA": {"code": 1001}}, "runtime": {"errB": {"code": 2001}}},
        {**RANGES, "runtime": {"min": 2001, "max": 2999}},
        marker=MarkerSource.from_text("Next error code: 2002"),
        category="runtime",
    )
    assert report.passed
    floored = validate_registry(
        {"compiler": {}},
        RANGES,
        marker=MarkerSource.from_text("Next error code: 5001"),
        floor=5000,
    )
    assert floored.passed


def test_each_check_logs_outcome(caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(logging.getLogger("codereg"), "propagate", True)
    caplog.set_level(logging.INFO, logger="codereg.registry")
    _ = validate_registry({"compiler": {"errA": {"code": 2000}}}, RANGES)
    messages = [record.getMessage() for record in caplog.records if record.name == "codereg.registry"]
    assert "range check failed (1 violation(s))" in messages
    assert "uniqueness check passed (0 violation(s))" in messages
    failed = next(record for record in caplog.records if record.getMessage().startswith("range check failed"))
    assert failed.levelno == logging.WARNING
    assert getattr(failed, "counts", None) == {"checked": 1, "violations": 1}
