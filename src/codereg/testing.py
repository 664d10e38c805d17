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

"""Assertion helpers for running registry checks inside pytest suites.

Example::

    from codereg.registry import validate_registry
    from codereg.testing import assert_registry_valid

    def test_error_catalog() -> None:
        report = validate_registry(ERRORS, {"compiler": {"min": 1001, "max": 1999}})
        assert_registry_valid(report)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codereg.reporting import render_text

if TYPE_CHECKING:
    from codereg.registry.matchers import MatchResult
    from codereg.registry.results import CheckResult, RegistryReport


def assert_match(result: MatchResult) -> None:
    """Raise ``AssertionError`` carrying the matcher message when it failed."""
    if not result.passed:
        raise AssertionError(result.message)


def assert_check_passed(result: CheckResult) -> None:
    """Raise ``AssertionError`` listing every violation of a failed check."""
    if not result.passed:
        raise AssertionError(f"{result.check} check failed:\n{result.message}")


def assert_registry_valid(report: RegistryReport) -> None:
    """Raise ``AssertionError`` with the rendered report when any check failed."""
    if not report.passed:
        raise AssertionError(render_text(report))


__all__ = ["assert_check_passed", "assert_match", "assert_registry_valid"]
