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

"""The three registry checks: range membership, uniqueness, next-code marker.

Every check performs its own traversal over an immutable catalog snapshot,
collects all violations, and never raises for catalog problems.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import TYPE_CHECKING

from codereg.catalog.traversal import iter_descriptors, top_level_category
from codereg.core.model_types import CheckName, LogComponent
from codereg.core.type_aliases import DottedPath
from codereg.logging import structured_extra

from .marker import MarkerError, render_marker
from .matchers import code_in_range, code_is_unique
from .results import CheckResult
from .violations import DuplicateCodeViolation, MarkerMismatch, RangeViolation, Violation

if TYPE_CHECKING:
    from codereg.catalog.models import Catalog

    from .marker import MarkerSource
    from .ranges import RangeTable

logger: logging.Logger = logging.getLogger("codereg.registry")


def _log_violation(check: CheckName, violation: Violation, *, path: str | None, code: object) -> None:
    logger.debug(
        violation.message,
        extra=structured_extra(component=LogComponent.REGISTRY, check=check, path=path, code=code),
    )


def check_ranges(catalog: Catalog, ranges: RangeTable) -> CheckResult:
    """Verify every descriptor code is an integer inside its category range.

    The category of a descriptor is the first segment of its dotted path. A
    descriptor whose category has no registered range is a violation too.

    Args:
        catalog: Catalog snapshot.
        ranges: Range table keyed by top-level category.

    Returns:
        Result listing every :class:`RangeViolation`.
    """
    violations: list[Violation] = []
    checked = 0
    for path, descriptor in iter_descriptors(catalog):
        checked += 1
        category = top_level_category(path)
        code_range = ranges.get(category)
        if code_range is None:
            violation = RangeViolation(
                message=f"expected {path}'s error code '{descriptor.code}' to belong to a category "
                f"with a registered range, but '{category}' has none",
                path=path,
                code=descriptor.code,
                expected=None,
            )
        else:
            match = code_in_range(descriptor.code, code_range, path)
            if match.passed:
                continue
            violation = RangeViolation(
                message=match.message,
                path=path,
                code=descriptor.code,
                expected=code_range.describe(),
            )
        _log_violation(CheckName.RANGE, violation, path=path, code=descriptor.code)
        violations.append(violation)
    return CheckResult(check=CheckName.RANGE, violations=tuple(violations), checked=checked)


class _SeenCodes:
    """Codes visited so far, keyed so that ``True`` and ``1`` stay distinct."""

    __slots__ = ("_first_paths",)

    def __init__(self) -> None:
        self._first_paths: dict[Hashable, DottedPath] = {}

    @staticmethod
    def _key(code: object) -> Hashable:
        try:
            _ = hash(code)
        except TypeError:
            return (False, False, repr(code))
        return (type(code) is bool, True, code)

    def __contains__(self, code: object) -> bool:
        return self._key(code) in self._first_paths

    def first_path(self, code: object) -> DottedPath:
        return self._first_paths[self._key(code)]

    def add(self, code: object, path: DottedPath) -> None:
        _ = self._first_paths.setdefault(self._key(code), path)


def check_uniqueness(catalog: Catalog) -> CheckResult:
    """Verify no code appears on more than one descriptor anywhere.

    The seen set spans all categories. Every repeat is reported, so a code
    used three times yields two violations.

    Args:
        catalog: Catalog snapshot.

    Returns:
        Result listing every :class:`DuplicateCodeViolation`.
    """
    seen = _SeenCodes()
    violations: list[Violation] = []
    checked = 0
    for path, descriptor in iter_descriptors(catalog):
        checked += 1
        match = code_is_unique(descriptor.code, path, seen)
        if not match.passed:
            violation = DuplicateCodeViolation(
                message=match.message,
                path=path,
                code=descriptor.code,
                first_path=seen.first_path(descriptor.code),
            )
            _log_violation(CheckName.UNIQUENESS, violation, path=path, code=descriptor.code)
            violations.append(violation)
        seen.add(descriptor.code, path)
    return CheckResult(check=CheckName.UNIQUENESS, violations=tuple(violations), checked=checked)


def highest_code(catalog: Catalog, *, floor: int, category: str | None = None) -> int:
    """Return the largest integer code, seeded with ``floor``.

    Args:
        catalog: Catalog snapshot.
        floor: Seed value; returned unchanged for an empty catalog.
        category: Restrict to descriptors of this top-level category.

    Returns:
        ``max(floor, *codes)``. Non-integer codes are ignored.
    """
    highest = floor
    for path, descriptor in iter_descriptors(catalog):
        if category is not None and top_level_category(path) != category:
            continue
        code = descriptor.integer_code
        if code is not None:
            highest = max(highest, code)
    return highest


def expected_next_code(catalog: Catalog, *, floor: int, category: str | None = None) -> int:
    """Return the value the next-code marker must hold (``highest + 1``)."""
    return highest_code(catalog, floor=floor, category=category) + 1


def check_next_code_marker(
    catalog: Catalog,
    marker: MarkerSource,
    *,
    floor: int,
    category: str | None = None,
) -> CheckResult:
    """Verify the human-maintained marker equals the highest code plus one.

    A missing artifact, a missing marker, or an unparsable value fails this
    check only.

    Args:
        catalog: Catalog snapshot.
        marker: Where to read the marker from.
        floor: Seed for the highest-code computation (range minimum minus one).
        category: Restrict the computation to one top-level category.

    Returns:
        Result holding at most one :class:`MarkerMismatch`.
    """
    expected = expected_next_code(catalog, floor=floor, category=category)
    violation: MarkerMismatch | None = None
    try:
        actual = marker.read()
    except MarkerError as exc:
        violation = MarkerMismatch(
            message=f"expected '{render_marker(expected)}' in {exc.source}, but {exc.reason}",
            source=marker.label,
            expected=expected,
            actual=None,
        )
    else:
        if actual != expected:
            violation = MarkerMismatch(
                message=f"expected '{render_marker(expected)}' in {marker.label}, found {actual}",
                source=marker.label,
                expected=expected,
                actual=actual,
            )
    if violation is None:
        return CheckResult(check=CheckName.NEXT_CODE, checked=1)
    _log_violation(CheckName.NEXT_CODE, violation, path=marker.label, code=violation.actual)
    return CheckResult(check=CheckName.NEXT_CODE, violations=(violation,), checked=1)


__all__ = [
    "check_next_code_marker",
    "check_ranges",
    "check_uniqueness",
    "expected_next_code",
    "highest_code",
]
