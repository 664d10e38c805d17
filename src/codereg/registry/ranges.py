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

"""Per-category code ranges."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import cast

from codereg._internal.exceptions import CoderegValidationError
from codereg.core.type_aliases import CategoryName


class InvalidCodeRangeError(CoderegValidationError):
    """Raised when a code range is malformed (non-integer bounds or min > max)."""

    def __init__(self, category: str, reason: str) -> None:
        """Initialize the exception with the category and the reason.

        Args:
            category: Category whose range is invalid.
            reason: Human-readable explanation.
        """
        self.category = category
        self.reason = reason
        super().__init__(f"Invalid code range for '{category}': {reason}")


@dataclass(slots=True, frozen=True)
class CodeRange:
    """Inclusive ``[min, max]`` interval of codes owned by a category."""

    min: int
    max: int

    def __contains__(self, code: object) -> bool:
        if not isinstance(code, int) or isinstance(code, bool):
            return False
        return self.min <= code <= self.max

    @property
    def floor(self) -> int:
        """Return the value just below the first code of the range."""
        return self.min - 1

    def describe(self) -> str:
        """Return the ``min-max`` rendering used in messages."""
        return f"{self.min}-{self.max}"


@dataclass(slots=True, frozen=True)
class RangeTable:
    """Mapping of category name to its :class:`CodeRange`."""

    ranges: Mapping[CategoryName, CodeRange]

    def __iter__(self) -> Iterator[CategoryName]:
        return iter(self.ranges)

    def __len__(self) -> int:
        return len(self.ranges)

    def get(self, category: str) -> CodeRange | None:
        """Return the range registered for ``category`` if any."""
        return self.ranges.get(CategoryName(category))

    def floor_for(self, category: str | None) -> int:
        """Return the marker floor for ``category``.

        Args:
            category: Tracked category, or ``None`` to consider every range.

        Returns:
            ``range.min - 1`` for the tracked category, otherwise the lowest
            floor among all ranges, or ``0`` when the table is empty.
        """
        if category is not None:
            code_range = self.get(category)
            if code_range is not None:
                return code_range.floor
        if not self.ranges:
            return 0
        return min(code_range.floor for code_range in self.ranges.values())


def _bound(category: str, raw: Mapping[str, object], key: str) -> int:
    value = raw.get(key)
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidCodeRangeError(category, f"'{key}' must be an integer (got {value!r})")
    return value


def code_range(category: str, minimum: int, maximum: int) -> CodeRange:
    """Build a validated :class:`CodeRange`.

    Raises:
        InvalidCodeRangeError: If ``minimum > maximum``.
    """
    if minimum > maximum:
        raise InvalidCodeRangeError(category, f"min {minimum} is greater than max {maximum}")
    return CodeRange(min=minimum, max=maximum)


def range_table_from_mapping(raw: Mapping[str, object]) -> RangeTable:
    """Build a :class:`RangeTable` from ``{category: {"min": int, "max": int}}``.

    Args:
        raw: Mapping of category name to bounds mapping or :class:`CodeRange`.

    Returns:
        Validated range table preserving the input order.

    Raises:
        InvalidCodeRangeError: If any entry is malformed.
    """
    ranges: dict[CategoryName, CodeRange] = {}
    for category, entry in raw.items():
        if isinstance(entry, CodeRange):
            ranges[CategoryName(category)] = code_range(category, entry.min, entry.max)
            continue
        if not isinstance(entry, Mapping):
            raise InvalidCodeRangeError(category, "expected a table with 'min' and 'max'")
        bounds = cast("Mapping[str, object]", entry)
        ranges[CategoryName(category)] = code_range(
            category,
            _bound(category, bounds, "min"),
            _bound(category, bounds, "max"),
        )
    return RangeTable(ranges=MappingProxyType(ranges))


def parse_range_token(token: str) -> tuple[CategoryName, CodeRange]:
    """Parse a ``CATEGORY=MIN-MAX`` command-line token.

    Args:
        token: Raw token, for example ``compiler=1001-1999``.

    Returns:
        Category name and its validated range.

    Raises:
        InvalidCodeRangeError: If the token is malformed.
    """
    category, sep, bounds = token.partition("=")
    category = category.strip()
    if not sep or not category:
        raise InvalidCodeRangeError(token, "expected CATEGORY=MIN-MAX")
    low, _, high = bounds.strip().partition("-")
    try:
        minimum, maximum = int(low), int(high)
    except ValueError as exc:
        raise InvalidCodeRangeError(category, f"bounds '{bounds}' are not integers") from exc
    return CategoryName(category), code_range(category, minimum, maximum)


__all__ = [
    "CodeRange",
    "InvalidCodeRangeError",
    "RangeTable",
    "code_range",
    "parse_range_token",
    "range_table_from_mapping",
]
