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

"""Registry checks over error catalogs."""

from __future__ import annotations

from .checks import check_next_code_marker, check_ranges, check_uniqueness, expected_next_code, highest_code
from .marker import (
    MARKER_KEY,
    MARKER_PATTERN,
    MarkerError,
    MarkerNotFoundError,
    MarkerParseError,
    MarkerSource,
    parse_next_code_marker,
    render_marker,
)
from .matchers import MatchResult, code_in_range, code_is_unique
from .ranges import CodeRange, InvalidCodeRangeError, RangeTable, parse_range_token, range_table_from_mapping
from .results import CheckResult, RegistryReport
from .validator import validate_registry
from .violations import DuplicateCodeViolation, MarkerMismatch, RangeViolation, Violation

__all__ = [
    "MARKER_KEY",
    "MARKER_PATTERN",
    "CheckResult",
    "CodeRange",
    "DuplicateCodeViolation",
    "InvalidCodeRangeError",
    "MarkerError",
    "MarkerMismatch",
    "MarkerNotFoundError",
    "MarkerParseError",
    "MarkerSource",
    "MatchResult",
    "RangeTable",
    "RangeViolation",
    "RegistryReport",
    "Violation",
    "check_next_code_marker",
    "check_ranges",
    "check_uniqueness",
    "code_in_range",
    "code_is_unique",
    "expected_next_code",
    "highest_code",
    "parse_next_code_marker",
    "parse_range_token",
    "range_table_from_mapping",
    "render_marker",
    "validate_registry",
]
