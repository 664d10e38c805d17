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

"""Predicate matchers for error codes.

Each matcher returns a :class:`MatchResult` instead of raising, so any test
harness (pytest, the CLI, or a custom runner) can decide how to report it.
Messages read as the negated expectation when the predicate passed, which is
what a harness shows for ``not``-style assertions.
"""

from __future__ import annotations

from collections.abc import Container
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ranges import CodeRange


@dataclass(slots=True, frozen=True)
class MatchResult:
    """Outcome of a single matcher call."""

    passed: bool
    message: str

    def __bool__(self) -> bool:
        return self.passed


def code_in_range(code: object, code_range: CodeRange, key: str) -> MatchResult:
    """Check that ``code`` is an integer inside ``code_range``.

    Args:
        code: Code value as authored.
        code_range: Inclusive range owned by the descriptor's category.
        key: Dotted path of the descriptor, used in the message.

    Returns:
        Match result with a message naming the path, the code and the range.
    """
    passed = code in code_range
    negation = " not " if passed else " "
    message = f"expected {key}'s error code '{code}'{negation}to be in the range {code_range.describe()}"
    return MatchResult(passed=passed, message=message)


def code_is_unique(code: object, key: str, seen_codes: Container[object]) -> MatchResult:
    """Check that ``code`` has not been seen before.

    The caller owns ``seen_codes`` and adds ``code`` after the check,
    whatever the outcome.

    Args:
        code: Code value as authored.
        key: Dotted path of the descriptor, used in the message.
        seen_codes: Codes already visited in this traversal.

    Returns:
        Match result with a message naming the path and the code.
    """
    passed = code not in seen_codes
    negation = " not " if passed else " "
    message = f"expected {key}'s error code '{code}' to{negation}be a unique error code"
    return MatchResult(passed=passed, message=message)


__all__ = ["MatchResult", "code_in_range", "code_is_unique"]
