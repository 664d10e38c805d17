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

"""Property-based tests for the registry checks."""

from __future__ import annotations

from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from codereg.catalog import build_catalog, iter_descriptors
from codereg.registry import (
    CodeRange,
    MarkerSource,
    check_next_code_marker,
    check_ranges,
    check_uniqueness,
    code_in_range,
    range_table_from_mapping,
    render_marker,
)
from tests.property_based.strategies import code_ranges, flat_catalogs, nested_catalogs

pytestmark = pytest.mark.property


@given(code_ranges(), st.integers())
def test_code_in_range_matches_interval(bounds: tuple[int, int], code: int) -> None:
    result = code_in_range(code, CodeRange(min=bounds[0], max=bounds[1]), "compiler.err")
    assert result.passed is (bounds[0] <= code <= bounds[1])
    assert (" not " in result.message) is result.passed


@given(nested_catalogs())
def test_uniqueness_reports_each_repeat_once(raw: dict[str, object]) -> None:
    catalog = build_catalog(raw)
    counts = Counter(descriptor.code for _, descriptor in iter_descriptors(catalog))
    result = check_uniqueness(catalog)
    assert len(result.violations) == sum(count - 1 for count in counts.values())
    assert result.checked == sum(counts.values())


@given(nested_catalogs())
def test_range_check_visits_every_descriptor(raw: dict[str, object]) -> None:
    catalog = build_catalog(raw)
    table = range_table_from_mapping({category: {"min": 0, "max": 5_000} for category in raw})
    result = check_ranges(catalog, table)
    assert result.passed
    assert result.checked == len(list(iter_descriptors(catalog)))


@given(flat_catalogs())
def test_marker_equal_to_highest_plus_one_passes(raw: dict[str, dict[str, object]]) -> None:
    catalog = build_catalog(raw)
    codes = [descriptor.integer_code or 0 for _, descriptor in iter_descriptors(catalog)]
    expected = max([999, *codes]) + 1
    good = check_next_code_marker(catalog, MarkerSource.from_text(render_marker(expected)), floor=999)
    bad = check_next_code_marker(catalog, MarkerSource.from_text(render_marker(expected + 1)), floor=999)
    assert good.passed
    assert not bad.passed
