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

"""Hypothesis strategies for catalogs and code ranges."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = [
    "catalog_keys",
    "code_ranges",
    "flat_catalogs",
    "nested_catalogs",
]


def catalog_keys() -> st.SearchStrategy[str]:
    """Return a strategy for identifier-like catalog keys (never ``code``)."""
    return st.from_regex(r"[a-z][a-zA-Z0-9_]{0,8}", fullmatch=True).filter(lambda key: key != "code")


def code_ranges(max_value: int = 10_000) -> st.SearchStrategy[tuple[int, int]]:
    """Return ``(min, max)`` pairs with ``min <= max``."""
    return st.tuples(
        st.integers(min_value=1, max_value=max_value),
        st.integers(min_value=0, max_value=max_value),
    ).map(lambda pair: (pair[0], pair[0] + pair[1]))


def flat_catalogs(max_codes: int = 20) -> st.SearchStrategy[dict[str, dict[str, int]]]:
    """Return single-category catalogs ``{"compiler": {name: code}}`` with raw integer codes."""
    return st.dictionaries(catalog_keys(), st.integers(min_value=0, max_value=5_000), max_size=max_codes).map(
        lambda codes: {"compiler": {name: {"code": code} for name, code in codes.items()}},
    )


def nested_catalogs() -> st.SearchStrategy[dict[str, object]]:
    """Return arbitrarily nested catalogs whose leaves are descriptor mappings."""
    leaves = st.integers(min_value=0, max_value=5_000).map(lambda code: {"code": code})
    tree = st.recursive(
        leaves,
        lambda children: st.dictionaries(catalog_keys(), children, max_size=4),
        max_leaves=25,
    )
    return st.dictionaries(catalog_keys(), tree, min_size=1, max_size=3)
