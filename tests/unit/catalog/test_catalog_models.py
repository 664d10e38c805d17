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

"""Unit tests for catalog models and node discrimination."""

from __future__ import annotations

import types
from dataclasses import FrozenInstanceError
from typing import TYPE_CHECKING

import pytest

from codereg.catalog import CatalogGroup, ErrorDescriptor, build_catalog, build_node
from codereg.core.model_types import ErrorLevel

if TYPE_CHECKING:
    from codereg.catalog import Catalog

pytestmark = pytest.mark.unit


class _Descriptor:
    def __init__(self, code: object, text: str) -> None:
        self.code = code
        self.text = text


def test_mapping_with_code_key_becomes_descriptor() -> None:
    node = build_node({"code": 1001, "message": "boom", "level": "Warning", "url": "https://x"})
    assert node == ErrorDescriptor(code=1001, message="boom", level=ErrorLevel.WARNING, url="https://x")


def test_mapping_without_code_key_becomes_group() -> None:
    node = build_node({"errA": {"code": 1001}})
    assert isinstance(node, CatalogGroup)
    assert list(node) == ["errA"]


def test_empty_mapping_is_still_a_group() -> None:
    node = build_node({})
    assert isinstance(node, CatalogGroup)
    assert len(node) == 0


def test_zero_code_is_still_a_descriptor() -> None:
    node = build_node({"code": 0})
    assert isinstance(node, ErrorDescriptor)
    assert node.code == 0


def test_scalars_and_none_are_skipped() -> None:
    catalog = build_catalog({"compiler": {"version": "1.0", "count": 3, "missing": None, "err": {"code": 1001}}})
    group = catalog["compiler"]
    assert isinstance(group, CatalogGroup)
    assert list(group) == ["err"]


def test_object_with_code_attribute_becomes_descriptor() -> None:
    node = build_node(_Descriptor(1001, "from text"))
    assert node == ErrorDescriptor(code=1001, message="from text")


def test_numeric_levels_map_in_order() -> None:
    assert build_node({"code": 1, "level": 0}) == ErrorDescriptor(code=1, level=ErrorLevel.FATAL)
    assert build_node({"code": 1, "level": 3}) == ErrorDescriptor(code=1, level=ErrorLevel.LOG)
    assert build_node({"code": 1, "level": 9}) == ErrorDescriptor(code=1, level=None)


def test_module_catalog_uses_public_members() -> None:
    module = types.ModuleType("fake_errors")
    module.compiler = {"errA": {"code": 1001}}  # type: ignore[attr-defined]
    module._private = {"errB": {"code": 1002}}  # type: ignore[attr-defined]
    catalog = build_catalog(module)
    assert list(catalog) == ["compiler"]


def test_nested_modules_are_not_groups() -> None:
    nested = types.ModuleType("fake_nested")
    nested.runtime = {"errA": {"code": 2001}}  # type: ignore[attr-defined]
    assert build_node(nested) is None
    assert list(build_catalog({"compiler": {}, "helpers": nested})) == ["compiler"]


def test_root_is_always_a_group() -> None:
    catalog = build_catalog({"code": 5, "compiler": {"err": {"code": 1001}}})
    assert isinstance(catalog, CatalogGroup)
    assert list(catalog) == ["compiler"]


def test_build_catalog_returns_existing_snapshot(compiler_catalog: Catalog) -> None:
    assert build_catalog(compiler_catalog) is compiler_catalog


def test_descriptor_is_immutable() -> None:
    descriptor = ErrorDescriptor(code=1001)
    with pytest.raises(FrozenInstanceError):
        descriptor.code = 1002  # type: ignore[misc]


@pytest.mark.parametrize(
    ("code", "expected"),
    [(1001, 1001), (True, None), ("1001", None), (10.0, None)],
)
def test_integer_code_excludes_non_integers(code: object, expected: int | None) -> None:
    assert ErrorDescriptor(code=code).integer_code == expected


def test_catalog_is_snapshot_of_source() -> None:
    raw: dict[str, object] = {"compiler": {"errA": {"code": 1001}}}
    catalog = build_catalog(raw)
    raw["runtime"] = {"errB": {"code": 2001}}
    assert list(catalog) == ["compiler"]
