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

"""Unit tests for the exception error-code registry."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from codereg._internal.error_codes import error_code_catalog, error_code_for
from codereg.catalog import CatalogFormatError, CatalogImportError
from codereg.config import ConfigReadError, InvalidConfigFileError, UnsupportedConfigVersionError
from codereg.exceptions import CoderegError, CoderegTypeError, CoderegValidationError
from codereg.registry import InvalidCodeRangeError, MarkerNotFoundError, MarkerParseError

pytestmark = pytest.mark.unit

REPO_ROOT = Path(__file__).resolve().parents[3]


def test_error_code_for_known_hierarchy() -> None:
    assert error_code_for(CoderegError("x")) == "CR000"
    assert error_code_for(CoderegValidationError("x")) == "CR100"
    assert error_code_for(CoderegTypeError("x")) == "CR101"
    assert error_code_for(UnsupportedConfigVersionError(2, 0)) == "CR111"
    assert error_code_for(ConfigReadError(Path("c.toml"), OSError("x"))) == "CR112"
    assert error_code_for(InvalidConfigFileError(Path("c.toml"), ValueError("x"))) == "CR113"
    assert error_code_for(InvalidCodeRangeError("compiler", "x")) == "CR114"
    assert error_code_for(CatalogFormatError("x.yaml", "x")) == "CR201"
    assert error_code_for(CatalogImportError("pkg:X", ImportError("x"))) == "CR202"
    assert error_code_for(MarkerNotFoundError("MARKER.txt", "x")) == "CR301"
    assert error_code_for(MarkerParseError("MARKER.txt", "x")) == "CR302"


def test_error_code_for_unknown_defaults_to_base() -> None:
    class CustomError(RuntimeError):
        pass

    assert error_code_for(CustomError("x")) == "CR000"


def test_exceptions_keep_builtin_bases() -> None:
    assert isinstance(CatalogFormatError("x", "y"), TypeError)
    assert isinstance(MarkerParseError("x", "y"), ValueError)


def test_error_code_catalog_uniqueness() -> None:
    catalog = error_code_catalog()
    codes = list(catalog.values())
    assert len(set(codes)) == len(codes)
    assert catalog["codereg._internal.exceptions.CoderegError"] == "CR000"


def test_error_code_documentation_is_in_sync() -> None:
    catalog = error_code_catalog()
    content = (REPO_ROOT / "docs" / "EXCEPTIONS.md").read_text(encoding="utf-8")
    assert set(catalog.values()) == set(re.findall(r"CR\d{3}", content))
