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

"""Catalog, range and marker fixtures shared by the test suite."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest

from codereg.catalog import Catalog, build_catalog
from codereg.registry import RangeTable, range_table_from_mapping

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

__all__ = [
    "COMPILER_RANGE",
    "compiler_catalog",
    "compiler_ranges",
    "make_catalog",
    "reset_codereg_logger",
    "write_project",
]

COMPILER_RANGE: dict[str, dict[str, int]] = {"compiler": {"min": 1001, "max": 1999}}


def make_catalog(**categories: object) -> Catalog:
    """Build a catalog from keyword categories, e.g. ``make_catalog(compiler={...})``."""
    return build_catalog(categories)


def write_project(
    root: Path,
    *,
    catalog: dict[str, object],
    marker: str | None = "Next error code: 1003\n",
    marker_name: str = "MARKER.txt",
    ranges: dict[str, dict[str, int]] | None = None,
    category: str | None = "compiler",
) -> Path:
    """Write a catalog, marker and ``codereg.toml`` into ``root``.

    Returns:
        Path to the written configuration file.
    """
    _ = (root / "errors.json").write_text(json.dumps(catalog), encoding="utf-8")
    lines = ["config_version = 0", 'catalog = "errors.json"', ""]
    for name, bounds in (ranges or COMPILER_RANGE).items():
        lines.extend([f"[ranges.{name}]", f"min = {bounds['min']}", f"max = {bounds['max']}", ""])
    if marker is not None:
        _ = (root / marker_name).write_text(marker, encoding="utf-8")
        lines.extend(["[marker]", f'path = "{marker_name}"'])
        if category is not None:
            lines.append(f'category = "{category}"')
    config_path = root / "codereg.toml"
    _ = config_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return config_path


@pytest.fixture
def compiler_ranges() -> RangeTable:
    """Range table with the single ``compiler`` category (1001-1999)."""
    return range_table_from_mapping(COMPILER_RANGE)


@pytest.fixture
def compiler_catalog() -> Catalog:
    """Two valid compiler errors, codes 1001 and 1002."""
    return make_catalog(
        compiler={
            "errA": {"code": 1001, "message": "first"},
            "errB": {"code": 1002, "message": "second", "level": "warning"},
        },
    )


@pytest.fixture
def reset_codereg_logger() -> Generator[None, None, None]:
    """Restore the ``codereg`` logger after tests that call ``configure_logging``."""
    logger = logging.getLogger("codereg")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    for child in ("codereg.cli", "codereg.catalog", "codereg.config", "codereg.registry"):
        logging.getLogger(child).setLevel(logging.NOTSET)
