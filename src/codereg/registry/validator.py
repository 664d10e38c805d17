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

"""Run every registry check against one catalog snapshot."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from codereg.catalog.models import CatalogGroup, build_catalog
from codereg.core.model_types import CheckName, LogComponent
from codereg.logging import structured_extra

from .checks import check_next_code_marker, check_ranges, check_uniqueness
from .ranges import RangeTable, range_table_from_mapping
from .results import CheckResult, RegistryReport

if TYPE_CHECKING:
    from codereg.catalog.models import Catalog

    from .marker import MarkerSource

logger: logging.Logger = logging.getLogger("codereg.registry")


def _timed(check: CheckName, run: Callable[[], CheckResult]) -> CheckResult:
    started = time.perf_counter()
    result = run()
    duration_ms = (time.perf_counter() - started) * 1000
    log = logger.info if result.passed else logger.warning
    log(
        "%s check %s (%d violation(s))",
        check,
        "passed" if result.passed else "failed",
        len(result.violations),
        extra=structured_extra(
            component=LogComponent.REGISTRY,
            check=check,
            duration_ms=duration_ms,
            counts={"checked": result.checked, "violations": len(result.violations)},
        ),
    )
    return result


def validate_registry(
    catalog: Catalog | Mapping[str, object],
    ranges: RangeTable | Mapping[str, object],
    *,
    marker: MarkerSource | None = None,
    floor: int | None = None,
    category: str | None = None,
) -> RegistryReport:
    """Run the range, uniqueness and next-code checks independently.

    A failing check never prevents the others from running. The next-code
    check runs only when ``marker`` is supplied.

    Args:
        catalog: Catalog snapshot, or raw nested mapping to build one from.
        ranges: Range table, or raw ``{category: {"min", "max"}}`` mapping.
        marker: Where the next-code marker lives.
        floor: Seed for the highest code. Defaults to the tracked category's
            ``min - 1`` (or the lowest such floor when no category is tracked).
        category: Category whose codes feed the next-code computation. ``None``
            considers every descriptor.

    Returns:
        Report with one result per check that ran, in execution order.
    """
    snapshot = catalog if isinstance(catalog, CatalogGroup) else build_catalog(catalog)
    table = ranges if isinstance(ranges, RangeTable) else range_table_from_mapping(ranges)

    results = [
        _timed(CheckName.RANGE, lambda: check_ranges(snapshot, table)),
        _timed(CheckName.UNIQUENESS, lambda: check_uniqueness(snapshot)),
    ]
    if marker is not None:
        seed = floor if floor is not None else table.floor_for(category)
        results.append(
            _timed(
                CheckName.NEXT_CODE,
                lambda: check_next_code_marker(snapshot, marker, floor=seed, category=category),
            ),
        )
    return RegistryReport(results=tuple(results))


__all__ = ["validate_registry"]
