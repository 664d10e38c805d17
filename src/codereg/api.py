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

"""High-level entry points combining configuration, loading and checks."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from codereg.catalog.loader import load_catalog
from codereg.catalog.traversal import iter_descriptors
from codereg.config.models import Config, ConfigValidationError
from codereg.core.model_types import LogComponent
from codereg.core.type_aliases import CategoryName
from codereg.logging import structured_extra
from codereg.registry.checks import expected_next_code
from codereg.registry.marker import MarkerSource
from codereg.registry.ranges import CodeRange, RangeTable
from codereg.registry.validator import validate_registry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from codereg.catalog.models import Catalog, ErrorDescriptor
    from codereg.core.type_aliases import DottedPath
    from codereg.registry.results import RegistryReport

logger: logging.Logger = logging.getLogger("codereg.registry")


@dataclass(slots=True, frozen=True)
class ConfigOverrides:
    """Command-line values that take precedence over configuration files."""

    catalog: str | None = None
    marker: Path | None = None
    category: str | None = None
    floor: int | None = None
    ranges: Mapping[CategoryName, CodeRange] | None = None


def apply_overrides(config: Config, overrides: ConfigOverrides) -> Config:
    """Return a copy of ``config`` with ``overrides`` applied.

    Range overrides are merged per category on top of the configured table.
    """
    ranges = config.ranges
    if overrides.ranges:
        merged = dict(config.ranges.ranges)
        merged.update(overrides.ranges)
        ranges = RangeTable(ranges=MappingProxyType(merged))
    marker = replace(
        config.marker,
        path=overrides.marker if overrides.marker is not None else config.marker.path,
        category=CategoryName(overrides.category) if overrides.category else config.marker.category,
        floor=overrides.floor if overrides.floor is not None else config.marker.floor,
    )
    return Config(
        catalog=overrides.catalog or config.catalog,
        ranges=ranges,
        marker=marker,
    )


def load_configured_catalog(config: Config) -> Catalog:
    """Load the catalog named by ``config``.

    Raises:
        ConfigValidationError: If no catalog source is configured.
    """
    if config.catalog is None:
        msg = "no catalog configured; set 'catalog' in codereg.toml or pass --catalog"
        raise ConfigValidationError(msg)
    return load_catalog(config.catalog)


def marker_floor(config: Config) -> int:
    """Return the seed used for the highest-code computation."""
    if config.marker.floor is not None:
        return config.marker.floor
    return config.ranges.floor_for(config.marker.category)


def run_checks(config: Config, *, catalog: Catalog | None = None) -> RegistryReport:
    """Run every configured check.

    Args:
        config: Resolved configuration.
        catalog: Prebuilt catalog; loaded from ``config.catalog`` when omitted.

    Returns:
        Registry report. The next-code check only runs when a marker path is
        configured.
    """
    snapshot = catalog if catalog is not None else load_configured_catalog(config)
    if not config.ranges:
        logger.warning(
            "No code ranges configured; every descriptor will fail the range check",
            extra=structured_extra(component=LogComponent.REGISTRY),
        )
    marker = MarkerSource.from_path(config.marker.path) if config.marker.path is not None else None
    return validate_registry(
        snapshot,
        config.ranges,
        marker=marker,
        floor=marker_floor(config),
        category=config.marker.category,
    )


def next_free_code(config: Config, *, catalog: Catalog | None = None) -> int:
    """Return the value the next-code marker should hold for ``config``."""
    snapshot = catalog if catalog is not None else load_configured_catalog(config)
    return expected_next_code(snapshot, floor=marker_floor(config), category=config.marker.category)


def list_descriptors(config: Config, *, catalog: Catalog | None = None) -> Iterator[tuple[DottedPath, ErrorDescriptor]]:
    """Yield ``(path, descriptor)`` pairs of the configured catalog."""
    snapshot = catalog if catalog is not None else load_configured_catalog(config)
    yield from iter_descriptors(snapshot)


__all__ = [
    "ConfigOverrides",
    "apply_overrides",
    "list_descriptors",
    "load_configured_catalog",
    "marker_floor",
    "next_free_code",
    "run_checks",
]
