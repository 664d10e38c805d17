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

"""Configuration models and validation for codereg.

Pydantic models validate the TOML payload; they are then converted into the
runtime dataclasses used by the rest of the tool.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import ClassVar, Final

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator, model_validator

from codereg._internal.exceptions import CoderegValidationError
from codereg.core.type_aliases import CategoryName
from codereg.registry.ranges import CodeRange, RangeTable, code_range

CONFIG_VERSION: Final[int] = 0


class ConfigValidationError(CoderegValidationError):
    """Raised when configuration data contains invalid values."""


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: int, expected: int) -> None:
        """Initialize the exception with version information.

        Args:
            provided: The config_version value provided in the configuration file.
            expected: The config_version value expected by this version of codereg.
        """
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The path to the configuration file that could not be read.
            error: The underlying exception that caused the read failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when the configuration file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with the configuration path and validation error.

        Args:
            path: The path to the configuration file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid codereg configuration in {path}: {error}")


def _empty_ranges() -> RangeTable:
    return RangeTable(ranges=MappingProxyType({}))


@dataclass(slots=True)
class MarkerConfig:
    """Runtime settings for the next-code marker check.

    Attributes:
        path: Marker artifact; ``None`` disables the check.
        category: Category whose codes feed the computation (``None`` for all).
        floor: Explicit seed overriding ``range.min - 1``.
    """

    path: Path | None = None
    category: CategoryName | None = None
    floor: int | None = None


@dataclass(slots=True)
class Config:
    """Resolved codereg configuration.

    Attributes:
        catalog: Catalog document path or ``module[:attribute]`` reference.
        ranges: Code ranges keyed by top-level category.
        marker: Next-code marker settings.
    """

    catalog: str | None = None
    ranges: RangeTable = field(default_factory=_empty_ranges)
    marker: MarkerConfig = field(default_factory=MarkerConfig)


class CodeRangeModel(BaseModel):
    """Pydantic model for one ``[ranges.<category>]`` table."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
    min: StrictInt
    max: StrictInt

    @model_validator(mode="after")
    def _check_order(self) -> CodeRangeModel:
        if self.min > self.max:
            msg = f"min {self.min} is greater than max {self.max}"
            raise ValueError(msg)
        return self


class MarkerConfigModel(BaseModel):
    """Pydantic model for the ``[marker]`` table.

    Attributes:
        path: Marker artifact, relative to the configuration file.
        category: Tracked category for the next-code computation.
        floor: Explicit seed for the highest-code computation.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
    path: Path | None = None
    category: str | None = None
    floor: StrictInt | None = None

    @field_validator("category", mode="before")
    @classmethod
    def _strip_category(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value


class ConfigModel(BaseModel):
    """Pydantic model for the top-level codereg configuration.

    Attributes:
        config_version: Schema version number for the configuration file.
        catalog: Catalog document path or import reference.
        marker: Next-code marker settings.
        ranges: Mapping of category name to code range.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
    config_version: int = Field(default=CONFIG_VERSION)
    catalog: str | None = None
    marker: MarkerConfigModel = Field(default_factory=MarkerConfigModel)
    ranges: dict[str, CodeRangeModel] = Field(default_factory=dict)

    @field_validator("catalog", mode="before")
    @classmethod
    def _strip_catalog(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @model_validator(mode="after")
    def _check_version(self) -> ConfigModel:
        if self.config_version != CONFIG_VERSION:
            raise UnsupportedConfigVersionError(self.config_version, CONFIG_VERSION)
        return self


def ranges_from_model(model: ConfigModel) -> RangeTable:
    """Convert validated range tables into a :class:`RangeTable`."""
    ranges: dict[CategoryName, CodeRange] = {}
    for name, range_model in model.ranges.items():
        category = name.strip()
        ranges[CategoryName(category)] = code_range(category, range_model.min, range_model.max)
    return RangeTable(ranges=MappingProxyType(ranges))


def config_from_model(model: ConfigModel) -> Config:
    """Convert a validated :class:`ConfigModel` into a runtime :class:`Config`.

    Paths are returned as authored; the loader resolves them against the
    configuration file directory.
    """
    marker = MarkerConfig(
        path=model.marker.path,
        category=CategoryName(model.marker.category) if model.marker.category else None,
        floor=model.marker.floor,
    )
    return Config(catalog=model.catalog, ranges=ranges_from_model(model), marker=marker)


__all__ = [
    "CONFIG_VERSION",
    "CodeRangeModel",
    "Config",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "MarkerConfig",
    "MarkerConfigModel",
    "UnsupportedConfigVersionError",
    "config_from_model",
    "ranges_from_model",
]
