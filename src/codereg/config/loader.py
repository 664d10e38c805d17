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

"""Configuration discovery and loading for codereg.

Configuration lives in ``codereg.toml`` / ``.codereg.toml`` (top-level keys)
or in ``pyproject.toml`` under ``[tool.codereg]``. Relative paths resolve
against the directory of the file they were read from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final, cast

from pydantic import ValidationError

from codereg.catalog.loader import CatalogFormatError, detect_catalog_format
from codereg.compat import tomllib
from codereg.core.model_types import CatalogFormat, LogComponent
from codereg.logging import structured_extra

from .models import (
    Config,
    ConfigModel,
    ConfigReadError,
    InvalidConfigFileError,
    config_from_model,
)

logger: logging.Logger = logging.getLogger("codereg.config")

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("codereg.toml", ".codereg.toml", "pyproject.toml")
ROOT_MARKERS: Final[tuple[str, ...]] = (".git", "codereg.toml", ".codereg.toml", "pyproject.toml")


@dataclass(slots=True, frozen=True)
class LoadedConfig:
    """Container for a loaded configuration and its source path.

    Attributes:
        config: Parsed configuration instance.
        path: Filesystem path the configuration was loaded from, or None when
            defaults are used.
    """

    config: Config
    path: Path | None


def resolve_project_root(start: Path) -> Path:
    """Return the nearest ancestor of ``start`` (inclusive) holding a root marker.

    Falls back to ``start`` when no marker is found.
    """
    current = start.resolve()
    for candidate in (current, *current.parents):
        if any((candidate / marker).exists() for marker in ROOT_MARKERS):
            return candidate
    return current


def load_config(explicit_path: Path | None = None) -> Config:
    """Load codereg configuration from a TOML file or use defaults.

    Args:
        explicit_path: Optional explicit path to a configuration file. If provided,
            only this file will be checked. If None, standard locations are searched.

    Returns:
        Config with every relative path resolved.
    """
    return load_config_with_metadata(explicit_path).config


def load_config_with_metadata(explicit_path: Path | None = None) -> LoadedConfig:
    """Load codereg configuration with metadata about the source file.

    Search order: the explicit path when given; otherwise ``codereg.toml``,
    ``.codereg.toml`` and ``pyproject.toml`` (only when it has a
    ``[tool.codereg]`` table) inside the detected project root. When nothing
    is found, default settings are returned with a ``None`` path.

    Args:
        explicit_path: Optional explicit path to a configuration file.

    Returns:
        LoadedConfig: Parsed configuration and the path it originated from.

    Raises:
        ConfigReadError: If a candidate file cannot be read or parsed as TOML.
        InvalidConfigFileError: If the configuration payload fails validation.
    """
    if explicit_path is not None:
        candidates = [_absolute(explicit_path)]
    else:
        root = resolve_project_root(Path.cwd())
        candidates = [root / name for name in CONFIG_FILENAMES]

    for candidate in candidates:
        loaded = _load_candidate(candidate, explicit=explicit_path is not None)
        if loaded is not None:
            logger.debug(
                "Loaded configuration from %s",
                loaded.path,
                extra=structured_extra(component=LogComponent.CONFIG, path=candidate),
            )
            return loaded
    return LoadedConfig(config=Config(), path=None)


def _absolute(candidate: Path) -> Path:
    return candidate if candidate.is_absolute() else (Path.cwd() / candidate).resolve()


def _load_candidate(candidate: Path, *, explicit: bool) -> LoadedConfig | None:
    if not candidate.is_file():
        if explicit:
            raise ConfigReadError(candidate, FileNotFoundError("configuration file does not exist"))
        return None
    try:
        raw_map: dict[str, object] = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(candidate, exc) from exc

    payload = _extract_payload(candidate, raw_map)
    if payload is None:
        if explicit:
            message = f"{candidate.name} does not define a [tool.codereg] section"
            raise InvalidConfigFileError(candidate, ValueError(message))
        return None

    try:
        model = ConfigModel.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigFileError(candidate, exc) from exc

    config = config_from_model(model)
    try:
        resolve_config_paths(candidate.parent.resolve(), config)
    except CatalogFormatError as exc:
        raise InvalidConfigFileError(candidate, exc) from exc
    return LoadedConfig(config=config, path=candidate.resolve())


def _extract_payload(candidate: Path, raw_map: dict[str, object]) -> dict[str, object] | None:
    if candidate.name != "pyproject.toml":
        return raw_map
    tool_section = raw_map.get("tool")
    if tool_section is None:
        return None
    if not isinstance(tool_section, dict):
        raise InvalidConfigFileError(candidate, ValueError("[tool] in pyproject.toml must be a TOML table"))
    section = cast("dict[str, object]", tool_section).get("codereg")
    if section is None:
        return None
    if not isinstance(section, dict):
        raise InvalidConfigFileError(candidate, ValueError("[tool.codereg] must be a TOML table"))
    return cast("dict[str, object]", section)


def resolve_config_paths(base_dir: Path, config: Config) -> None:
    """Resolve relative catalog and marker paths against ``base_dir`` in place.

    Import references (``package.module:ATTR``) are left untouched.
    """
    if config.catalog is not None and detect_catalog_format(config.catalog) is not CatalogFormat.PYTHON:
        catalog_path = Path(config.catalog)
        if not catalog_path.is_absolute():
            config.catalog = str((base_dir / catalog_path).resolve())
    marker_path = config.marker.path
    if marker_path is not None and not marker_path.is_absolute():
        config.marker.path = (base_dir / marker_path).resolve()


__all__ = [
    "CONFIG_FILENAMES",
    "LoadedConfig",
    "load_config",
    "load_config_with_metadata",
    "resolve_config_paths",
    "resolve_project_root",
]
