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

"""Configuration management for codereg.

This package loads ``codereg.toml`` (or ``[tool.codereg]`` in
``pyproject.toml``), validates it with pydantic, and exposes the resulting
runtime dataclasses.
"""

from __future__ import annotations

from .loader import LoadedConfig, load_config, load_config_with_metadata, resolve_config_paths
from .models import (
    CONFIG_VERSION,
    Config,
    ConfigModel,
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    MarkerConfig,
    UnsupportedConfigVersionError,
)

__all__ = [
    "CONFIG_VERSION",
    "Config",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "LoadedConfig",
    "MarkerConfig",
    "UnsupportedConfigVersionError",
    "load_config",
    "load_config_with_metadata",
    "resolve_config_paths",
]
