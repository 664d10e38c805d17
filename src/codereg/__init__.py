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

"""codereg - error-code registry validator.

Walks a nested catalog of error descriptors and verifies that every code lies
in its category's range, that codes are globally unique, and that the
maintained "next error code" marker matches the highest code plus one.
"""

from __future__ import annotations

from codereg.exceptions import (
    CoderegError,
    CoderegTypeError,
    CoderegValidationError,
)

from .api import (
    ConfigOverrides,
    apply_overrides,
    list_descriptors,
    load_configured_catalog,
    next_free_code,
    run_checks,
)
from .catalog import (
    Catalog,
    CatalogGroup,
    ErrorDescriptor,
    build_catalog,
    iter_descriptors,
    load_catalog,
    traverse_catalog,
)
from .config import Config, load_config
from .core.model_types import CheckName, ErrorLevel
from .registry import (
    CheckResult,
    CodeRange,
    DuplicateCodeViolation,
    MarkerMismatch,
    MarkerSource,
    RangeTable,
    RangeViolation,
    RegistryReport,
    check_next_code_marker,
    check_ranges,
    check_uniqueness,
    validate_registry,
)
from .reporting import render_report

__all__ = [
    "Catalog",
    "CatalogGroup",
    "CheckName",
    "CheckResult",
    "CodeRange",
    "CoderegError",
    "CoderegTypeError",
    "CoderegValidationError",
    "Config",
    "ConfigOverrides",
    "DuplicateCodeViolation",
    "ErrorDescriptor",
    "ErrorLevel",
    "MarkerMismatch",
    "MarkerSource",
    "RangeTable",
    "RangeViolation",
    "RegistryReport",
    "__version__",
    "apply_overrides",
    "build_catalog",
    "check_next_code_marker",
    "check_ranges",
    "check_uniqueness",
    "iter_descriptors",
    "list_descriptors",
    "load_catalog",
    "load_config",
    "load_configured_catalog",
    "next_free_code",
    "render_report",
    "run_checks",
    "traverse_catalog",
    "validate_registry",
]

__version__ = "0.1.0"
