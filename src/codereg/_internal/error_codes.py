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

"""Stable error code registry for codereg's own exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, NewType

from codereg.catalog.loader import CatalogFormatError, CatalogImportError, CatalogLoadError
from codereg.config.models import (
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    UnsupportedConfigVersionError,
)
from codereg.registry.marker import MarkerError, MarkerNotFoundError, MarkerParseError
from codereg.registry.ranges import InvalidCodeRangeError

from .exceptions import CoderegError, CoderegTypeError, CoderegValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

ErrorCode = NewType("ErrorCode", str)

_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    CoderegError: ErrorCode("CR000"),
    CoderegValidationError: ErrorCode("CR100"),
    CoderegTypeError: ErrorCode("CR101"),
    ConfigValidationError: ErrorCode("CR110"),
    UnsupportedConfigVersionError: ErrorCode("CR111"),
    ConfigReadError: ErrorCode("CR112"),
    InvalidConfigFileError: ErrorCode("CR113"),
    InvalidCodeRangeError: ErrorCode("CR114"),
    CatalogLoadError: ErrorCode("CR200"),
    CatalogFormatError: ErrorCode("CR201"),
    CatalogImportError: ErrorCode("CR202"),
    MarkerError: ErrorCode("CR300"),
    MarkerNotFoundError: ErrorCode("CR301"),
    MarkerParseError: ErrorCode("CR302"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a structured codereg exception.

    Args:
        exc: Exception instance raised by codereg code paths.

    Returns:
        Error code mapped from the exception's class hierarchy.
    """
    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("CR000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a stable mapping of fully-qualified exception names to error codes.

    Returns:
        Mapping of ``<module>.<ExceptionName>`` strings to error codes.
    """
    return {f"{exc_type.__module__}.{exc_type.__name__}": code for exc_type, code in _ERROR_CODES.items()}


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
