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

"""Enumerations shared across codereg layers."""

from __future__ import annotations

from codereg.compat import StrEnum


class ErrorLevel(StrEnum):
    """Severity attached to an error descriptor.

    Members are ordered by severity so numeric levels ``0..3`` found in
    catalogs authored for other toolchains map onto the same names.

    Attributes:
        FATAL: Unrecoverable problem; processing stops.
        ERROR: Problem reported as an error.
        WARNING: Problem reported as a warning.
        LOG: Informational message.
    """

    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"
    LOG = "log"

    @classmethod
    def from_str(cls, raw: str) -> ErrorLevel:
        """Create an ErrorLevel from a string value.

        Args:
            raw: String representation of the level (case-insensitive).

        Returns:
            ErrorLevel enum value.

        Raises:
            ValueError: If the string does not match any ErrorLevel value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown error level '{raw}'"
            raise ValueError(msg) from exc

    @classmethod
    def coerce(cls, raw: object) -> ErrorLevel | None:
        """Coerce an authored level value, returning ``None`` when unknown.

        Accepts members, names such as ``"Warning"`` and the numeric levels
        ``0`` (fatal) through ``3`` (log).

        Args:
            raw: Level value as found in the catalog.

        Returns:
            Matching ErrorLevel, or ``None`` when the value is absent or unknown.
        """
        if raw is None or isinstance(raw, bool):
            return None
        if isinstance(raw, ErrorLevel):
            return raw
        if isinstance(raw, int):
            members = list(cls)
            return members[raw] if 0 <= raw < len(members) else None
        if isinstance(raw, str):
            try:
                return cls.from_str(raw)
            except ValueError:
                return None
        return None


class CheckName(StrEnum):
    """Identifiers of the registry checks, in execution order.

    Attributes:
        RANGE: Every code lies within its category range.
        UNIQUENESS: No code appears on more than one descriptor.
        NEXT_CODE: The next-code marker equals the maximum code plus one.
    """

    RANGE = "range"
    UNIQUENESS = "uniqueness"
    NEXT_CODE = "next_code"

    @classmethod
    def from_str(cls, raw: str) -> CheckName:
        """Create a CheckName from a string value.

        Args:
            raw: String representation of the check name.

        Returns:
            CheckName enum value.

        Raises:
            ValueError: If the string does not match any CheckName value.
        """
        value = raw.strip().lower().replace("-", "_")
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown check '{raw}'"
            raise ValueError(msg) from exc


class ViolationKind(StrEnum):
    """Kinds of registry violations.

    Attributes:
        RANGE: A code is outside its category range or is not an integer.
        DUPLICATE_CODE: A code appears on more than one descriptor.
        MARKER_MISMATCH: The next-code marker is wrong, missing or unparsable.
    """

    RANGE = "range_violation"
    DUPLICATE_CODE = "duplicate_code"
    MARKER_MISMATCH = "marker_mismatch"


class CatalogFormat(StrEnum):
    """Supported catalog sources.

    Attributes:
        JSON: ``.json`` document.
        TOML: ``.toml`` document.
        PYTHON: ``package.module:ATTRIBUTE`` import reference.
    """

    JSON = "json"
    TOML = "toml"
    PYTHON = "python"


class ReportFormat(StrEnum):
    """Output formats for validation reports.

    Attributes:
        TEXT: Human-readable lines.
        JSON: Machine-readable JSON document.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> ReportFormat:
        """Create a ReportFormat from a string value.

        Args:
            raw: String representation of the report format.

        Returns:
            ReportFormat enum value.

        Raises:
            ValueError: If the string does not match any ReportFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown report format '{raw}'"
            raise ValueError(msg) from exc


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Enumeration of loggable system components.

    Attributes:
        CLI: Command-line interface component.
        CATALOG: Catalog loading and traversal.
        REGISTRY: Registry checks.
        CONFIG: Configuration discovery and loading.
    """

    CLI = "cli"
    CATALOG = "catalog"
    REGISTRY = "registry"
    CONFIG = "config"


__all__ = [
    "CatalogFormat",
    "CheckName",
    "ErrorLevel",
    "LogComponent",
    "LogFormat",
    "ReportFormat",
    "ViolationKind",
]
