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

"""Reading the human-maintained "next error code" marker.

Two artifact shapes are accepted:

- any text file (typically the catalog source itself) containing a line such
  as ``// Next error code: 1003``; the first match wins;
- a structured ``.toml`` or ``.json`` metadata file with an integer
  ``next_error_code`` key, which avoids scraping comments.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from codereg._internal.exceptions import CoderegValidationError
from codereg.compat import Self, tomllib

MARKER_PATTERN: Final[re.Pattern[str]] = re.compile(r"Next error code: (\d+)")
MARKER_KEY: Final[str] = "next_error_code"
STRUCTURED_SUFFIXES: Final[frozenset[str]] = frozenset({".toml", ".json"})


class MarkerError(CoderegValidationError):
    """Base error for marker artifacts that cannot yield a next-code value."""

    def __init__(self, source: str, reason: str) -> None:
        """Initialize the exception with the marker source and reason.

        Args:
            source: Label of the marker artifact (path or ``<text>``).
            reason: Human-readable explanation.
        """
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class MarkerNotFoundError(MarkerError):
    """Raised when the marker artifact or the marker inside it is missing."""


class MarkerParseError(MarkerError):
    """Raised when the marker artifact exists but its value cannot be parsed."""


class MarkerFileModel(BaseModel):
    """Structured marker metadata file.

    Attributes:
        next_error_code: Next free code, maintained by hand.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="allow")
    next_error_code: int = Field(strict=True)


def parse_next_code_marker(text: str, *, source: str = "<text>") -> int:
    """Extract the integer from the first ``Next error code: <integer>`` line.

    Args:
        text: Artifact contents.
        source: Label used in error messages.

    Returns:
        Parsed marker value.

    Raises:
        MarkerNotFoundError: If no marker line is present.
    """
    match = MARKER_PATTERN.search(text)
    if match is None:
        raise MarkerNotFoundError(source, "no 'Next error code: <integer>' marker found")
    return int(match.group(1))


def parse_structured_marker(text: str, *, suffix: str, source: str) -> int:
    """Read ``next_error_code`` from TOML or JSON metadata.

    Args:
        text: Document contents.
        suffix: ``.toml`` or ``.json``.
        source: Label used in error messages.

    Returns:
        Parsed marker value.

    Raises:
        MarkerNotFoundError: If the key is absent.
        MarkerParseError: If the document or the value is invalid.
    """
    try:
        payload: object = tomllib.loads(text) if suffix == ".toml" else json.loads(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise MarkerParseError(source, f"unreadable metadata: {exc}") from exc
    if not isinstance(payload, dict):
        raise MarkerParseError(source, "metadata root must be a table/object")
    if MARKER_KEY not in payload:
        raise MarkerNotFoundError(source, f"missing '{MARKER_KEY}' key")
    try:
        model = MarkerFileModel.model_validate(payload)
    except ValidationError as exc:
        raise MarkerParseError(source, f"'{MARKER_KEY}' must be an integer") from exc
    return model.next_error_code


def render_marker(next_code: int) -> str:
    """Return the marker line maintainers paste next to the catalog."""
    return f"Next error code: {next_code}"


@dataclass(slots=True, frozen=True)
class MarkerSource:
    """Where the next-code marker lives: a file path or literal text."""

    path: Path | None = None
    text: str | None = None

    @classmethod
    def from_path(cls, path: str | Path) -> Self:
        """Return a source that reads ``path`` when checked."""
        return cls(path=Path(path))

    @classmethod
    def from_text(cls, text: str) -> Self:
        """Return a source backed by in-memory text."""
        return cls(text=text)

    @property
    def label(self) -> str:
        """Return a display label for messages."""
        return str(self.path) if self.path is not None else "<text>"

    @property
    def structured(self) -> bool:
        """Return ``True`` when the source is a TOML/JSON metadata file."""
        return self.path is not None and self.path.suffix.lower() in STRUCTURED_SUFFIXES

    def read(self) -> int:
        """Read and parse the marker value.

        Returns:
            The marker value.

        Raises:
            MarkerNotFoundError: If the file or the marker is missing.
            MarkerParseError: If the file cannot be read or the value parsed.
        """
        if self.path is None:
            return parse_next_code_marker(self.text or "", source=self.label)
        if not self.path.is_file():
            raise MarkerNotFoundError(self.label, "marker file does not exist")
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise MarkerParseError(self.label, f"unable to read marker file: {exc}") from exc
        if self.structured:
            return parse_structured_marker(content, suffix=self.path.suffix.lower(), source=self.label)
        return parse_next_code_marker(content, source=self.label)


__all__ = [
    "MARKER_KEY",
    "MARKER_PATTERN",
    "MarkerError",
    "MarkerFileModel",
    "MarkerNotFoundError",
    "MarkerParseError",
    "MarkerSource",
    "parse_next_code_marker",
    "parse_structured_marker",
    "render_marker",
]
