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

"""Load catalogs from JSON/TOML documents or importable Python objects.

Catalog sources are either file paths (``errors.json``, ``errors.toml``) or
import references of the form ``package.module`` / ``package.module:ATTRIBUTE``.
Module references without an attribute use the module's public attributes as
the catalog root, mirroring ``import * as Errors`` style namespaces.
"""

from __future__ import annotations

import importlib
import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from types import ModuleType
from typing import Final, cast

from codereg._internal.exceptions import CoderegTypeError, CoderegValidationError
from codereg.compat import tomllib
from codereg.core.model_types import CatalogFormat, LogComponent
from codereg.logging import structured_extra

from .models import Catalog, CatalogGroup, build_catalog

logger: logging.Logger = logging.getLogger("codereg.catalog")

_IMPORT_REFERENCE: Final[re.Pattern[str]] = re.compile(
    r"^(?P<module>[A-Za-z_][\w]*(?:\.[A-Za-z_][\w]*)*)(?::(?P<attr>[A-Za-z_][\w]*(?:\.[A-Za-z_][\w]*)*))?$",
)
_SUFFIX_FORMATS: Final[dict[str, CatalogFormat]] = {
    ".json": CatalogFormat.JSON,
    ".toml": CatalogFormat.TOML,
}


class CatalogLoadError(CoderegValidationError):
    """Raised when a catalog document cannot be read or parsed."""

    def __init__(self, source: str | Path, error: Exception) -> None:
        """Initialize the exception with the catalog source and underlying error.

        Args:
            source: Path or reference that failed to load.
            error: The underlying exception.
        """
        self.source = str(source)
        self.error = error
        super().__init__(f"Unable to load catalog {source}: {error}")


class CatalogFormatError(CoderegTypeError):
    """Raised when a catalog source has an unsupported shape or format."""

    def __init__(self, source: str | Path, reason: str) -> None:
        """Initialize the exception with the catalog source and the reason.

        Args:
            source: Path or reference that was rejected.
            reason: Human-readable explanation.
        """
        self.source = str(source)
        self.reason = reason
        super().__init__(f"Invalid catalog {source}: {reason}")


class CatalogImportError(CatalogLoadError):
    """Raised when a ``module:attribute`` catalog reference cannot be imported."""


def detect_catalog_format(source: str | Path) -> CatalogFormat:
    """Infer how to load ``source``.

    Args:
        source: File path or import reference.

    Returns:
        Detected :class:`CatalogFormat`.

    Raises:
        CatalogFormatError: If the source is neither a supported document nor an
            import reference.
    """
    text = str(source)
    suffix = Path(text).suffix.lower()
    if suffix in _SUFFIX_FORMATS:
        return _SUFFIX_FORMATS[suffix]
    if isinstance(source, str) and _IMPORT_REFERENCE.match(text):
        return CatalogFormat.PYTHON
    supported = ", ".join(sorted(_SUFFIX_FORMATS))
    raise CatalogFormatError(source, f"expected a {supported} file or a module[:attribute] reference")


def _read_document(path: Path, catalog_format: CatalogFormat) -> object:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogLoadError(path, exc) from exc
    try:
        if catalog_format is CatalogFormat.JSON:
            return cast("object", json.loads(text))
        return tomllib.loads(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise CatalogLoadError(path, exc) from exc


def _import_reference(reference: str) -> object:
    match = _IMPORT_REFERENCE.match(reference)
    if match is None:  # pragma: no cover - guarded by detect_catalog_format
        raise CatalogFormatError(reference, "malformed import reference")
    try:
        target: object = importlib.import_module(match.group("module"))
    except ImportError as exc:
        raise CatalogImportError(reference, exc) from exc
    attr_path = match.group("attr")
    if attr_path:
        for name in attr_path.split("."):
            try:
                target = getattr(target, name)
            except AttributeError as exc:
                raise CatalogImportError(reference, exc) from exc
    return target


def catalog_from_object(raw: object, *, source: str | Path = "<object>") -> Catalog:
    """Build a catalog from an in-memory object.

    Args:
        raw: Mapping, module or prebuilt catalog.
        source: Label used in error messages.

    Returns:
        Catalog snapshot.

    Raises:
        CatalogFormatError: If ``raw`` cannot be a catalog root.
    """
    if isinstance(raw, (Mapping, ModuleType, CatalogGroup)):
        return build_catalog(cast("Mapping[str, object] | ModuleType | CatalogGroup", raw))
    raise CatalogFormatError(source, f"catalog root must be a mapping, got {type(raw).__name__}")


def load_catalog(source: str | Path) -> Catalog:
    """Load a catalog snapshot from a document path or import reference.

    Args:
        source: ``.json`` / ``.toml`` path, or ``package.module[:ATTRIBUTE]``.
            Strings ending in a supported suffix are treated as paths.

    Returns:
        Immutable catalog snapshot.

    Raises:
        CatalogLoadError: If the document cannot be read or parsed.
        CatalogImportError: If the import reference cannot be resolved.
        CatalogFormatError: If the source format or root shape is unsupported.
    """
    catalog_format = detect_catalog_format(source)
    if catalog_format is CatalogFormat.PYTHON:
        raw = _import_reference(str(source))
    else:
        raw = _read_document(Path(source), catalog_format)
    catalog = catalog_from_object(raw, source=source)
    logger.debug(
        "Loaded %s catalog from %s",
        catalog_format,
        source,
        extra=structured_extra(
            component=LogComponent.CATALOG,
            source=str(source),
            counts={"categories": len(catalog)},
        ),
    )
    return catalog


__all__ = [
    "CatalogFormatError",
    "CatalogImportError",
    "CatalogLoadError",
    "catalog_from_object",
    "detect_catalog_format",
    "load_catalog",
]
