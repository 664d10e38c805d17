#!/usr/bin/env python3
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

"""Keep codereg's exception codes and violation kinds in sync with the docs.

This script must work whether the package is installed or not. It prepends the
repo's `src/` directory to `sys.path` before importing internal modules.
"""

from __future__ import annotations

import importlib
import re
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

CODE_PATTERN = re.compile(r"CR\d{3}")
KIND_PATTERN = re.compile(r"^\|\s*`([a-z_]+)`\s*\|", re.MULTILINE)


def _emit(message: str, *, error: bool = False) -> None:
    stream = sys.stderr if error else sys.stdout
    _ = stream.write(f"{message}\n")


def _ensure_src_on_path(src_path: Path) -> None:
    src_str = str(src_path)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


def _load_error_codes(src_path: Path) -> Iterable[str]:
    _ensure_src_on_path(src_path)
    module = importlib.import_module("codereg._internal.error_codes")
    return [str(code) for code in module.error_code_catalog().values()]


def _load_violation_kinds(src_path: Path) -> set[str]:
    _ensure_src_on_path(src_path)
    module = importlib.import_module("codereg.core.model_types")
    return {str(kind) for kind in module.ViolationKind}


def _read_doc(doc_path: Path) -> str:
    if not doc_path.exists():
        msg = f"documentation missing: {doc_path}"
        raise FileNotFoundError(msg)
    return doc_path.read_text(encoding="utf-8")


def _load_documented_codes(doc_path: Path) -> set[str]:
    """Load the set of documented exception codes.

    Args:
        doc_path: Path to `EXCEPTIONS.md`.

    Returns:
        Set of codes (e.g., `"CR110"`) found in the documentation.

    Raises:
        FileNotFoundError: If the documentation file is missing.
    """
    return set(CODE_PATTERN.findall(_read_doc(doc_path)))


def _load_documented_kinds(doc_path: Path) -> set[str]:
    """Load violation kinds from the first column of the violations table."""
    content = _read_doc(doc_path)
    _, _, section = content.partition("## Violations")
    return set(KIND_PATTERN.findall(section))


def _discover_duplicates(codes: Iterable[str]) -> set[str]:
    seen: set[str] = set()
    duplicates: set[str] = set()
    for code in codes:
        if code in seen:
            duplicates.add(code)
        else:
            seen.add(code)
    return duplicates


def _compare(label: str, registered: set[str], documented: set[str]) -> list[str]:
    lines: list[str] = []
    missing = registered - documented
    orphaned = documented - registered
    if missing:
        lines.append(f"missing {label} in docs: " + ", ".join(sorted(missing)))
    if orphaned:
        lines.append(f"unknown {label} in docs: " + ", ".join(sorted(orphaned)))
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Validate that the exception registry and violation kinds match the docs.

    Args:
        argv: Optional CLI arguments (ignored; present for parity with entrypoints).

    Returns:
        `0` when registry and documentation agree; `1` on duplicate, missing or
        orphaned entries, or when the documentation cannot be read.
    """
    if argv:
        _emit("[codereg] check_error_codes does not accept CLI arguments; ignoring argv")

    repo_root = Path(__file__).resolve().parents[1]
    src_path = repo_root / "src"

    try:
        codes = list(_load_error_codes(src_path))
        kinds = _load_violation_kinds(src_path)
    except (ImportError, RuntimeError) as exc:
        _emit(f"[codereg] {exc}", error=True)
        return 1

    doc_path = repo_root / "docs" / "EXCEPTIONS.md"
    try:
        documented_codes = _load_documented_codes(doc_path)
        documented_kinds = _load_documented_kinds(doc_path)
    except FileNotFoundError as exc:
        _emit(f"[codereg] {exc}", error=True)
        return 1

    status_lines: list[str] = []
    duplicates = _discover_duplicates(codes)
    if duplicates:
        status_lines.append("duplicate codes in registry: " + ", ".join(sorted(duplicates)))
    status_lines.extend(_compare("codes", set(codes), documented_codes))
    status_lines.extend(_compare("violation kinds", kinds, documented_kinds))

    if status_lines:
        for line in status_lines:
            _emit(f"[codereg] {line}", error=True)
        return 1

    _emit("[codereg] error code registry and documentation are in sync")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
