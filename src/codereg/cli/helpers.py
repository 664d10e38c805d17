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

"""Argument registration, context building and output helpers for the CLI."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from codereg.api import ConfigOverrides, apply_overrides
from codereg.config import load_config_with_metadata
from codereg.registry.ranges import CodeRange, parse_range_token

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codereg.config import Config
    from codereg.core.type_aliases import CategoryName


class ArgumentRegistrar(Protocol):
    """Parser or argument group accepting ``add_argument`` calls."""

    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action:
        """Register an argument."""
        ...


class _TextStream(Protocol):
    def write(self, s: str, /) -> int: ...


@dataclass(slots=True, frozen=True)
class CLIContext:
    """Configuration resolved for one CLI invocation.

    Attributes:
        config: Configuration with command-line overrides applied.
        config_path: File the configuration came from, if any.
    """

    config: Config
    config_path: Path | None


def echo(message: str, *, newline: bool = True, err: bool = False) -> None:
    """Write a message to stdout/stderr."""
    stream: _TextStream = sys.stderr if err else sys.stdout
    _ = stream.write(message)
    if newline:
        _ = stream.write("\n")


def register_argument(registrar: ArgumentRegistrar, *args: Any, **kwargs: Any) -> None:
    """Register an argument on a parser/argument group, discarding the action handle."""
    _ = registrar.add_argument(*args, **kwargs)


def category_range(token: str) -> tuple[CategoryName, CodeRange]:
    """Parse a ``--range CATEGORY=MIN-MAX`` token for argparse.

    Args:
        token: Raw command-line value.

    Returns:
        Category name and its inclusive :class:`CodeRange`.

    Raises:
        InvalidCodeRangeError: Malformed token. It is a ``ValueError``, so
            argparse reports it as a usage error.
    """
    return parse_range_token(token)


def register_catalog_options(parser: argparse.ArgumentParser) -> None:
    """Register options shared by commands that read a catalog.

    Args:
        parser: Parser (usually a shared parent) to extend.
    """
    group = parser.add_argument_group("catalog")
    register_argument(
        group,
        "--config",
        type=Path,
        default=None,
        help="Configuration file (default: codereg.toml, .codereg.toml or [tool.codereg] in pyproject.toml).",
    )
    register_argument(
        group,
        "--catalog",
        default=None,
        help="Catalog document (.json/.toml) or module[:attribute] reference.",
    )
    register_argument(
        group,
        "--marker",
        type=Path,
        default=None,
        help="File holding the 'Next error code: N' marker or a next_error_code key.",
    )
    register_argument(
        group,
        "--category",
        default=None,
        help="Category whose codes feed the next-code computation.",
    )
    register_argument(
        group,
        "--floor",
        type=int,
        default=None,
        help="Seed for the highest code (default: tracked range minimum minus one).",
    )
    register_argument(
        group,
        "--range",
        dest="ranges",
        action="append",
        type=category_range,
        default=None,
        metavar="CATEGORY=MIN-MAX",
        help="Register or override a category range (repeatable).",
    )


def overrides_from_args(args: argparse.Namespace) -> ConfigOverrides:
    """Collect configuration overrides from parsed arguments."""
    raw_ranges: Sequence[tuple[CategoryName, CodeRange]] | None = getattr(args, "ranges", None)
    return ConfigOverrides(
        catalog=getattr(args, "catalog", None),
        marker=getattr(args, "marker", None),
        category=getattr(args, "category", None),
        floor=getattr(args, "floor", None),
        ranges=dict(raw_ranges) if raw_ranges else None,
    )


def build_cli_context(args: argparse.Namespace) -> CLIContext:
    """Load configuration and apply command-line overrides.

    Raises:
        ConfigValidationError: If the configuration cannot be loaded.
    """
    loaded = load_config_with_metadata(getattr(args, "config", None))
    config = apply_overrides(loaded.config, overrides_from_args(args))
    return CLIContext(config=config, config_path=loaded.path)


__all__ = [
    "CLIContext",
    "build_cli_context",
    "echo",
    "overrides_from_args",
    "register_argument",
    "register_catalog_options",
]
