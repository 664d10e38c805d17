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

"""``codereg list`` and ``codereg next-code``: read-only catalog inspection."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

from codereg.api import list_descriptors, next_free_code
from codereg.cli.helpers import echo, register_argument
from codereg.registry.marker import render_marker

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codereg.cli.helpers import CLIContext
    from codereg.cli.types import SubparserCollection


def register_codes_commands(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser],
) -> None:
    """Attach ``codereg list`` and ``codereg next-code`` to the CLI.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
        parents: Shared parent parsers carrying global and catalog flags.
    """
    _ = subparsers.add_parser(
        "list",
        help="List every descriptor with its dotted path and code",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=list(parents),
    )
    next_code = subparsers.add_parser(
        "next-code",
        help="Print the value the next-code marker should hold",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=list(parents),
    )
    register_argument(
        next_code,
        "--marker-line",
        action="store_true",
        help="Print the full 'Next error code: N' line instead of the bare number.",
    )


def execute_list(_: argparse.Namespace, context: CLIContext) -> int:
    """Print ``path<TAB>code<TAB>level<TAB>message`` for each descriptor."""
    for path, descriptor in list_descriptors(context.config):
        level = descriptor.level.value if descriptor.level is not None else "-"
        echo(f"{path}\t{descriptor.code}\t{level}\t{descriptor.message}")
    return 0


def execute_next_code(args: argparse.Namespace, context: CLIContext) -> int:
    """Print the next free code; never writes the marker."""
    value = next_free_code(context.config)
    echo(render_marker(value) if args.marker_line else str(value))
    return 0


__all__ = ["execute_list", "execute_next_code", "register_codes_commands"]
