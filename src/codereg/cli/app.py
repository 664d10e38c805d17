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

"""CLI entry point and orchestration for codereg commands."""

from __future__ import annotations

import argparse
import logging
import pathlib
from collections.abc import Callable, Sequence
from contextlib import suppress
from textwrap import dedent
from typing import TYPE_CHECKING, Final

from codereg import __version__
from codereg._internal.error_codes import error_code_for
from codereg._internal.exceptions import CoderegError
from codereg.cli.commands import check as check_command
from codereg.cli.commands import codes as codes_command
from codereg.cli.helpers import build_cli_context, echo, register_argument, register_catalog_options
from codereg.core.model_types import LogComponent, LogFormat
from codereg.logging import LOG_FORMATS, LOG_LEVELS, configure_logging, structured_extra

if TYPE_CHECKING:
    from codereg.cli.helpers import CLIContext
    from codereg.cli.types import SubparserCollection

logger: logging.Logger = logging.getLogger("codereg.cli")

CODEREG_VERSION: Final[str] = __version__
EXIT_USAGE: Final[int] = 2

CONFIG_TEMPLATE: Final[str] = dedent(
    """\
    # codereg configuration template
    # Save this file as codereg.toml in the root of your project.
    config_version = 0

    # Catalog document (.json/.toml) or importable module[:attribute].
    catalog = "errors.json"

    # Each top-level catalog category owns an inclusive code range.
    [ranges.compiler]
    min = 1001
    max = 1999

    [marker]
    # File holding a "Next error code: N" line, or a .toml/.json file with a
    # next_error_code key. Remove this table to skip the next-code check.
    path = "errors.json.marker"
    # Only codes of this category feed the next-code computation.
    category = "compiler"
    # floor = 1000  # defaults to the tracked range minimum minus one
    """,
)

CommandHandler = Callable[[argparse.Namespace, "CLIContext"], int]


def write_config_template(path: pathlib.Path, *, force: bool) -> int:
    """Write the codereg configuration template to a file.

    Args:
        path: Target path where the configuration file will be written.
        force: If True, overwrite the file if it already exists.

    Returns:
        int: Exit code (0 for success, 1 for failure).
    """
    if path.exists() and not force:
        echo(f"[codereg] Refusing to overwrite existing file: {path}")
        echo("Use --force if you want to replace it.")
        return 1
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(CONFIG_TEMPLATE, encoding="utf-8")
    echo(f"[codereg] Wrote starter config to {path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the codereg command-line interface.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: ``0`` when checks pass, ``1`` when any check fails, ``2`` for
            usage or configuration errors.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        echo(f"codereg {CODEREG_VERSION}")
        return 0
    if args.command is None:
        parser.error("No command provided.")
    _initialize_logging(args.log_format, args.log_level)
    if args.command == "init":
        return write_config_template(args.output, force=args.force)
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    try:
        context = build_cli_context(args)
        return handler(args, context)
    except CoderegError as exc:
        code = error_code_for(exc)
        logger.debug(
            "command failed",
            exc_info=True,
            extra=structured_extra(component=LogComponent.CLI, exit_code=EXIT_USAGE, details={"error_code": code}),
        )
        echo(f"[codereg] ({code}) {exc}", err=True)
        return EXIT_USAGE


def _logging_options(*, suppress_defaults: bool) -> argparse.ArgumentParser:
    options = argparse.ArgumentParser(add_help=False)
    # Subcommand copies must not overwrite values given before the subcommand.
    register_argument(
        options,
        "--log-format",
        choices=LOG_FORMATS,
        default=argparse.SUPPRESS if suppress_defaults else "text",
        help="Select logging output format (human-readable text or structured JSON).",
    )
    register_argument(
        options,
        "--log-level",
        choices=LOG_LEVELS,
        default=argparse.SUPPRESS if suppress_defaults else "warning",
        help="Set verbosity of logged events.",
    )
    return options


def _build_parser() -> argparse.ArgumentParser:
    common = _logging_options(suppress_defaults=False)
    subcommand_common = _logging_options(suppress_defaults=True)
    catalog_options = argparse.ArgumentParser(add_help=False)
    register_catalog_options(catalog_options)

    parser = argparse.ArgumentParser(
        prog="codereg",
        parents=[common],
        description="Validate error-code catalogs: category ranges, uniqueness and the next-code marker.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the codereg version and exit.",
    )
    subparsers = parser.add_subparsers(dest="command")

    parents = [subcommand_common, catalog_options]
    check_command.register_check_command(subparsers, parents=parents)
    codes_command.register_codes_commands(subparsers, parents=parents)
    _register_init_command(subparsers, parents=[subcommand_common])
    return parser


def _register_init_command(subparsers: SubparserCollection, *, parents: Sequence[argparse.ArgumentParser]) -> None:
    init = subparsers.add_parser(
        "init",
        help="Generate a starter configuration file",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=list(parents),
    )
    register_argument(
        init,
        "-s",
        "--save-as",
        dest="output",
        type=pathlib.Path,
        default=pathlib.Path("codereg.toml"),
        help="Destination for the generated configuration file.",
    )
    register_argument(
        init,
        "--force",
        action="store_true",
        help="Overwrite the output file if it already exists.",
    )


def _initialize_logging(log_format: str, log_level: str) -> None:
    with suppress(ValueError):  # unknown values fall back to argparse defaults
        _ = configure_logging(LogFormat.from_str(log_format), log_level=log_level)


def _command_handlers() -> dict[str, CommandHandler]:
    return {
        "check": check_command.execute_check,
        "list": codes_command.execute_list,
        "next-code": codes_command.execute_next_code,
    }


__all__ = ["CONFIG_TEMPLATE", "main", "write_config_template"]
