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

"""``codereg check``: run the registry checks and report the outcome."""

from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING

from codereg.api import run_checks
from codereg.cli.helpers import echo, register_argument
from codereg.core.model_types import LogComponent, ReportFormat
from codereg.logging import structured_extra
from codereg.reporting import render_report

if TYPE_CHECKING:
    from collections.abc import Sequence

    from codereg.cli.helpers import CLIContext
    from codereg.cli.types import SubparserCollection

logger: logging.Logger = logging.getLogger("codereg.cli")


def register_check_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser],
) -> None:
    """Attach the ``codereg check`` command to the CLI.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
        parents: Shared parent parsers carrying global and catalog flags.
    """
    check = subparsers.add_parser(
        "check",
        help="Validate code ranges, uniqueness and the next-code marker",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=list(parents),
    )
    register_argument(
        check,
        "--format",
        dest="report_format",
        choices=[report_format.value for report_format in ReportFormat],
        default=ReportFormat.TEXT.value,
        help="Report output format.",
    )


def execute_check(args: argparse.Namespace, context: CLIContext) -> int:
    """Execute the check subcommand.

    Args:
        args: Parsed CLI namespace.
        context: Resolved configuration.

    Returns:
        ``0`` when every check passed, ``1`` otherwise.
    """
    report = run_checks(context.config)
    echo(render_report(report, ReportFormat.from_str(args.report_format)))
    exit_code = 0 if report.passed else 1
    logger.debug(
        "check finished",
        extra=structured_extra(
            component=LogComponent.CLI,
            exit_code=exit_code,
            counts={"violations": report.violation_count},
        ),
    )
    return exit_code


__all__ = ["execute_check", "register_check_command"]
