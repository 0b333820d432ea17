# topmark:header:start
#
#   project      : Plume
#   file         : version.py
#   file_relpath : src/plume/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Plume `version` command.

Prints the Plume version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING

import click

from plume.cli.cli_types import EnumChoiceParam
from plume.cli.cmd_common import get_console, get_effective_verbosity
from plume.constants import PLUME_VERSION

if TYPE_CHECKING:
    from plume.cli_shared.console_api import ConsoleLike


class OutputFormat(str, Enum):
    """Output formats supported by informational commands."""

    TEXT = "text"
    JSON = "json"


@click.command(
    name="version",
    help="Show the current version of Plume.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Plume.

    Args:
        ctx (click.Context): Click context (group state in ``ctx.obj``).
        output_format (OutputFormat | None): Optional output format.
    """
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": PLUME_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Plume version:", bold=True, underline=True))
        console.print(f"    {console.styled(PLUME_VERSION, bold=True)}")
    else:
        console.print(console.styled(PLUME_VERSION, bold=True))
