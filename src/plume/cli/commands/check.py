# topmark:header:start
#
#   project      : Plume
#   file         : check.py
#   file_relpath : src/plume/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Plume `check` command.

Compiles format strings without rendering them and reports whether each one
is valid. Format strings come from the command line or, when none are given,
one per line from STDIN (blank lines are skipped).

Exit codes:
    SUCCESS when every string is valid (or there is nothing to check),
    FORMAT_ERROR otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from plume.api import Formatter
from plume.cli.cmd_common import build_config, get_console, get_effective_verbosity
from plume.cli.errors import PlumeFormatError, describe_format_error
from plume.config.logging import get_logger
from plume.core.errors import InvalidFormatStringError
from plume.rendering.status import CheckStatus

if TYPE_CHECKING:
    from plume.cli_shared.console_api import ConsoleLike
    from plume.engine.template import Template

logger = get_logger(__name__)


def _read_stdin_lines() -> list[str]:
    text = click.get_text_stream("stdin").read()
    return [line for line in text.splitlines() if line.strip()]


def _details(template: Template) -> str:
    names = ", ".join(sorted(template.names)) or "-"
    return (
        f"placeholders: {template.placeholder_count}, "
        f"positional arguments: {template.required_positional}, "
        f"names: {names}"
    )


@click.command(
    name="check",
    help=(
        "Check that each FORMAT compiles. Reads one format string per line from "
        "STDIN when no FORMAT is given."
    ),
)
@click.argument("format_strings", nargs=-1, metavar="[FORMAT]...")
@click.pass_context
def check_command(ctx: click.Context, *, format_strings: tuple[str, ...]) -> None:
    """Report a status for every format string.

    Args:
        ctx (click.Context): Click context (group state in ``ctx.obj``).
        format_strings (tuple[str, ...]): Format strings to check.

    Raises:
        PlumeFormatError: If at least one format string is invalid.
    """
    console: ConsoleLike = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)
    formatter = Formatter(build_config(ctx))

    sources: list[str] = list(format_strings) or _read_stdin_lines()
    if not sources:
        console.warn("No format strings given (pass FORMAT arguments or pipe them on STDIN).")
        return

    invalid = 0
    for source in sources:
        try:
            template = formatter.compile(source)
        except InvalidFormatStringError as exc:
            invalid += 1
            logger.debug("Invalid format string %r: %s", source, exc)
            status = CheckStatus.INVALID
            console.print(f"{status.styled(console.enable_color)}: {source}")
            if vlevel >= 0:
                for line in describe_format_error(exc).splitlines():
                    console.print(f"  {line}")
            continue

        status = CheckStatus.VALID if template.placeholder_count else CheckStatus.LITERAL
        if vlevel < 0:
            continue
        console.print(f"{status.styled(console.enable_color)}: {source}")
        if vlevel > 0:
            console.print(f"  {_details(template)}")

    logger.info("Checked %d format string(s), %d invalid", len(sources), invalid)
    if invalid:
        raise PlumeFormatError(f"{invalid} of {len(sources)} format string(s) are invalid")
