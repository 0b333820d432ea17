# topmark:header:start
#
#   project      : Plume
#   file         : render.py
#   file_relpath : src/plume/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Plume `render` command.

Renders one format string with arguments given on the command line.

Examples:
    ```sh
    plume render "{:*^6}" 42                 # **42**
    plume render "{0:{1}}|" x 5              # x    |
    plume render "{name:>8}" -n name=plume   #    plume
    plume render "{:.3}" float:2             # 2.0
    plume render -- "{:05}" -3               # -0003
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from plume.ansi import Style
from plume.api import Formatter
from plume.cli.cli_types import NamedArgParam, parse_argument_token
from plume.cli.cmd_common import build_config, get_console
from plume.cli.errors import PlumeUsageError, translate_library_errors
from plume.config.keys import Toml
from plume.config.logging import get_logger

if TYPE_CHECKING:
    from plume.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def _convert(token: str, *, infer: bool) -> object:
    try:
        return parse_argument_token(token, infer=infer)
    except ValueError as exc:
        raise PlumeUsageError(f"Invalid argument {token!r}: {exc}") from exc


@click.command(
    name="render",
    help=(
        "Render FORMAT with positional ARGS and --named KEY=VALUE arguments. "
        "Arguments may be typed with an int:, float:, str:, bool: or ptr: prefix; "
        "otherwise their type is inferred (use --raw to keep them as text). "
        "Put '--' before FORMAT when arguments start with '-'."
    ),
    context_settings={"ignore_unknown_options": True},
)
@click.argument("format_string", metavar="FORMAT")
@click.argument("args", nargs=-1, metavar="[ARGS]...")
@click.option(
    "-n",
    "--named",
    "named",
    multiple=True,
    type=NamedArgParam(),
    help="Named argument (repeatable).",
)
@click.option(
    "--raw",
    is_flag=True,
    default=False,
    help="Do not infer argument types; unprefixed arguments are text.",
)
@click.option(
    "--precision",
    type=click.IntRange(min=0),
    default=None,
    help="Default precision for float presentation types (overrides config).",
)
@click.option(
    "--style",
    "styles",
    multiple=True,
    metavar="NAME",
    help="Terminal style applied to the output when color is enabled (repeatable).",
)
@click.option(
    "--no-newline",
    "-N",
    "no_newline",
    is_flag=True,
    default=False,
    help="Do not print a trailing newline.",
)
@click.pass_context
def render_command(
    ctx: click.Context,
    *,
    format_string: str,
    args: tuple[str, ...],
    named: tuple[tuple[str, str], ...],
    raw: bool,
    precision: int | None,
    styles: tuple[str, ...],
    no_newline: bool,
) -> None:
    """Render a format string and print the result.

    Args:
        ctx (click.Context): Click context (group state in ``ctx.obj``).
        format_string (str): The format string.
        args (tuple[str, ...]): Positional argument tokens.
        named (tuple[tuple[str, str], ...]): ``(key, token)`` pairs.
        raw (bool): Disable type inference.
        precision (int | None): Default float precision override.
        styles (tuple[str, ...]): Style names for the output.
        no_newline (bool): Suppress the trailing newline.
    """
    console: ConsoleLike = get_console(ctx)
    config = build_config(ctx, {Toml.KEY_FLOAT_PRECISION: precision})
    formatter = Formatter(config)

    positional = [_convert(token, infer=not raw) for token in args]
    keywords = {key: _convert(token, infer=not raw) for key, token in named}
    logger.debug("render %r with %r and %r", format_string, positional, keywords)

    with translate_library_errors():
        style = Style.of(*styles)
        text = formatter.format(format_string, *positional, **keywords)

    if console.enable_color:
        text = style(text)
    console.print(text, nl=not no_newline)
