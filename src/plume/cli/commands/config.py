# topmark:header:start
#
#   project      : Plume
#   file         : config.py
#   file_relpath : src/plume/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Plume `config` command.

Prints the effective configuration as TOML after applying defaults,
discovered config files and ``--config`` files. With ``-v`` the contributing
sources are listed as TOML comments first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from plume.cli.cmd_common import build_config, get_console, get_effective_verbosity
from plume.config.io import to_toml

if TYPE_CHECKING:
    from plume.cli_shared.console_api import ConsoleLike


@click.command(
    name="config",
    help="Show the effective Plume configuration as TOML.",
)
@click.pass_context
def config_command(ctx: click.Context) -> None:
    """Print the merged configuration.

    Args:
        ctx (click.Context): Click context (group state in ``ctx.obj``).
    """
    console: ConsoleLike = get_console(ctx)
    config = build_config(ctx)
    if get_effective_verbosity(ctx) > 0:
        for source in config.config_files:
            console.print(f"# source: {source}")
    console.print(to_toml(config.to_toml_dict()), nl=False)
