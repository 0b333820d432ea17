# topmark:header:start
#
#   project      : Plume
#   file         : options.py
#   file_relpath : src/plume/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Common CLI option utilities.

Centralizes reusable options (verbosity, color, configuration) and their
resolution logic so that the group and commands stay thin.
"""

from __future__ import annotations

from typing import Callable, TypeVar

import click

from plume.cli.cli_types import EnumChoiceParam
from plume.cli.errors import PlumeUsageError
from plume.cli_shared.color import ColorMode
from plume.config.logging import get_logger

R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity level.

    Args:
        verbose_count: Number of times ``-v`` was passed.
        quiet_count: Number of times ``-q`` was passed.

    Returns:
        ``verbose_count`` (capped at 2), ``-1`` when quiet, else ``0``.

    Raises:
        PlumeUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise PlumeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count > 0:
        return min(verbose_count, 2)
    if quiet_count > 0:
        return -1
    return 0


def common_verbose_options(f: Callable[..., R]) -> Callable[..., R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase output detail. Specify twice for more.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def common_color_options(f: Callable[..., R]) -> Callable[..., R]:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[..., R]) -> Callable[..., R]:
    """Add ``--config`` (repeatable) and ``--no-config`` options."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore discovered plume.toml / pyproject.toml files (defaults only).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f
