# topmark:header:start
#
#   project      : Plume
#   file         : cmd_common.py
#   file_relpath : src/plume/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by several commands: reading group state from
``ctx.obj`` and materializing the effective configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from plume.cli.errors import PlumeConfigError
from plume.config.logging import get_logger
from plume.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

    import click

    from plume.cli_shared.console_api import ConsoleLike
    from plume.config.model import Config

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity set by the group (``0`` when unset)."""
    obj: dict[str, Any] = ctx.obj or {}
    return int(obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console placed on the context by the group."""
    return ctx.obj["console"]


def build_config(ctx: click.Context, overrides: Mapping[str, Any] | None = None) -> Config:
    """Materialize the effective Config for a command.

    Merges defaults, discovered config files (unless ``--no-config``), the
    group's ``--config`` files and ``overrides`` (later wins), then freezes.

    Args:
        ctx (click.Context): Current context; group options live in ``ctx.obj``.
        overrides (Mapping[str, Any] | None): Command-level settings, keyed like
            the ``[format]`` table (``None`` values are ignored).

    Returns:
        Config: The frozen configuration.

    Raises:
        PlumeConfigError: If the merged settings are invalid.
    """
    obj: dict[str, Any] = ctx.obj or {}
    draft = MutableConfig.load_merged(
        extra_files=[Path(p) for p in obj.get("config_paths", ())],
        no_config=bool(obj.get("no_config", False)),
    )
    if overrides:
        draft.apply_cli_args(overrides)
    try:
        config = draft.freeze()
    except ValueError as exc:
        raise PlumeConfigError(str(exc)) from exc
    logger.debug("Effective config: %s", config)
    return config
