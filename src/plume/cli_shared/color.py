# topmark:header:start
#
#   project      : Plume
#   file         : color.py
#   file_relpath : src/plume/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Click-independent color helpers.

Provides the `ColorMode` enum and the color decision used by every command,
kept free of Click so tests and other frontends can reuse it.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from plume.config.logging import get_logger

if TYPE_CHECKING:
    from plume.config.logging import PlumeLogger


logger: PlumeLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when stdout is a TTY.
        ALWAYS: Force-enable color.
        NEVER: Disable color.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: `ALWAYS` -> True; `NEVER` -> False.
        2. **Environment**: ``FORCE_COLOR`` (set and not ``"0"``) -> True;
           ``NO_COLOR`` (set to any value) -> False.
        3. **Auto**: ``stdout.isatty()``.

    Args:
        color_mode_override: Parsed `ColorMode` from ``--color``; None when
            not provided.
        stdout_isatty: Override for TTY detection (tests).

    Returns:
        True if ANSI color should be enabled.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    logger.trace("Color auto-detection: isatty=%s", stdout_isatty)
    return bool(stdout_isatty)
