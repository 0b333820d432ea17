# topmark:header:start
#
#   project      : Plume
#   file         : status.py
#   file_relpath : src/plume/rendering/status.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Status values reported by ``plume check``.

Values are human-readable strings; compare with ``==`` rather than ``is``.
"""

from __future__ import annotations

from yachalk import chalk

from plume.rendering.colored_enum import ColoredStrEnum


class CheckStatus(ColoredStrEnum):
    """Outcome of compiling one format string."""

    # Value format: (description: str, color_renderer: ChalkBuilder)
    VALID = ("valid", chalk.green)
    LITERAL = ("valid, no placeholders", chalk.gray)
    INVALID = ("invalid", chalk.red_bright)

    @property
    def is_error(self) -> bool:
        """Whether this status should fail the command."""
        return self is CheckStatus.INVALID
