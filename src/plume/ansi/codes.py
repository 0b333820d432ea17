# topmark:header:start
#
#   project      : Plume
#   file         : codes.py
#   file_relpath : src/plume/ansi/codes.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Select Graphic Rendition (SGR) codes.

Each member of `Sgr` is the numeric parameter of an ``ESC[<n>m`` sequence.
Foreground colors use the ``FG_`` prefix and background colors the ``BG_``
prefix; the "bright" palette (90-97 / 100-107) uses ``LIGHT_`` names, with
``DARK_GRAY`` and ``WHITE`` for the two ends.
"""

from __future__ import annotations

from enum import IntEnum

from plume.core.errors import UnsupportedStyleError


class Sgr(IntEnum):
    """SGR parameter codes."""

    RESET = 0

    # Text attributes
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    SLOW_BLINK = 5
    RAPID_BLINK = 6
    IMAGE_NEGATIVE = 7
    CONCEAL = 8
    CROSSED_OUT = 9

    # Foreground colors
    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_MAGENTA = 35
    FG_CYAN = 36
    FG_LIGHT_GRAY = 37
    FG_DEFAULT = 39
    FG_DARK_GRAY = 90
    FG_LIGHT_RED = 91
    FG_LIGHT_GREEN = 92
    FG_LIGHT_YELLOW = 93
    FG_LIGHT_BLUE = 94
    FG_LIGHT_MAGENTA = 95
    FG_LIGHT_CYAN = 96
    FG_WHITE = 97

    # Background colors
    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_LIGHT_GRAY = 47
    BG_DEFAULT = 49
    BG_DARK_GRAY = 100
    BG_LIGHT_RED = 101
    BG_LIGHT_GREEN = 102
    BG_LIGHT_YELLOW = 103
    BG_LIGHT_BLUE = 104
    BG_LIGHT_MAGENTA = 105
    BG_LIGHT_CYAN = 106
    BG_WHITE = 107

    @property
    def sequence(self) -> str:
        """The escape sequence for this single code."""
        return f"\x1b[{int(self)}m"

    @classmethod
    def parse(cls, token: str) -> Sgr:
        """Look up a code by name.

        Matching is case-insensitive and treats ``-`` and spaces like ``_``.
        Bare color names select the foreground variant, so ``"red"`` yields
        `Sgr.FG_RED` and ``"light-blue"`` yields `Sgr.FG_LIGHT_BLUE`.

        Args:
            token (str): Style name, e.g. ``"bold"``, ``"fg_red"``, ``"bg-white"``.

        Returns:
            Sgr: The matching code.

        Raises:
            UnsupportedStyleError: If no code has that name.
        """
        key: str = token.strip().replace("-", "_").replace(" ", "_").upper()
        for candidate in (key, f"FG_{key}"):
            member: Sgr | None = cls.__members__.get(candidate)
            if member is not None:
                return member
        raise UnsupportedStyleError(f"unknown terminal style: {token!r}")
