# topmark:header:start
#
#   project      : Plume
#   file         : style.py
#   file_relpath : src/plume/ansi/style.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Composable terminal styles.

A `Style` is an ordered, immutable list of `Sgr` codes. It can be used three
ways:

- as a colorizer: ``Style.of("bold", "red")("text")`` returns the text wrapped
  in the style prefix and the reset sequence (same call shape as a
  `yachalk.ChalkBuilder`, see `plume.rendering.colored_enum.Colorizer`);
- as a raw prefix: ``style.write(stream)`` emits only the opening sequence and
  leaves resetting to the caller;
- as a scope: ``with style.scope(stream):`` emits the prefix on entry and the
  reset on every exit path, including exceptions.

A style without codes is a pass-through: it emits no escape sequences at all.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO, Union

from plume.ansi.codes import Sgr
from plume.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from plume.config.logging import PlumeLogger

logger: PlumeLogger = get_logger(__name__)

RESET_SEQUENCE: str = Sgr.RESET.sequence

StylePart = Union[Sgr, "Style", str]


@dataclass(frozen=True, slots=True)
class Style:
    """An immutable, ordered list of SGR codes.

    Attributes:
        codes (tuple[Sgr, ...]): Codes emitted, in order, in the style prefix.
    """

    codes: tuple[Sgr, ...] = ()

    @classmethod
    def of(cls, *parts: StylePart) -> Style:
        """Merge codes, styles and style names into one style.

        Args:
            *parts (StylePart): `Sgr` members, other styles, or names accepted
                by `Sgr.parse`.

        Returns:
            Style: The merged style; parts keep their order.

        Raises:
            UnsupportedStyleError: If a name is not a known style.
        """
        codes: list[Sgr] = []
        for part in parts:
            if isinstance(part, Style):
                codes.extend(part.codes)
            elif isinstance(part, Sgr):
                codes.append(part)
            else:
                codes.append(Sgr.parse(part))
        return cls(tuple(codes))

    def __add__(self, other: object) -> Style:
        if isinstance(other, (Style, Sgr, str)):
            return Style.of(self, other)
        return NotImplemented

    @property
    def prefix(self) -> str:
        """The opening escape sequence, e.g. ``ESC[1;31m``; empty for no codes."""
        if not self.codes:
            return ""
        return "\x1b[" + ";".join(str(int(code)) for code in self.codes) + "m"

    def __str__(self) -> str:
        return self.prefix

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Wrap the joined arguments in this style, followed by a reset.

        Args:
            *args (object): Objects to render, converted with `str`.
            sep (str): Separator between arguments.

        Returns:
            str: The styled text.
        """
        text: str = sep.join(str(arg) for arg in args)
        if not self.codes:
            return text
        return f"{self.prefix}{text}{RESET_SEQUENCE}"

    def write(self, stream: TextIO) -> None:
        """Write only the style prefix to ``stream`` (no reset)."""
        stream.write(self.prefix)

    @contextmanager
    def scope(self, stream: TextIO) -> Iterator[TextIO]:
        """Apply this style to everything written to ``stream`` inside the block.

        The reset sequence is written when the block exits, whether normally
        or through an exception.

        Args:
            stream (TextIO): Output stream.

        Yields:
            TextIO: ``stream``, for convenience.
        """
        if not self.codes:
            yield stream
            return
        logger.trace("Entering style scope %r", self.prefix)
        stream.write(self.prefix)
        try:
            yield stream
        finally:
            stream.write(RESET_SEQUENCE)
