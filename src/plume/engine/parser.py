# topmark:header:start
#
#   project      : Plume
#   file         : parser.py
#   file_relpath : src/plume/engine/parser.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Recursive-descent parser for a single ``{...}`` placeholder.

Grammar:

    placeholder   := '{' [arg_id] [':' format_spec] '}'
    arg_id        := digit+ | identifier
    format_spec   := [[fill] align] [sign] ['#'] ['0'] [width] ['.' precision] [type]
    fill          := any char except '{' '}'   (only valid if followed by align)
    align         := '<' | '>' | '=' | '^'
    sign          := '+' | '-' | ' '
    width         := digit+ | '{' [arg_id] '}'
    precision     := digit+ | '{' [arg_id] '}'
    type          := one of "bBdnxXoaAceEfFgGps"

The parser works on the whole format string and a cursor, so error offsets
are reported relative to the format string the caller passed in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, NoReturn

from plume.config.logging import get_logger
from plume.core.errors import InvalidFormatStringError
from plume.engine.spec import (
    ALIGN_SYMBOLS,
    SIGN_SYMBOLS,
    TYPE_CHARS,
    Align,
    ArgRef,
    FormatSpec,
    SignMode,
)

if TYPE_CHECKING:
    from plume.config.logging import PlumeLogger
    from plume.engine.spec import Dimension

logger: PlumeLogger = get_logger(__name__)

_DIGITS: Final[frozenset[str]] = frozenset("0123456789")
_IDENT_START: Final[frozenset[str]] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)
_IDENT_CONTINUE: Final[frozenset[str]] = _IDENT_START | _DIGITS
_FORBIDDEN_FILL: Final[frozenset[str]] = frozenset("{}")


class SpecParser:
    """Cursor-based parser for one placeholder.

    Args:
        text (str): The complete format string.
        pos (int): Index of the placeholder's opening ``{``.

    Attributes:
        pos (int): Current cursor position; after `parse` it points just past
            the closing ``}``.
    """

    def __init__(self, text: str, pos: int) -> None:
        self.text = text
        self.pos = pos
        self._end = len(text)

    # --- cursor primitives ---

    def _current(self) -> str:
        """Return the character under the cursor, or '' at the end."""
        if self.pos < self._end:
            return self.text[self.pos]
        return ""

    def _peek(self) -> str:
        """Return the character after the cursor, or '' past the end."""
        if self.pos + 1 < self._end:
            return self.text[self.pos + 1]
        return ""

    def _advance(self, count: int = 1) -> None:
        self.pos += count

    def _fail(self, message: str) -> NoReturn:
        raise InvalidFormatStringError(message, offset=self.pos, format_string=self.text)

    def _require_more(self) -> None:
        if self.pos >= self._end:
            self._fail("unterminated placeholder")

    # --- grammar ---

    def _parse_arg_id(self) -> ArgRef:
        start = self.pos
        ch = self._current()
        if ch in _DIGITS:
            while self._current() in _DIGITS:
                self._advance()
            return ArgRef(index=int(self.text[start : self.pos]))
        if ch in _IDENT_START:
            self._advance()
            while self._current() in _IDENT_CONTINUE:
                self._advance()
            return ArgRef(name=self.text[start : self.pos])
        self._fail(f"invalid character {ch!r} in argument id")

    def _parse_dimension(self, what: str) -> Dimension:
        """Parse a width or precision: literal digits or a ``{arg_id}`` reference."""
        ch = self._current()
        if ch == "{":
            self._advance()
            self._require_more()
            ref = ArgRef() if self._current() == "}" else self._parse_arg_id()
            self._require_more()
            if self._current() != "}":
                self._fail(f"expected '}}' to close the {what} reference")
            self._advance()
            return ref
        if ch in _DIGITS:
            start = self.pos
            while self._current() in _DIGITS:
                self._advance()
            return int(self.text[start : self.pos])
        return None

    def _parse_format_spec(self, arg_ref: ArgRef, offset: int) -> FormatSpec:
        fill = " "
        align = Align.DEFAULT
        sign_mode = SignMode.DEFAULT
        alternate = False
        zero_pad = False

        # Fill and alignment: one character of look-ahead decides.
        # A brace is never a fill: "{:}>" closes the placeholder before '>'.
        ch, nxt = self._current(), self._peek()
        if nxt in ALIGN_SYMBOLS and ch not in _FORBIDDEN_FILL:
            fill, align = ch, ALIGN_SYMBOLS[nxt]
            self._advance(2)
        elif ch in ALIGN_SYMBOLS:
            align = ALIGN_SYMBOLS[ch]
            self._advance()

        if self._current() in SIGN_SYMBOLS:
            sign_mode = SIGN_SYMBOLS[self._current()]
            self._advance()

        if self._current() == "#":
            alternate = True
            self._advance()

        if self._current() == "0":
            zero_pad = True
            self._advance()
            # Explicit alignment always wins over the zero flag.
            if align is Align.DEFAULT:
                fill, align = "0", Align.NUMERIC

        width = self._parse_dimension("width")

        precision: Dimension = None
        if self._current() == ".":
            self._advance()
            precision = self._parse_dimension("precision")
            if precision is None:
                self._require_more()
                self._fail("format specifier missing precision")

        type_char: str | None = None
        if self._current() in TYPE_CHARS:
            type_char = self._current()
            self._advance()

        self._require_more()
        if self._current() != "}":
            self._fail(f"unexpected character {self._current()!r} in format spec")
        self._advance()

        return FormatSpec(
            arg_ref=arg_ref,
            fill=fill,
            align=align,
            sign_mode=sign_mode,
            alternate=alternate,
            zero_pad=zero_pad,
            width=width,
            precision=precision,
            type_char=type_char,
            offset=offset,
        )

    def parse(self) -> FormatSpec:
        """Parse the placeholder under the cursor.

        Returns:
            FormatSpec: The parsed placeholder; argument references may still be automatic.

        Raises:
            InvalidFormatStringError: If the placeholder is malformed.
        """
        offset = self.pos
        if self._current() != "{":
            self._fail("expected '{' to open a placeholder")
        self._advance()
        self._require_more()

        arg_ref = ArgRef()
        if self._current() not in (":", "}"):
            arg_ref = self._parse_arg_id()
            self._require_more()
            if self._current() not in (":", "}"):
                self._fail(f"unexpected character {self._current()!r} after argument id")

        if self._current() == "}":
            self._advance()
            return FormatSpec(arg_ref=arg_ref, offset=offset)

        # ':' introduces the format spec
        self._advance()
        self._require_more()
        spec = self._parse_format_spec(arg_ref, offset)
        logger.trace("Parsed placeholder at offset %d: %r", offset, spec)
        return spec


def parse_placeholder(text: str, pos: int) -> tuple[FormatSpec, int]:
    """Parse the placeholder starting at ``text[pos]``.

    Args:
        text (str): The complete format string.
        pos (int): Index of the opening ``{``.

    Returns:
        tuple[FormatSpec, int]: The parsed spec and the index just past the closing ``}``.

    Raises:
        InvalidFormatStringError: If the placeholder is malformed.
    """
    parser = SpecParser(text, pos)
    spec = parser.parse()
    return spec, parser.pos
