# topmark:header:start
#
#   project      : Plume
#   file         : errors.py
#   file_relpath : src/plume/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Exceptions raised by the Plume library.

Usage:
    Library code raises these exceptions synchronously at the point of detection.
    They carry enough context (offsets, references) for a caller to build a
    useful message; the CLI translates them into Click exceptions with
    standardized exit codes (see `plume.cli.errors`).

Taxonomy:
    - `InvalidFormatStringError`: malformed grammar, or a rendering request that
      does not apply to the supplied argument (e.g. a width reference that is
      not an integer).
    - `ArgumentOutOfBoundsError`: a placeholder references an index or name that
      has no matching argument.
    - `UnsupportedStyleError`: an unknown terminal style name.
"""

from __future__ import annotations


class PlumeError(Exception):
    """Base class for all Plume library errors."""


class InvalidFormatStringError(PlumeError, ValueError):
    """The format string is invalid.

    Attributes:
        message (str): Short description of the problem.
        offset (int | None): Index into ``format_string`` where the problem was detected.
        format_string (str | None): The offending format string, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        offset: int | None = None,
        format_string: str | None = None,
    ) -> None:
        self.message = message
        self.offset = offset
        self.format_string = format_string
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.offset is None:
            return self.message
        return f"{self.message} (at offset {self.offset})"

    def excerpt(self) -> str:
        """Return the format string with a caret under the offending offset.

        Returns:
            str: Two lines (source, caret), or an empty string when the source
            or offset is unknown.
        """
        if self.format_string is None or self.offset is None:
            return ""
        return f"{self.format_string}\n{' ' * self.offset}^"


class ArgumentOutOfBoundsError(PlumeError, LookupError):
    """A placeholder referenced an argument outside of the supplied ones.

    Attributes:
        reference (int | str): The positional index or the name that could not be resolved.
        available (int): Number of positional arguments supplied to the render call.
        offset (int | None): Offset of the placeholder in the format string.
    """

    def __init__(self, reference: int | str, *, available: int, offset: int | None = None) -> None:
        self.reference = reference
        self.available = available
        self.offset = offset
        super().__init__(str(self))

    def __str__(self) -> str:
        if isinstance(self.reference, int):
            msg = (
                f"argument index {self.reference} is out of bounds "
                f"({self.available} positional argument(s) supplied)"
            )
        else:
            msg = f"no argument named {self.reference!r}"
        if self.offset is not None:
            msg += f" (placeholder at offset {self.offset})"
        return msg


class UnsupportedStyleError(PlumeError, ValueError):
    """A terminal style name is not known."""
