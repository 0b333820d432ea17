# topmark:header:start
#
#   project      : Plume
#   file         : spec.py
#   file_relpath : src/plume/engine/spec.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Parsed placeholder model for the Plume format mini-language.

A placeholder such as ``{0:*>+#010.3f}`` is parsed into an immutable
`FormatSpec`. Width and precision are each either a literal ``int``, an
`ArgRef` pointing at another argument, or ``None``; the union type makes the
"exactly one of literal/reference/absent" rule structural.

Sections:
    * Align / SignMode: enums for alignment and sign handling.
    * Type letters: the closed set of presentation types, split by family.
    * ArgRef: argument reference (index, name, or automatic).
    * FormatSpec: one parsed placeholder.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Final, TypeAlias


class Align(Enum):
    """Alignment requested by a placeholder.

    ``DEFAULT`` defers to the argument's category (right for numbers, left
    otherwise). ``NUMERIC`` is sign-aware: padding goes between the sign/prefix
    and the digits.
    """

    DEFAULT = ""
    LEFT = "<"
    RIGHT = ">"
    CENTERED = "^"
    NUMERIC = "="


class SignMode(Enum):
    """How the sign of a number is shown."""

    DEFAULT = "-"  # only negative numbers carry a sign
    ALWAYS = "+"
    SPACE = " "  # leading space for non-negative numbers


ALIGN_SYMBOLS: Final[dict[str, Align]] = {
    a.value: a for a in (Align.LEFT, Align.RIGHT, Align.CENTERED, Align.NUMERIC)
}
SIGN_SYMBOLS: Final[dict[str, SignMode]] = {s.value: s for s in SignMode}

INTEGER_TYPES: Final[frozenset[str]] = frozenset("bBdnxXo")
FLOAT_TYPES: Final[frozenset[str]] = frozenset("aAeEfFgG")
TYPE_CHARS: Final[frozenset[str]] = INTEGER_TYPES | FLOAT_TYPES | frozenset("cps")


@dataclass(frozen=True, slots=True)
class ArgRef:
    """Reference to an argument: by position, by name, or automatic.

    An automatic reference (neither ``index`` nor ``name`` set) only exists
    between parsing and compilation; `plume.engine.template.AutoIndexCursor`
    replaces it with an explicit index.
    """

    index: int | None = None
    name: str | None = None

    @property
    def is_auto(self) -> bool:
        """Whether this reference still waits for an automatic index."""
        return self.index is None and self.name is None

    @property
    def key(self) -> int | str:
        """The resolved lookup key (index or name).

        Raises:
            ValueError: If the reference is still automatic.
        """
        if self.index is not None:
            return self.index
        if self.name is not None:
            return self.name
        raise ValueError("automatic argument reference has not been assigned an index")

    def __str__(self) -> str:
        if self.is_auto:
            return "{}"
        return f"{{{self.key}}}"


Dimension: TypeAlias = int | ArgRef | None


@dataclass(frozen=True, slots=True)
class FormatSpec:
    """One parsed placeholder.

    Attributes:
        arg_ref (ArgRef): Which argument to render.
        fill (str): Padding character (single character, default space).
        align (Align): Requested alignment.
        sign_mode (SignMode): Sign handling for numbers.
        alternate (bool): ``#`` flag (base prefixes, kept decimal point).
        zero_pad (bool): ``0`` flag as written in the source.
        width (Dimension): Minimum field width.
        precision (Dimension): Fractional digits for floats, max length for text.
        type_char (str | None): Presentation type letter, or None for the
            argument's default.
        offset (int): Index of the placeholder's opening brace in the format string.
    """

    arg_ref: ArgRef = ArgRef()
    fill: str = " "
    align: Align = Align.DEFAULT
    sign_mode: SignMode = SignMode.DEFAULT
    alternate: bool = False
    zero_pad: bool = False
    width: Dimension = None
    precision: Dimension = None
    type_char: str | None = None
    offset: int = 0

    @property
    def has_references(self) -> bool:
        """Whether width or precision still point at another argument."""
        return isinstance(self.width, ArgRef) or isinstance(self.precision, ArgRef)

    def references(self) -> tuple[ArgRef, ...]:
        """Return every argument this placeholder reads, target first."""
        refs: list[ArgRef] = [self.arg_ref]
        for dim in (self.width, self.precision):
            if isinstance(dim, ArgRef):
                refs.append(dim)
        return tuple(refs)

    def with_dimensions(self, *, width: int | None, precision: int | None) -> FormatSpec:
        """Return a copy with width/precision replaced by literal values."""
        return replace(self, width=width, precision=precision)

    def with_refs(
        self,
        *,
        arg_ref: ArgRef,
        width: Dimension,
        precision: Dimension,
    ) -> FormatSpec:
        """Return a copy with argument references replaced."""
        return replace(self, arg_ref=arg_ref, width=width, precision=precision)
