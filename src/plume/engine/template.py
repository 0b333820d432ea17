# topmark:header:start
#
#   project      : Plume
#   file         : template.py
#   file_relpath : src/plume/engine/template.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Compiled format strings.

A `Template` is the decomposition of a format string into literal fragments
and parsed placeholders, such that rendering interleaves them as::

    literal[0], field[0], literal[1], field[1], ..., literal[n]

Templates are immutable: compile once, render many times with different
arguments, from as many threads as needed.

Example:
    ```python
    from plume.engine.template import Template

    tpl = Template.compile("{name:>8}: {0:08.3f}")
    tpl.render(3.14159, name="pi")  # '      pi: 0003.142'
    ```
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from plume.config.logging import get_logger
from plume.constants import DEFAULT_FLOAT_PRECISION
from plume.core.errors import InvalidFormatStringError
from plume.engine.parser import parse_placeholder
from plume.engine.render import render_value
from plume.engine.spec import ArgRef
from plume.engine.values import ArgumentList, ValueKind

if TYPE_CHECKING:
    from typing import TextIO

    from plume.config.logging import PlumeLogger
    from plume.engine.spec import Dimension, FormatSpec

logger: PlumeLogger = get_logger(__name__)

_BRACE: Final[re.Pattern[str]] = re.compile(r"[{}]")


class AutoIndexCursor:
    """Next-unused-index counter for one compile pass.

    Every automatic reference (a placeholder's own argument, and independently
    each of its width/precision references) draws the next index. Explicit
    references never consume from the cursor.
    """

    def __init__(self) -> None:
        self._next = 0

    def draw(self) -> int:
        """Return the next automatic index."""
        index = self._next
        self._next += 1
        return index

    def _resolve(self, ref: ArgRef) -> ArgRef:
        return ArgRef(index=self.draw()) if ref.is_auto else ref

    def _resolve_dimension(self, dim: Dimension) -> Dimension:
        if isinstance(dim, ArgRef):
            return self._resolve(dim)
        return dim

    def assign(self, spec: FormatSpec) -> FormatSpec:
        """Return ``spec`` with every automatic reference replaced by an index.

        The target argument draws first, then width, then precision.
        """
        if not (spec.arg_ref.is_auto or spec.has_references):
            return spec
        arg_ref = self._resolve(spec.arg_ref)
        width = self._resolve_dimension(spec.width)
        precision = self._resolve_dimension(spec.precision)
        return spec.with_refs(arg_ref=arg_ref, width=width, precision=precision)


def _resolve_dimension(
    dim: Dimension,
    arguments: ArgumentList,
    spec: FormatSpec,
    what: str,
) -> int | None:
    """Turn a width/precision reference into a literal value."""
    if not isinstance(dim, ArgRef):
        return dim
    value = arguments.lookup(dim, offset=spec.offset)
    if value.kind is not ValueKind.INTEGER:
        raise InvalidFormatStringError(
            f"{what} argument {dim} must be an integer, not {value.kind.value}",
            offset=spec.offset,
        )
    number = int(value.payload)
    if number < 0:
        raise InvalidFormatStringError(
            f"{what} argument {dim} must not be negative (got {number})",
            offset=spec.offset,
        )
    return number


@dataclass(frozen=True, slots=True)
class Template:
    """A compiled format string.

    Attributes:
        source (str): The original format string.
        literals (tuple[str, ...]): Literal fragments, one more than ``specs``.
        specs (tuple[FormatSpec, ...]): Parsed placeholders with explicit references.
    """

    source: str
    literals: tuple[str, ...]
    specs: tuple[FormatSpec, ...]

    def __post_init__(self) -> None:
        if len(self.literals) != len(self.specs) + 1:
            raise ValueError(
                f"Template needs exactly one more literal than placeholders "
                f"(got {len(self.literals)} literal(s), {len(self.specs)} placeholder(s))"
            )

    # ---------------------------- compilation ----------------------------

    @classmethod
    def compile(cls, format_string: str) -> Template:
        """Compile ``format_string`` into a Template.

        ``{{`` and ``}}`` are escapes for literal braces; any other ``{`` opens
        a placeholder, and a lone ``}`` is an error.

        Args:
            format_string (str): The format string.

        Returns:
            Template: The compiled template.

        Raises:
            InvalidFormatStringError: If the format string is malformed.
        """
        literals: list[str] = []
        specs: list[FormatSpec] = []
        current: list[str] = []
        cursor = AutoIndexCursor()

        pos = 0
        length = len(format_string)
        while pos < length:
            # Copy the literal run up to the next brace in one go.
            match = _BRACE.search(format_string, pos)
            brace = match.start() if match else length
            if brace > pos:
                current.append(format_string[pos:brace])
                pos = brace
                continue

            ch = format_string[pos]
            if format_string.startswith(ch, pos + 1):
                current.append(ch)
                pos += 2
                continue
            if ch == "}":
                raise InvalidFormatStringError(
                    "single '}' encountered in format string",
                    offset=pos,
                    format_string=format_string,
                )

            spec, pos = parse_placeholder(format_string, pos)
            literals.append("".join(current))
            current = []
            specs.append(cursor.assign(spec))

        literals.append("".join(current))
        template = cls(source=format_string, literals=tuple(literals), specs=tuple(specs))
        logger.trace("Compiled %r into %d placeholder(s)", format_string, len(specs))
        return template

    # ---------------------------- introspection ----------------------------

    @property
    def placeholder_count(self) -> int:
        return len(self.specs)

    @property
    def required_positional(self) -> int:
        """Minimum number of positional arguments a render call must supply."""
        indices = [
            ref.index for spec in self.specs for ref in spec.references() if ref.index is not None
        ]
        return max(indices) + 1 if indices else 0

    @property
    def names(self) -> frozenset[str]:
        """Names referenced by placeholders (targets and width/precision)."""
        return frozenset(
            ref.name for spec in self.specs for ref in spec.references() if ref.name is not None
        )

    # ---------------------------- rendering ----------------------------

    def render_arguments(
        self,
        arguments: ArgumentList,
        *,
        default_precision: int = DEFAULT_FLOAT_PRECISION,
    ) -> str:
        """Render this template with an already built argument list.

        Args:
            arguments (ArgumentList): Positional and named values.
            default_precision (int): Precision for float types when none is given.

        Returns:
            str: The rendered string.

        Raises:
            ArgumentOutOfBoundsError: If a reference has no matching argument.
            InvalidFormatStringError: If a width/precision reference is not a
                non-negative integer, or a type letter does not apply to its argument.
        """
        parts: list[str] = [self.literals[0]]
        try:
            for spec, literal in zip(self.specs, self.literals[1:]):
                resolved = spec
                if spec.has_references:
                    resolved = spec.with_dimensions(
                        width=_resolve_dimension(spec.width, arguments, spec, "width"),
                        precision=_resolve_dimension(spec.precision, arguments, spec, "precision"),
                    )
                value = arguments.lookup(spec.arg_ref, offset=spec.offset)
                parts.append(render_value(value, resolved, default_precision=default_precision))
                parts.append(literal)
        except InvalidFormatStringError as exc:
            # Render-time errors only know the placeholder offset.
            if exc.format_string is None:
                exc.format_string = self.source
            raise
        return "".join(parts)

    def render(self, /, *args: object, **kwargs: object) -> str:
        """Render this template with plain Python arguments.

        Returns:
            str: The rendered string.
        """
        return self.render_arguments(ArgumentList.of(*args, **kwargs))

    __call__ = render

    def render_to(self, stream: TextIO, /, *args: object, **kwargs: object) -> None:
        """Render and write the result to ``stream``.

        Nothing is written if rendering fails.
        """
        stream.write(self.render(*args, **kwargs))

    def __str__(self) -> str:
        return self.source
