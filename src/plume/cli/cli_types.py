# topmark:header:start
#
#   project      : Plume
#   file         : cli_types.py
#   file_relpath : src/plume/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Shared CLI parameter types and argument-token parsing.

Render arguments arrive on the command line as strings. A token may carry an
explicit type prefix (``int:``, ``float:``, ``str:``, ``bool:``, ``ptr:``);
otherwise its type is inferred (integer, float, ``true``/``false``, else
text) unless inference is disabled.
"""

from __future__ import annotations

from enum import Enum
from typing import (
    TYPE_CHECKING,
    Callable,
    Final,
    Generic,
    Iterable,
    NoReturn,
    Protocol,
    TypeVar,
    cast,
)

import click

from plume.engine.values import Pointer

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)

_TRUE_WORDS: Final[frozenset[str]] = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS: Final[frozenset[str]] = frozenset({"false", "no", "off", "0"})


def _parse_int(text: str) -> int:
    """Parse a decimal integer, or one with a ``0x``/``0o``/``0b`` prefix."""
    try:
        return int(text, 10)
    except ValueError:
        return int(text, 0)


def _parse_bool(text: str) -> bool:
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"not a boolean: {text!r}")


def _parse_pointer(text: str) -> Pointer:
    return Pointer(_parse_int(text))


TYPE_PREFIXES: Final[dict[str, Callable[[str], object]]] = {
    "int": _parse_int,
    "float": float,
    "str": str,
    "bool": _parse_bool,
    "ptr": _parse_pointer,
}


def _infer(token: str) -> object:
    """Infer int, float or bool from ``token``; fall back to the text itself."""
    try:
        return int(token, 10)
    except ValueError:
        pass
    # Only digit-bearing tokens become floats: "inf" and "nan" stay text.
    if any(ch.isdigit() for ch in token):
        try:
            return float(token)
        except ValueError:
            pass
    lowered = token.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    return token


def parse_argument_token(token: str, *, infer: bool = True) -> object:
    """Convert a command-line token into a render argument.

    Args:
        token (str): The raw token, e.g. ``"42"``, ``"float:1e3"``, ``"ptr:0x10"``.
        infer (bool): Infer the type of unprefixed tokens; when False they are text.

    Returns:
        object: An ``int``, ``float``, ``bool``, ``str`` or `Pointer`.

    Raises:
        ValueError: If a prefixed token cannot be converted.
    """
    prefix, sep, rest = token.partition(":")
    if sep and prefix in TYPE_PREFIXES:
        return TYPE_PREFIXES[prefix](rest)
    return _infer(token) if infer else token


class NamedArgParam(ParamTypeBase):
    """A ``KEY=VALUE`` pair whose key is a valid placeholder name."""

    name = "key=value"

    def convert(
        self,
        value: str | tuple[str, str],
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> tuple[str, str]:
        """Split ``value`` into ``(key, raw_value)``."""
        if isinstance(value, tuple):
            return value
        key, sep, raw = value.partition("=")
        if not sep:
            raise click.BadParameter(f"expected KEY=VALUE, got {value!r}", param=param, ctx=ctx)
        if not key.isidentifier():
            raise click.BadParameter(f"{key!r} is not a valid name", param=param, ctx=ctx)
        return key, raw

    def __repr__(self) -> str:
        return "NamedArgParam()"


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum (case-insensitive)."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_PLUME_COMPLETE=bash_source plume)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix = (incomplete or "").lower()
        return [
            RuntimeCompletionItem(choice)
            for choice in self.choices
            if choice.lower().startswith(prefix)
        ]

    def __repr__(self) -> str:
        return f"EnumChoiceParam({self.enum_cls.__name__})"
