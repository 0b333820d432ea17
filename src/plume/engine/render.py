# topmark:header:start
#
#   project      : Plume
#   file         : render.py
#   file_relpath : src/plume/engine/render.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Per-kind rendering of a single argument.

Rendering happens in two stages:

1. A kind-specific renderer produces a `Body`: the sign, the alternate-form
   prefix (``0x``, ``0b``...), and the digits/text, kept apart so that
   sign-aware padding can insert fill between them.
2. `pad` applies width, fill and the effective alignment.

Numeric digit generation is delegated to the built-in ``format`` on the
*magnitude*; sign handling and padding are done here so that every value kind
shares the same rules.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from plume.constants import DEFAULT_FLOAT_PRECISION
from plume.core.errors import InvalidFormatStringError
from plume.engine.spec import FLOAT_TYPES, INTEGER_TYPES, Align, SignMode
from plume.engine.values import ValueKind

if TYPE_CHECKING:
    from plume.engine.spec import FormatSpec
    from plume.engine.values import Value

# type letter -> (format code for the magnitude, alternate-form prefix)
_INTEGER_BASES: Final[dict[str, tuple[str, str]]] = {
    "b": ("b", "0b"),
    "B": ("b", "0B"),
    "o": ("o", "0o"),
    "d": ("d", ""),
    "n": ("d", ""),
    "x": ("x", "0x"),
    "X": ("X", "0X"),
}


@dataclass(frozen=True, slots=True)
class Body:
    """Unpadded rendering of one argument.

    Attributes:
        digits (str): The main text (digits for numbers).
        sign (str): ``"-"``, ``"+"``, ``" "`` or empty.
        prefix (str): Base prefix placed between sign and digits.
        numeric (bool): Whether sign-aware (``=``) alignment applies.
    """

    digits: str
    sign: str = ""
    prefix: str = ""
    numeric: bool = False

    @property
    def text(self) -> str:
        return f"{self.sign}{self.prefix}{self.digits}"


def _fail(spec: FormatSpec, message: str) -> InvalidFormatStringError:
    return InvalidFormatStringError(message, offset=spec.offset)


def _sign_for(negative: bool, mode: SignMode) -> str:
    if negative:
        return "-"
    if mode is SignMode.ALWAYS:
        return "+"
    if mode is SignMode.SPACE:
        return " "
    return ""


def _precision_or(spec: FormatSpec, default: int) -> int:
    # References are resolved before rendering; only literals reach this point.
    return spec.precision if isinstance(spec.precision, int) else default


def _text_body(text: str, spec: FormatSpec) -> Body:
    if isinstance(spec.precision, int):
        text = text[: spec.precision]
    return Body(text)


def _char_body(code: int, spec: FormatSpec) -> Body:
    try:
        return Body(chr(code))
    except (ValueError, OverflowError) as exc:
        raise _fail(spec, f"'c' argument {code} is not a valid code point") from exc


def _pointer_body(address: int) -> Body:
    return Body(format(address, "x"), prefix="0x", numeric=True)


def _integer_body(number: int, spec: FormatSpec, default_precision: int) -> Body:
    t = spec.type_char or "d"
    if t in FLOAT_TYPES:
        return _float_body(float(number), spec, default_precision)
    if t == "c":
        return _char_body(number, spec)
    if t == "s":
        return _text_body(str(number), spec)
    if t == "p":
        if number < 0:
            raise _fail(spec, "negative integers cannot be rendered as pointers")
        return _pointer_body(number)
    if spec.precision is not None:
        raise _fail(spec, "precision not allowed in integer format specifier")
    code, prefix = _INTEGER_BASES[t]
    return Body(
        format(abs(number), code),
        sign=_sign_for(number < 0, spec.sign_mode),
        prefix=prefix if spec.alternate else "",
        numeric=True,
    )


def _hex_float(magnitude: float, precision: int | None, upper: bool) -> tuple[str, str]:
    """Render a non-negative float in ``%a`` style as (prefix, digits)."""
    if math.isinf(magnitude) or math.isnan(magnitude):
        text = "inf" if math.isinf(magnitude) else "nan"
        return "", text.upper() if upper else text

    if precision is None:
        # float.hex() always emits 13 mantissa digits; drop the trailing zeros.
        mantissa, _, exponent = magnitude.hex()[2:].partition("p")
        lead, _, frac = mantissa.partition(".")
        frac = frac.rstrip("0")
        digits = f"{lead}.{frac}p{exponent}" if frac else f"{lead}p{exponent}"
    elif magnitude == 0.0:
        digits = f"0.{'0' * precision}p+0" if precision else "0p+0"
    else:
        fraction, exp = math.frexp(magnitude)  # fraction in [0.5, 1)
        fraction, exp = fraction * 2, exp - 1
        scale = 16**precision
        # Round half to even on the whole mantissa; a carry shows as a leading 2.
        lead, rem = divmod(round(fraction * scale), scale)
        frac = format(rem, f"0{precision}x") if precision else ""
        sign = "+" if exp >= 0 else "-"
        digits = f"{lead}.{frac}p{sign}{abs(exp)}" if frac else f"{lead}p{sign}{abs(exp)}"

    if upper:
        return "0X", digits.upper()
    return "0x", digits


def _keep_point(digits: str) -> str:
    """Insert a decimal point into a repr such as ``1e+16`` that lacks one."""
    if "." in digits:
        return digits
    mantissa, e, exponent = digits.partition("e")
    return f"{mantissa}.{e}{exponent}"


def _float_body(number: float, spec: FormatSpec, default_precision: int) -> Body:
    t = spec.type_char
    negative = math.copysign(1.0, number) < 0
    magnitude = abs(number)
    sign = _sign_for(negative, spec.sign_mode)

    if t in ("a", "A"):
        precision = spec.precision if isinstance(spec.precision, int) else None
        prefix, digits = _hex_float(magnitude, precision, upper=t == "A")
        return Body(digits, sign=sign, prefix=prefix, numeric=True)

    if t == "s":
        return _text_body(repr(number), spec)
    if t is not None and t not in FLOAT_TYPES:
        raise _fail(spec, f"unknown format code {t!r} for a floating point argument")

    flags = "#" if spec.alternate else ""
    if t is None:
        # No type: shortest round-trip repr, or general format when precision is given.
        if spec.precision is None:
            digits = repr(magnitude)
            if spec.alternate and math.isfinite(magnitude):
                digits = _keep_point(digits)
        else:
            digits = format(magnitude, f"{flags}.{_precision_or(spec, default_precision)}")
    else:
        digits = format(magnitude, f"{flags}.{_precision_or(spec, default_precision)}{t}")
    return Body(digits, sign=sign, numeric=True)


def _wants_number(spec: FormatSpec) -> bool:
    """Whether flags that only make sense for numbers are present."""
    return (
        spec.zero_pad or spec.align is Align.NUMERIC or spec.sign_mode is not SignMode.DEFAULT
    )


def render_body(value: Value, spec: FormatSpec, *, default_precision: int) -> Body:
    """Render the unpadded body of ``value`` according to ``spec``.

    Args:
        value (Value): The argument to render.
        spec (FormatSpec): Placeholder with width/precision already resolved.
        default_precision (int): Precision used by float types when none is given.

    Returns:
        Body: The unpadded rendering.

    Raises:
        InvalidFormatStringError: If the type letter does not apply to the argument kind.
    """
    t = spec.type_char
    kind = value.kind

    if kind is ValueKind.INTEGER:
        return _integer_body(int(value.payload), spec, default_precision)

    if kind is ValueKind.FLOAT:
        return _float_body(float(value.payload), spec, default_precision)

    if kind is ValueKind.BOOLEAN:
        if t == "s" or (t is None and not _wants_number(spec)):
            return _text_body(str(bool(value.payload)), spec)
        return _integer_body(int(value.payload), spec, default_precision)

    if kind is ValueKind.POINTER:
        address = int(value.payload)
        if t is None or t == "p":
            return _pointer_body(address)
        if t == "s":
            return _text_body(f"0x{address:x}", spec)
        if t in INTEGER_TYPES:
            return _integer_body(address, spec, default_precision)
        raise _fail(spec, f"unknown format code {t!r} for a pointer argument")

    # TEXT
    if t is None or t == "s":
        return _text_body(str(value.payload), spec)
    raise _fail(spec, f"unknown format code {t!r} for a text argument")


def pad(body: Body, width: int, fill: str, align: Align) -> str:
    """Pad ``body`` to ``width`` characters.

    Args:
        body (Body): The unpadded rendering.
        width (int): Minimum width; shorter bodies are padded, longer ones kept.
        fill (str): Padding character.
        align (Align): Effective alignment (never ``DEFAULT``).

    Returns:
        str: The padded text.
    """
    text = body.text
    missing = width - len(text)
    if missing <= 0:
        return text
    if align is Align.LEFT:
        return text + fill * missing
    if align is Align.CENTERED:
        left = missing // 2
        return fill * left + text + fill * (missing - left)
    if align is Align.NUMERIC:
        return f"{body.sign}{body.prefix}{fill * missing}{body.digits}"
    return fill * missing + text


def render_value(
    value: Value,
    spec: FormatSpec,
    *,
    default_precision: int = DEFAULT_FLOAT_PRECISION,
) -> str:
    """Render ``value`` into its final, padded text.

    Args:
        value (Value): The argument to render.
        spec (FormatSpec): Placeholder with width/precision already resolved
            to literals (or None).
        default_precision (int): Precision for float types when none is given.

    Returns:
        str: The rendered field.
    """
    body = render_body(value, spec, default_precision=default_precision)

    align = spec.align
    if align is Align.DEFAULT or (align is Align.NUMERIC and not body.numeric):
        # Numeric renderings (booleans as digits, pointers) right-align like numbers.
        align = Align.RIGHT if body.numeric else value.default_align

    width = spec.width if isinstance(spec.width, int) else 0
    return pad(body, width, spec.fill, align)
