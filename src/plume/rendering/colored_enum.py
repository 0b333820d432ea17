# topmark:header:start
#
#   project      : Plume
#   file         : colored_enum.py
#   file_relpath : src/plume/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Color-aware enum primitives for human-facing output.

Key types:
    - `Colorizer`: Protocol for any callable that decorates strings. Both
      `yachalk.ChalkBuilder` and `plume.ansi.Style` satisfy it.
    - `ColoredStrEnum`: `str, Enum` whose `.value` is plain text and which
      carries a colorizer exposed via `.color`.

Example:
    ```python
    from yachalk import chalk

    class Verdict(ColoredStrEnum):
        OK = ("ok", chalk.green)
        BAD = ("bad", chalk.red_bright)

    print(Verdict.OK.value)           # 'ok'
    print(Verdict.OK.color("hello"))  # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Matches the call shape of `yachalk.ChalkBuilder.__call__`: variadic
    arguments joined with ``sep``.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Join ``args`` with ``sep`` and return the decorated string."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and that carries an associated colorizer.

    The colorizer is stored next to `_value_` rather than inside it so that
    hashing, equality and `repr` keep normal `str` enum semantics.
    """

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a member from its text and colorizer."""
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """The textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """The colorizer associated with the member."""
        return self._color

    def styled(self, enabled: bool = True) -> str:
        """Return the value, colorized when ``enabled`` is true."""
        return self._color(self._value_) if enabled else self._value_
