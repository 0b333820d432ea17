# topmark:header:start
#
#   project      : Plume
#   file         : values.py
#   file_relpath : src/plume/engine/values.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Runtime argument model: tagged values and the argument list.

Arguments reach the engine as arbitrary Python objects. Each one is wrapped
once per render call into a `Value`, a tagged variant over the closed
`ValueKind` enumeration, so renderers dispatch on a tag instead of on
``isinstance`` chains scattered across the engine.

Classification (`Value.from_object`):
    - ``bool`` -> BOOLEAN (checked before ``int``; ``bool`` subclasses ``int``)
    - `numbers.Integral` -> INTEGER
    - `numbers.Real` -> FLOAT
    - ``str`` -> TEXT
    - `Pointer` -> POINTER
    - anything else -> TEXT, via ``str()``
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Union

from plume.core.errors import ArgumentOutOfBoundsError
from plume.engine.spec import Align

if TYPE_CHECKING:
    from collections.abc import Mapping

    from plume.engine.spec import ArgRef

Payload = Union[int, float, str, bool]


class ValueKind(Enum):
    """Closed set of argument categories the renderers understand."""

    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    BOOLEAN = "boolean"
    POINTER = "pointer"


@dataclass(frozen=True, slots=True)
class Pointer:
    """Opaque handle rendered as an address (``0x...``).

    Attributes:
        address (int): Non-negative address value.
    """

    address: int

    def __post_init__(self) -> None:
        if self.address < 0:
            raise ValueError(f"pointer address must be non-negative (got {self.address})")

    @classmethod
    def to(cls, obj: object) -> Pointer:
        """Return a pointer to ``obj`` (its identity)."""
        return cls(id(obj))


NULL_POINTER = Pointer(0)


@dataclass(frozen=True, slots=True)
class Value:
    """One argument, tagged with its kind.

    Attributes:
        kind (ValueKind): Category used for rendering dispatch.
        payload (Payload): The underlying Python value (``int`` address for pointers).
    """

    kind: ValueKind
    payload: Payload

    @classmethod
    def from_object(cls, obj: object) -> Value:
        """Classify an arbitrary Python object.

        Args:
            obj (object): The caller's argument.

        Returns:
            Value: The tagged value.
        """
        if isinstance(obj, Value):
            return obj
        if isinstance(obj, bool):
            return cls(ValueKind.BOOLEAN, obj)
        if isinstance(obj, numbers.Integral):
            return cls(ValueKind.INTEGER, int(obj))
        if isinstance(obj, numbers.Real):
            return cls(ValueKind.FLOAT, float(obj))
        if isinstance(obj, str):
            return cls(ValueKind.TEXT, obj)
        if isinstance(obj, Pointer):
            return cls(ValueKind.POINTER, obj.address)
        return cls(ValueKind.TEXT, str(obj))

    @property
    def is_integer(self) -> bool:
        return self.kind is ValueKind.INTEGER

    @property
    def is_float(self) -> bool:
        return self.kind is ValueKind.FLOAT

    @property
    def is_numeric(self) -> bool:
        return self.kind in (ValueKind.INTEGER, ValueKind.FLOAT)

    @property
    def is_text(self) -> bool:
        return self.kind is ValueKind.TEXT

    @property
    def is_pointer(self) -> bool:
        return self.kind is ValueKind.POINTER

    @property
    def is_signed(self) -> bool:
        """Whether the kind can carry a sign at all."""
        return self.is_numeric

    @property
    def is_negative(self) -> bool:
        """Whether the value is negative (``-0.0`` and negative NaN included)."""
        if self.kind is ValueKind.INTEGER:
            return int(self.payload) < 0
        if self.kind is ValueKind.FLOAT:
            return math.copysign(1.0, float(self.payload)) < 0
        return False

    @property
    def default_align(self) -> Align:
        """Alignment used when the placeholder does not request one."""
        return Align.RIGHT if self.is_numeric else Align.LEFT


def _frozen_mapping() -> Mapping[str, Value]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ArgumentList:
    """Ordered positional values plus named values, read-only during rendering.

    Attributes:
        positional (tuple[Value, ...]): Values addressed by index.
        named (Mapping[str, Value]): Values addressed by name.
    """

    positional: tuple[Value, ...] = ()
    named: Mapping[str, Value] = field(default_factory=_frozen_mapping)

    @classmethod
    def of(cls, *args: object, **kwargs: object) -> ArgumentList:
        """Build an argument list from plain Python values."""
        return cls(
            positional=tuple(Value.from_object(a) for a in args),
            named=MappingProxyType({k: Value.from_object(v) for k, v in kwargs.items()}),
        )

    def __len__(self) -> int:
        return len(self.positional)

    def lookup(self, ref: ArgRef, *, offset: int | None = None) -> Value:
        """Return the value ``ref`` points at.

        Args:
            ref (ArgRef): An explicit (index or name) reference.
            offset (int | None): Placeholder offset, for the error message.

        Returns:
            Value: The referenced value.

        Raises:
            ArgumentOutOfBoundsError: If no argument matches ``ref``.
        """
        key = ref.key
        if isinstance(key, int):
            if key < len(self.positional):
                return self.positional[key]
        elif key in self.named:
            return self.named[key]
        raise ArgumentOutOfBoundsError(key, available=len(self.positional), offset=offset)
