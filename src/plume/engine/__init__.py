# topmark:header:start
#
#   project      : Plume
#   file         : __init__.py
#   file_relpath : src/plume/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Format engine: placeholder parser, value model, renderers and templates.

Modules are layered leaf-first: `spec` (data model) <- `parser` <- `values`
<- `render` <- `template`.
"""

from __future__ import annotations

from plume.engine.parser import SpecParser, parse_placeholder
from plume.engine.spec import Align, ArgRef, FormatSpec, SignMode
from plume.engine.template import AutoIndexCursor, Template
from plume.engine.values import NULL_POINTER, ArgumentList, Pointer, Value, ValueKind

__all__ = [
    "NULL_POINTER",
    "Align",
    "ArgRef",
    "ArgumentList",
    "AutoIndexCursor",
    "FormatSpec",
    "Pointer",
    "SignMode",
    "SpecParser",
    "Template",
    "Value",
    "ValueKind",
    "parse_placeholder",
]
