# topmark:header:start
#
#   project      : Plume
#   file         : __init__.py
#   file_relpath : src/plume/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Plume package.

Plume is a runtime format-string engine: it parses ``{...}`` placeholders
written in the familiar format mini-language (fill, alignment, sign, ``#``,
``0``, width, precision, type), including widths and precisions taken from
other arguments, and renders them against positional and named arguments.
It ships an ANSI styling helper and a small CLI.
"""

from __future__ import annotations

from plume.api import Formatter, compile, format, formatter  # noqa: A004
from plume.core.errors import (
    ArgumentOutOfBoundsError,
    InvalidFormatStringError,
    PlumeError,
    UnsupportedStyleError,
)
from plume.engine import NULL_POINTER, Pointer, Template

__all__ = [
    "NULL_POINTER",
    "ArgumentOutOfBoundsError",
    "Formatter",
    "InvalidFormatStringError",
    "PlumeError",
    "Pointer",
    "Template",
    "UnsupportedStyleError",
    "compile",
    "format",
    "formatter",
]
