# topmark:header:start
#
#   project      : Plume
#   file         : __init__.py
#   file_relpath : src/plume/ansi/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""ANSI terminal styling helpers (SGR codes and scoped styles)."""

from __future__ import annotations

from plume.ansi.codes import Sgr
from plume.ansi.style import RESET_SEQUENCE, Style

__all__ = [
    "RESET_SEQUENCE",
    "Sgr",
    "Style",
]
