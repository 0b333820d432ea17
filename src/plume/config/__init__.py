# topmark:header:start
#
#   project      : Plume
#   file         : __init__.py
#   file_relpath : src/plume/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Configuration handling for Plume.

Settings are read from ``plume.toml`` or the ``[tool.plume]`` table of
``pyproject.toml`` with `tomlkit`, merged over the runtime defaults and frozen
into an immutable `Config`.
"""

from __future__ import annotations

from plume.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
]
