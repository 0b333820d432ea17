# topmark:header:start
#
#   project      : Plume
#   file         : keys.py
#   file_relpath : src/plume/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""TOML section and key names used by Plume configuration files."""

from __future__ import annotations

from typing import Final


class Toml:
    """Section and key constants for ``plume.toml`` / ``[tool.plume]``."""

    # Top-level keys
    KEY_ROOT: Final[str] = "root"

    # [format]
    SECTION_FORMAT: Final[str] = "format"
    KEY_FLOAT_PRECISION: Final[str] = "float_precision"
    KEY_TEMPLATE_CACHE_SIZE: Final[str] = "template_cache_size"
