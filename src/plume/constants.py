# topmark:header:start
#
#   project      : Plume
#   file         : constants.py
#   file_relpath : src/plume/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Plume Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

PLUME_VERSION: str = get_version("plume")

# Environment variable consulted by `plume.config.logging.resolve_env_log_level`.
LOG_LEVEL_ENV_VAR: Final[str] = "PLUME_LOG_LEVEL"

# Config discovery: dedicated file, or `[tool.plume]` inside pyproject.toml.
PLUME_TOML_NAME: Final[str] = "plume.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "plume"

# Engine defaults (overridable through `[format]` in the config).
DEFAULT_FLOAT_PRECISION: Final[int] = 6
DEFAULT_TEMPLATE_CACHE_SIZE: Final[int] = 128
