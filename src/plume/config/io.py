# topmark:header:start
#
#   project      : Plume
#   file         : io.py
#   file_relpath : src/plume/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Load and render TOML configuration sources.

Parsing and rendering are done with `tomlkit`; parsed documents are returned
as plain ``dict`` structures so the model layer never sees tomlkit containers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from plume.config.keys import Toml
from plume.config.logging import get_logger
from plume.constants import DEFAULT_FLOAT_PRECISION, DEFAULT_TEMPLATE_CACHE_SIZE

if TYPE_CHECKING:
    from pathlib import Path

    from plume.config.logging import PlumeLogger

TomlTable = dict[str, Any]

logger: PlumeLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return Plume's runtime defaults as a TOML-shaped dict.

    This function performs **no I/O**. The returned value is a new dict so
    callers can mutate it safely.
    """
    return {
        Toml.SECTION_FORMAT: {
            Toml.KEY_FLOAT_PRECISION: DEFAULT_FLOAT_PRECISION,
            Toml.KEY_TEMPLATE_CACHE_SIZE: DEFAULT_TEMPLATE_CACHE_SIZE,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``plume.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        Errors are logged and an empty dict is returned on failure.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        data_any: Any = tomlkit.parse(text).unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def to_toml(data: TomlTable) -> str:
    """Render a TOML-shaped dict as TOML text."""
    return tomlkit.dumps(data)
