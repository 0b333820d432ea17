# topmark:header:start
#
#   project      : Plume
#   file         : __init__.py
#   file_relpath : src/plume/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Public Plume API (stable surface).

This module exposes a small, typed API on top of the format engine. The
signatures here follow semver; internal modules remain private.

```python
import plume

plume.format("{:*^6}", 42)           # '**42**'
tpl = plume.compile("{0:{1}}|")
tpl.render("x", 5)                    # 'x    |'

fmt = plume.Formatter({"format": {"float_precision": 2}})
fmt.format("{:f}", 3.14159)           # '3.14'
```

Module-level functions use a shared default `Formatter` built from the
runtime defaults (no configuration file discovery).
"""

from __future__ import annotations

from functools import cache
from typing import TYPE_CHECKING

from plume.api.formatter import Formatter, resolve_config

if TYPE_CHECKING:
    from plume.engine.template import Template


@cache
def formatter() -> Formatter:
    """Return the shared default `Formatter`."""
    return Formatter()


def compile(format_string: str) -> Template:  # noqa: A001
    """Compile ``format_string`` into a reusable `plume.engine.Template`.

    Raises:
        InvalidFormatStringError: If the format string is malformed.
    """
    return formatter().compile(format_string)


def format(format_string: str, /, *args: object, **kwargs: object) -> str:  # noqa: A001
    """Render ``format_string`` with positional and named arguments.

    Raises:
        InvalidFormatStringError: If the format string is malformed or a
            placeholder does not apply to its argument.
        ArgumentOutOfBoundsError: If a placeholder has no matching argument.
    """
    return formatter().format(format_string, *args, **kwargs)


__all__ = [
    "Formatter",
    "compile",
    "format",
    "formatter",
    "resolve_config",
]
