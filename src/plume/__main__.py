# topmark:header:start
#
#   project      : Plume
#   file         : __main__.py
#   file_relpath : src/plume/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Module entry point for running Plume via ``python -m plume``.

Delegates to `plume.cli.main.cli`, the single CLI entry point.

Examples:
    Render a format string::

        python -m plume render "{:>8}" hello
"""

from __future__ import annotations

from plume.cli.main import cli

if __name__ == "__main__":
    cli()
