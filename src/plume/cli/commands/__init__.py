# topmark:header:start
#
#   project      : Plume
#   file         : __init__.py
#   file_relpath : src/plume/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Subcommands of the ``plume`` command group."""

from __future__ import annotations
