# topmark:header:start
#
#   project      : Plume
#   file         : __init__.py
#   file_relpath : src/plume/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Click-based command line interface for Plume."""

from __future__ import annotations
