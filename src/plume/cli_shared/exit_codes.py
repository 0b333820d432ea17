# topmark:header:start
#
#   project      : Plume
#   file         : exit_codes.py
#   file_relpath : src/plume/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Exit codes for the Plume CLI.

Values follow the BSD `sysexits` convention so other tooling can interpret
failures consistently.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Plume CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure; prefer a more specific code when one applies.
        USAGE_ERROR: Invalid invocation, including arguments that do not match
            the placeholders of the format string. Mirrors ``EX_USAGE (64)``.
        FORMAT_ERROR: Malformed format string or inapplicable presentation
            type. Mirrors ``EX_DATAERR (65)``.
        CONFIG_ERROR: Missing, invalid or malformed configuration. Mirrors
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    FORMAT_ERROR = 65  # EX_DATAERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
