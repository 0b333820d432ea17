# topmark:header:start
#
#   project      : Plume
#   file         : errors.py
#   file_relpath : src/plume/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Exceptions for the Plume CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (`plume.core.errors`) are
    translated by `translate_library_errors`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Any

import click

from plume.cli_shared.exit_codes import ExitCode
from plume.core.errors import (
    ArgumentOutOfBoundsError,
    InvalidFormatStringError,
    PlumeError,
    UnsupportedStyleError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


class PlumeCliError(click.ClickException):
    """Base class for all Plume CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class PlumeUsageError(PlumeCliError):
    """Invalid invocation, including arguments that do not fit the format string."""

    exit_code = ExitCode.USAGE_ERROR


class PlumeFormatError(PlumeCliError):
    """Malformed format string or inapplicable presentation type."""

    exit_code = ExitCode.FORMAT_ERROR


class PlumeConfigError(PlumeCliError):
    """Missing, invalid or malformed configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class PlumeUnexpectedError(PlumeCliError):
    """Unhandled error (last resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def describe_format_error(exc: InvalidFormatStringError) -> str:
    """Return the error message followed by its source excerpt, when available."""
    excerpt = exc.excerpt()
    if not excerpt:
        return str(exc)
    indented = "\n".join(f"    {line}" for line in excerpt.splitlines())
    return f"{exc}\n{indented}"


@contextmanager
def translate_library_errors() -> Iterator[None]:
    """Re-raise Plume library errors as CLI errors with the matching exit code."""
    try:
        yield
    except InvalidFormatStringError as exc:
        raise PlumeFormatError(describe_format_error(exc)) from exc
    except ArgumentOutOfBoundsError as exc:
        raise PlumeUsageError(str(exc)) from exc
    except UnsupportedStyleError as exc:
        raise PlumeUsageError(str(exc)) from exc
    except PlumeError as exc:
        raise PlumeUnexpectedError(str(exc)) from exc
