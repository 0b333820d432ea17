# topmark:header:start
#
#   project      : Plume
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""CLI test helpers for running Plume through `click.testing.CliRunner`.

Tests that depend on configuration discovery should request the
``isolation`` fixture from ``tests/conftest.py`` so the working directory is
an empty project marked ``root = true``.
"""

from __future__ import annotations

from typing import IO, Any, Sequence

from click.testing import CliRunner, Result

from plume.cli.main import cli
from plume.cli_shared.exit_codes import ExitCode


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI from the current working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["render", "{:>4}", "7"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.

    Example:
        ```python
        result = run_cli(["--color", "never", "render", "{}", "x"])
        assert_SUCCESS(result)
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def _assert_exit(result: Result, expected: ExitCode) -> None:
    assert result.exit_code == expected, result.output


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    _assert_exit(result, ExitCode.SUCCESS)


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    _assert_exit(result, ExitCode.USAGE_ERROR)


def assert_FORMAT_ERROR(result: Result) -> None:
    """Assert that the command exited with FORMAT_ERROR (code 65)."""
    _assert_exit(result, ExitCode.FORMAT_ERROR)


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    _assert_exit(result, ExitCode.CONFIG_ERROR)
