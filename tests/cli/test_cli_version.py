# topmark:header:start
#
#   project      : Plume
#   file         : test_cli_version.py
#   file_relpath : tests/cli/test_cli_version.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

from plume.constants import PLUME_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_version() -> None:
    """It should output the installed version string (exact match)."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == PLUME_VERSION


@mark_cli
def test_version_verbose_has_heading() -> None:
    result = run_cli(["--no-color", "-v", "version"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["Plume version:", f"    {PLUME_VERSION}"]


@mark_cli
def test_version_json_format() -> None:
    """`version --format json` returns parseable JSON with a correct version value."""
    result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": PLUME_VERSION}


@mark_cli
def test_version_rejects_unknown_format() -> None:
    result = run_cli(["version", "--format", "yaml"])
    assert result.exit_code == 2
    assert "Must be one of: text, json" in result.output


@mark_cli
def test_group_without_command_prints_help() -> None:
    result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert "Hint: use 'plume render FORMAT [ARGS]...'" in result.output
    assert "render" in result.output
    assert "check" in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])
    assert result.exit_code == 64
