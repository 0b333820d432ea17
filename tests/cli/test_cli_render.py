# topmark:header:start
#
#   project      : Plume
#   file         : test_cli_render.py
#   file_relpath : tests/cli/test_cli_render.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""CLI tests: `render` command output, argument typing and exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import (
    assert_FORMAT_ERROR,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
)
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.cli


@parametrize(
    "argv, expected",
    [
        (["{:*^6}", "42"], "**42**"),
        (["{0:{1}}|", "x", "5"], "x    |"),
        (["{} + {} = {}", "1", "2", "3"], "1 + 2 = 3"),
        (["{:.3}", "float:2"], "2.0"),
        (["{:#x}", "int:255"], "0xff"),
        (["{:d}", "bool:yes"], "1"),
        (["{}", "true"], "True"),
        (["{}", "ptr:0x10"], "0x10"),
        (["{:>5}", "str:12"], "   12"),
        (["{:.2f}", "2.5"], "2.50"),
        (["{{literal}}"], "{literal}"),
    ],
)
def test_render_positional(isolation: Path, argv: list[str], expected: str) -> None:
    result = run_cli(["--color", "never", "render", *argv])
    assert_SUCCESS(result)
    assert result.output == f"{expected}\n"


def test_render_negative_argument_after_double_dash(isolation: Path) -> None:
    result = run_cli(["render", "--", "{:05}", "-3"])
    assert_SUCCESS(result)
    assert result.output == "-0003\n"


def test_render_named_arguments(isolation: Path) -> None:
    result = run_cli(["render", "{name:>8}|{n:03}", "-n", "name=plume", "--named", "n=7"])
    assert_SUCCESS(result)
    assert result.output == "   plume|007\n"


def test_render_raw_keeps_text(isolation: Path) -> None:
    inferred = run_cli(["render", "{:4}|", "42"])
    raw = run_cli(["render", "--raw", "{:4}|", "42"])
    assert inferred.output == "  42|\n"
    assert raw.output == "42  |\n"


def test_render_precision_option(isolation: Path) -> None:
    result = run_cli(["render", "--precision", "2", "{:f} {:.1f}", "3.14159", "3.14159"])
    assert_SUCCESS(result)
    assert result.output == "3.14 3.1\n"


def test_render_precision_from_config(isolation: Path) -> None:
    (isolation / "plume.toml").write_text(
        "root = true\n[format]\nfloat_precision = 1\n", encoding="utf-8"
    )
    result = run_cli(["render", "{:e}", "1234.5"])
    assert_SUCCESS(result)
    assert result.output == "1.2e+03\n"


def test_render_no_newline(isolation: Path) -> None:
    result = run_cli(["render", "-N", "{}", "x"])
    assert_SUCCESS(result)
    assert result.output == "x"


def test_render_style_with_color(isolation: Path) -> None:
    result = run_cli(["--color", "always", "render", "--style", "bold", "--style", "red", "{}", "x"])
    assert_SUCCESS(result)
    assert result.output == "\x1b[1;31mx\x1b[0m\n"


def test_render_style_without_color(isolation: Path) -> None:
    result = run_cli(["--no-color", "render", "--style", "bold", "{}", "x"])
    assert_SUCCESS(result)
    assert result.output == "x\n"


def test_render_unknown_style(isolation: Path) -> None:
    result = run_cli(["--no-color", "render", "--style", "sparkly", "{}", "x"])
    assert_USAGE_ERROR(result)
    assert "unknown terminal style" in result.output


def test_render_malformed_format(isolation: Path) -> None:
    result = run_cli(["--no-color", "render", "{0:5q}", "1"])
    assert_FORMAT_ERROR(result)
    assert "at offset 4" in result.output
    assert "    {0:5q}" in result.output


def test_render_inapplicable_type(isolation: Path) -> None:
    result = run_cli(["--no-color", "render", "{:d}", "abc"])
    assert_FORMAT_ERROR(result)


def test_render_missing_argument(isolation: Path) -> None:
    result = run_cli(["--no-color", "render", "{5}", "a", "b"])
    assert_USAGE_ERROR(result)
    assert "out of bounds" in result.output


def test_render_missing_named_argument(isolation: Path) -> None:
    result = run_cli(["--no-color", "render", "{who}"])
    assert_USAGE_ERROR(result)
    assert "who" in result.output


def test_render_bad_typed_token(isolation: Path) -> None:
    result = run_cli(["--no-color", "render", "{}", "int:abc"])
    assert_USAGE_ERROR(result)
    assert "Invalid argument 'int:abc'" in result.output


def test_render_bad_named_option(isolation: Path) -> None:
    result = run_cli(["render", "{}", "-n", "novalue"])
    assert result.exit_code == 2
    assert "KEY=VALUE" in result.output
