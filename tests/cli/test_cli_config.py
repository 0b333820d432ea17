# topmark:header:start
#
#   project      : Plume
#   file         : test_cli_config.py
#   file_relpath : tests/cli/test_cli_config.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""CLI tests: `config` command output and configuration layering."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import tomlkit

from plume.constants import DEFAULT_FLOAT_PRECISION, DEFAULT_TEMPLATE_CACHE_SIZE
from tests.cli.conftest import assert_CONFIG_ERROR, assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def _format_table(output: str) -> dict[str, object]:
    doc = tomlkit.parse(output).unwrap()
    return doc["format"]


def test_config_defaults(isolation: Path) -> None:
    result = run_cli(["--no-color", "config"])
    assert_SUCCESS(result)
    assert _format_table(result.output) == {
        "float_precision": DEFAULT_FLOAT_PRECISION,
        "template_cache_size": DEFAULT_TEMPLATE_CACHE_SIZE,
    }


def test_config_discovered_file(isolation: Path) -> None:
    (isolation / "plume.toml").write_text(
        "root = true\n[format]\nfloat_precision = 3\n", encoding="utf-8"
    )
    result = run_cli(["--no-color", "config"])
    assert_SUCCESS(result)
    assert _format_table(result.output)["float_precision"] == 3


def test_config_pyproject_section(isolation: Path) -> None:
    (isolation / "plume.toml").unlink()
    (isolation / "pyproject.toml").write_text(
        "[tool.plume]\nroot = true\n\n[tool.plume.format]\ntemplate_cache_size = 4\n",
        encoding="utf-8",
    )
    result = run_cli(["--no-color", "config"])
    assert_SUCCESS(result)
    assert _format_table(result.output)["template_cache_size"] == 4


def test_config_extra_file_wins(isolation: Path, tmp_path: Path) -> None:
    (isolation / "plume.toml").write_text(
        "root = true\n[format]\nfloat_precision = 3\n", encoding="utf-8"
    )
    extra = tmp_path / "extra.toml"
    extra.write_text("[format]\nfloat_precision = 9\n", encoding="utf-8")
    result = run_cli(["--no-color", "--config", str(extra), "config"])
    assert_SUCCESS(result)
    assert _format_table(result.output)["float_precision"] == 9


def test_config_no_config_skips_discovery(isolation: Path) -> None:
    (isolation / "plume.toml").write_text(
        "root = true\n[format]\nfloat_precision = 3\n", encoding="utf-8"
    )
    result = run_cli(["--no-color", "--no-config", "config"])
    assert_SUCCESS(result)
    assert _format_table(result.output)["float_precision"] == DEFAULT_FLOAT_PRECISION


def test_config_verbose_lists_sources(isolation: Path) -> None:
    result = run_cli(["--no-color", "-v", "config"])
    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert lines[0] == "# source: <defaults>"
    assert any(line.startswith("# source: ") and "plume.toml" in line for line in lines)


def test_config_invalid_value(isolation: Path) -> None:
    (isolation / "plume.toml").write_text(
        "root = true\n[format]\nfloat_precision = -1\n", encoding="utf-8"
    )
    result = run_cli(["--no-color", "config"])
    assert_CONFIG_ERROR(result)
    assert "float_precision" in result.output


def test_config_missing_extra_file(isolation: Path) -> None:
    result = run_cli(["--config", "does-not-exist.toml", "config"])
    assert result.exit_code == 2
