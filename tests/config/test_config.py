# topmark:header:start
#
#   project      : Plume
#   file         : test_config.py
#   file_relpath : tests/config/test_config.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Tests for the Plume configuration model (`plume.config.model`).

Covers defaults, TOML loading (``plume.toml`` and ``[tool.plume]`` in
``pyproject.toml``), upward discovery with ``root = true``, layered merging and
CLI overrides.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from plume.config import Config, MutableConfig
from plume.config.io import load_toml_dict, to_toml
from plume.constants import DEFAULT_FLOAT_PRECISION, DEFAULT_TEMPLATE_CACHE_SIZE


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    cfg: Config = MutableConfig.from_defaults().freeze()
    assert cfg.float_precision == DEFAULT_FLOAT_PRECISION
    assert cfg.template_cache_size == DEFAULT_TEMPLATE_CACHE_SIZE
    assert cfg.config_files == ("<defaults>",)


def test_empty_builder_freezes_to_defaults() -> None:
    cfg = MutableConfig().freeze()
    assert cfg.float_precision == DEFAULT_FLOAT_PRECISION
    assert cfg.config_files == ()


def test_from_toml_dict_reads_format_section() -> None:
    draft = MutableConfig.from_toml_dict(
        {"format": {"float_precision": 3, "template_cache_size": 0}}, config_file="mem"
    )
    assert draft.float_precision == 3
    assert draft.template_cache_size == 0
    assert draft.config_files == ["mem"]


@pytest.mark.parametrize("bad", ["3", True, 2.5, [1]])
def test_from_toml_dict_ignores_wrong_types(bad: object) -> None:
    draft = MutableConfig.from_toml_dict({"format": {"float_precision": bad}})
    assert draft.float_precision is None


def test_from_toml_dict_ignores_unknown_keys() -> None:
    draft = MutableConfig.from_toml_dict({"format": {"colour": "red"}, "other": {}})
    assert draft.float_precision is None
    assert draft.template_cache_size is None


def test_freeze_rejects_negative_values() -> None:
    with pytest.raises(ValueError, match="float_precision"):
        MutableConfig(float_precision=-1).freeze()
    with pytest.raises(ValueError, match="template_cache_size"):
        MutableConfig(template_cache_size=-5).freeze()


def test_thaw_round_trip() -> None:
    cfg = MutableConfig(float_precision=2, config_files=["a"]).freeze()
    draft = cfg.thaw()
    draft.float_precision = 9
    assert cfg.float_precision == 2
    assert draft.freeze().float_precision == 9
    assert draft.config_files == ["a"]


def test_to_toml_dict_round_trips_through_tomlkit(tmp_path: Path) -> None:
    cfg = MutableConfig(float_precision=4, template_cache_size=16).freeze()
    path = _write(tmp_path / "plume.toml", to_toml(cfg.to_toml_dict()))
    assert load_toml_dict(path) == {"format": {"float_precision": 4, "template_cache_size": 16}}


def test_from_plume_toml(tmp_path: Path) -> None:
    path = _write(tmp_path / "plume.toml", "[format]\nfloat_precision = 2\n")
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.float_precision == 2
    assert draft.config_files == [path]


def test_from_pyproject_tool_section(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "demo"\n\n[tool.plume.format]\ntemplate_cache_size = 8\n',
    )
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.template_cache_size == 8


def test_pyproject_without_section_is_skipped(tmp_path: Path) -> None:
    path = _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')
    assert MutableConfig.from_toml_file(path) is None


def test_malformed_toml_loads_as_empty(tmp_path: Path) -> None:
    path = _write(tmp_path / "plume.toml", "[format\nfloat_precision = \n")
    assert load_toml_dict(path) == {}
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.float_precision is None


def test_discovery_walks_upward_root_most_first(tmp_path: Path) -> None:
    top = _write(tmp_path / "plume.toml", "root = true\n[format]\nfloat_precision = 1\n")
    mid = _write(tmp_path / "a" / "plume.toml", "[format]\nfloat_precision = 2\n")
    leaf = tmp_path / "a" / "b"
    leaf.mkdir()

    found = MutableConfig.discover_config_files(leaf)
    assert found == [top.resolve(), mid.resolve()]


def test_discovery_stops_at_root_marker(tmp_path: Path) -> None:
    _write(tmp_path / "plume.toml", "[format]\nfloat_precision = 1\n")
    inner = _write(tmp_path / "a" / "plume.toml", "root = true\n")
    assert MutableConfig.discover_config_files(inner.parent) == [inner.resolve()]


def test_discovery_orders_pyproject_before_plume_toml(tmp_path: Path) -> None:
    pyproject = _write(
        tmp_path / "pyproject.toml", "[tool.plume]\nroot = true\n[tool.plume.format]\n"
    )
    plume = _write(tmp_path / "plume.toml", "[format]\nfloat_precision = 7\n")
    found = MutableConfig.discover_config_files(tmp_path)
    assert found == [pyproject.resolve(), plume.resolve()]


def test_discovery_ignores_pyproject_without_section(tmp_path: Path) -> None:
    _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    plume = _write(tmp_path / "plume.toml", "root = true\n")
    assert MutableConfig.discover_config_files(tmp_path) == [plume.resolve()]


def test_discovery_from_a_file_uses_its_directory(tmp_path: Path) -> None:
    plume = _write(tmp_path / "plume.toml", "root = true\n")
    some_file = _write(tmp_path / "notes.txt", "")
    assert MutableConfig.discover_config_files(some_file) == [plume.resolve()]


def test_load_merged_nearest_file_wins(tmp_path: Path) -> None:
    _write(tmp_path / "plume.toml", "root = true\n[format]\nfloat_precision = 1\n")
    _write(tmp_path / "sub" / "plume.toml", "[format]\nfloat_precision = 3\n")
    cfg = MutableConfig.load_merged(start=tmp_path / "sub").freeze()
    assert cfg.float_precision == 3
    assert cfg.template_cache_size == DEFAULT_TEMPLATE_CACHE_SIZE
    assert cfg.config_files[0] == "<defaults>"
    assert len(cfg.config_files) == 3


def test_load_merged_extra_files_apply_last(tmp_path: Path) -> None:
    _write(tmp_path / "plume.toml", "root = true\n[format]\nfloat_precision = 1\n")
    extra = _write(tmp_path / "elsewhere" / "custom.toml", "[format]\nfloat_precision = 5\n")
    cfg = MutableConfig.load_merged(start=tmp_path, extra_files=[extra]).freeze()
    assert cfg.float_precision == 5
    assert cfg.config_files[-1] == extra


def test_load_merged_no_config_skips_discovery(tmp_path: Path) -> None:
    _write(tmp_path / "plume.toml", "root = true\n[format]\nfloat_precision = 1\n")
    cfg = MutableConfig.load_merged(start=tmp_path, no_config=True).freeze()
    assert cfg.float_precision == DEFAULT_FLOAT_PRECISION
    assert cfg.config_files == ("<defaults>",)


def test_merge_with_prefers_configured_values() -> None:
    base = MutableConfig(float_precision=1, template_cache_size=10, config_files=["a"])
    over = MutableConfig(float_precision=4, config_files=["b"])
    merged = base.merge_with(over)
    assert merged.float_precision == 4
    assert merged.template_cache_size == 10
    assert merged.config_files == ["a", "b"]
    # inputs are untouched
    assert base.float_precision == 1


def test_apply_cli_args_ignores_none() -> None:
    draft = MutableConfig(float_precision=3)
    result = draft.apply_cli_args({"float_precision": None, "template_cache_size": 0})
    assert result is draft
    assert draft.float_precision == 3
    assert draft.template_cache_size == 0
