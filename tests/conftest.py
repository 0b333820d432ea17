# topmark:header:start
#
#   project      : Plume
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Pytest configuration for the Plume test suite.

Sets up global fixtures and TRACE-level logging for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `plume.config.MutableConfig`, then `freeze()` them into a
    `plume.config.Config`. Never mutate a frozen `Config`; call `Config.thaw()`
    and freeze again instead.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from plume.config import MutableConfig
from plume.config import logging as plume_logging
from plume.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from plume.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_plume_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via the environment during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove the environment variable.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    plume_logging.setup_logging(level=plume_logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an empty project directory.

    Config discovery walks upward from the working directory; the directory
    gets a ``plume.toml`` with ``root = true`` so files above ``tmp_path`` never
    leak into the test.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "plume.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from the defaults and ``overrides``.

    Args:
        **overrides (Any): ``[format]`` settings such as ``float_precision=2``.

    Returns:
        Config: The frozen config.
    """
    return MutableConfig.from_defaults().apply_cli_args(overrides).freeze()
