# topmark:header:start
#
#   project      : Plume
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Tests for Plume logging helpers."""

from __future__ import annotations

import logging

import pytest

from plume.config.logging import (
    TRACE_LEVEL,
    PlumeLogger,
    get_logger,
    resolve_env_log_level,
)
from plume.constants import LOG_LEVEL_ENV_VAR
from tests.conftest import parametrize


@parametrize(
    "raw, expected",
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("20", 20),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


def test_trace_level_is_registered() -> None:
    assert TRACE_LEVEL < logging.DEBUG
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_get_logger_returns_plume_logger() -> None:
    logger = get_logger("plume.tests.logging")
    assert isinstance(logger, PlumeLogger)


def test_trace_records_are_emitted_when_enabled(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("plume.tests.trace")
    with caplog.at_level(TRACE_LEVEL, logger="plume.tests.trace"):
        logger.trace("compiled %d placeholder(s)", 3)
    assert "compiled 3 placeholder(s)" in caplog.text
    assert caplog.records[-1].levelno == TRACE_LEVEL
