# topmark:header:start
#
#   project      : Plume
#   file         : test_colored_enum.py
#   file_relpath : tests/rendering/test_colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 The Plume Authors
#
# topmark:header:end

"""Tests for color-aware enums and ``plume check`` statuses."""

from __future__ import annotations

from plume.ansi import Style
from plume.rendering.colored_enum import ColoredStrEnum
from plume.rendering.status import CheckStatus


class _Verdict(ColoredStrEnum):
    OK = ("ok", Style.of("green"))
    BAD = ("bad", Style.of("bold", "red"))


def test_value_is_plain_text() -> None:
    assert _Verdict.OK.value == "ok"
    assert _Verdict.OK == "ok"
    assert _Verdict("bad") is _Verdict.BAD


def test_styled_toggles_color() -> None:
    assert _Verdict.BAD.styled() == "\x1b[1;31mbad\x1b[0m"
    assert _Verdict.BAD.styled(enabled=False) == "bad"
    assert _Verdict.OK.color("x") == "\x1b[32mx\x1b[0m"


def test_check_status_values() -> None:
    assert CheckStatus.VALID.value == "valid"
    assert CheckStatus.LITERAL.value == "valid, no placeholders"
    assert CheckStatus.INVALID.styled(enabled=False) == "invalid"


def test_only_invalid_is_an_error() -> None:
    assert [s for s in CheckStatus if s.is_error] == [CheckStatus.INVALID]
