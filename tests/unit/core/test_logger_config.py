from __future__ import annotations

"""
Unit tests for the Logger configuration API.

Verifies:
1. Level flags and rejection of unknown names.
2. Log file path validation (empty parts, embedded separators).
3. Rolling preconditions, interval validation and small-interval warnings
   stamped with the logger's clock.
4. Chaining returns the same instance.
"""

import io
from typing import Callable

import pytest

from rotalog.core.formatter import stamp
from rotalog.core.logger import Logger
from rotalog.domain.constants import MIN_SIZE_INTERVAL, MIN_TIME_INTERVAL, Level, Rolling
from rotalog.domain.errors import ConfigurationError


@pytest.mark.parametrize("flag,level", [
    ("debug", Level.DEBUG),
    ("info", Level.INFO),
    ("warn", Level.WARN),
    ("error", Level.ERROR),
])
def test_set_level_accepts_known_flags(make_logger: Callable[..., Logger], flag: str, level: Level) -> None:
    lg = make_logger()
    assert lg.set_level(flag) is lg
    assert lg.level == level


@pytest.mark.parametrize("flag", ["DEBUG", "warning", "", "fatal"])
def test_set_level_rejects_unknown_flags(make_logger: Callable[..., Logger], flag: str) -> None:
    lg = make_logger()
    with pytest.raises(ConfigurationError, match="not support"):
        lg.set_level(flag)
    assert lg.level == Level.INFO


def test_default_logger_state(make_logger: Callable[..., Logger]) -> None:
    lg = make_logger()

    assert lg.level == Level.INFO
    assert lg.rolling_mode == Rolling.NONE
    assert lg.current_path is None


@pytest.mark.parametrize("path", ["", "   ", "logs/"])
def test_set_log_file_rejects_empty_components(make_logger: Callable[..., Logger], path: str) -> None:
    with pytest.raises(ConfigurationError):
        make_logger().set_log_file(path)


@pytest.mark.parametrize("path", ["logs/evil\\name.log", "logs/.."])
def test_set_log_file_rejects_separator_in_name(make_logger: Callable[..., Logger], path: str) -> None:
    with pytest.raises(ConfigurationError, match="invalid path"):
        make_logger().set_log_file(path)


def test_set_log_file_does_not_open_eagerly(make_logger: Callable[..., Logger], tmp_path) -> None:
    target = tmp_path / "lazy" / "app.log"
    lg = make_logger().set_log_file(str(target))

    assert not target.parent.exists()
    assert lg.current_path is None


def test_rolling_requires_log_file(make_logger: Callable[..., Logger]) -> None:
    with pytest.raises(ConfigurationError, match="set log file first"):
        make_logger().set_rolling("size", MIN_SIZE_INTERVAL)


@pytest.mark.parametrize("flag", ["time", "size"])
@pytest.mark.parametrize("interval", [0, -5])
def test_rolling_rejects_non_positive_interval(
        make_logger: Callable[..., Logger], tmp_path, flag: str, interval: int
) -> None:
    lg = make_logger().set_log_file(str(tmp_path / "app.log"))
    with pytest.raises(ConfigurationError, match="invalid interval"):
        lg.set_rolling(flag, interval)


def test_unknown_rolling_flag_means_none(make_logger: Callable[..., Logger], tmp_path) -> None:
    lg = make_logger().set_log_file(str(tmp_path / "app.log")).set_rolling("daily", 0)
    assert lg.rolling_mode == Rolling.NONE


@pytest.mark.parametrize("flag,interval,mode,warning", [
    ("time", MIN_TIME_INTERVAL - 1, Rolling.TIME, "time rolling interval too small"),
    ("size", MIN_SIZE_INTERVAL - 1, Rolling.SIZE, "size rolling interval too small"),
])
def test_small_interval_warns_but_applies(
        make_logger: Callable[..., Logger],
        stdout_buffer: io.StringIO,
        tmp_path,
        flag: str,
        interval: int,
        mode: Rolling,
        warning: str,
) -> None:
    lg = make_logger().set_log_file(str(tmp_path / "app.log")).set_rolling(flag, interval)

    assert lg.rolling_mode == mode
    assert lg.interval == interval
    out = stdout_buffer.getvalue()
    assert "[Warn|" in out
    assert warning in out


def test_small_interval_warning_uses_logger_clock(
        make_logger: Callable[..., Logger], stdout_buffer: io.StringIO, clock, tmp_path
) -> None:
    clock.advance(3 * 3600)
    make_logger().set_log_file(str(tmp_path / "app.log")).set_rolling("size", MIN_SIZE_INTERVAL - 1)

    day, hms = stamp(clock.now)
    assert stdout_buffer.getvalue() == f"\x1b[33;3m[Warn|{day}|{hms}]size rolling interval too small\x1b[0m\n"


def test_recommended_interval_is_silent(
        make_logger: Callable[..., Logger], stdout_buffer: io.StringIO, tmp_path
) -> None:
    make_logger().set_log_file(str(tmp_path / "app.log")).set_rolling("time", MIN_TIME_INTERVAL)
    assert stdout_buffer.getvalue() == ""


def test_configuration_chains(make_logger: Callable[..., Logger], tmp_path) -> None:
    lg = make_logger()
    chained = lg.set_level("debug").set_log_file(str(tmp_path / "app.log")).set_rolling("size", MIN_SIZE_INTERVAL)

    assert chained is lg
    assert lg.level == Level.DEBUG
    assert lg.rolling_mode == Rolling.SIZE
    assert lg.interval == MIN_SIZE_INTERVAL
