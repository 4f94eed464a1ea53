from __future__ import annotations

"""
Logger Settings.

Declarative description of a logger configuration, loadable from the
environment and applied through the Logger's chainable API so the same
validation rules hold regardless of where the values come from.
"""

import logging
import os
import re
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from rotalog.domain.constants import (
    INFO_FLAG,
    KB,
    MB,
    MINUTE,
    SECOND,
    SIZE_FLAG,
    TIME_FLAG,
)
from rotalog.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
ENV_LEVEL = "ROTALOG_LEVEL"
ENV_FILE = "ROTALOG_FILE"
ENV_ROLLING = "ROTALOG_ROLLING"
ENV_INTERVAL = "ROTALOG_INTERVAL"

_INTERVAL_RE = re.compile(r"^\s*(\d+)\s*([a-zA-Z]*)\s*$")

_SIZE_UNITS: Dict[str, int] = {"": 1, "b": 1, "k": KB, "kb": KB, "m": MB, "mb": MB}
_TIME_UNITS: Dict[str, int] = {"": SECOND, "s": SECOND, "m": MINUTE, "h": 60 * MINUTE}
_FIELDS = ("level", "log_file", "rolling", "interval")


@dataclass(frozen=True)
class LoggerSettings:
    """
    Immutable logger configuration.

    Attributes:
        level: Threshold name (debug, info, warn, error).
        log_file: Target file path; None keeps output on stdout.
        rolling: "time", "size" or None.
        interval: Rolling interval in seconds or bytes.
    """
    level: str = INFO_FLAG
    log_file: Optional[str] = None
    rolling: Optional[str] = None
    interval: int = 0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> LoggerSettings:
        """
        Build settings from ROTALOG_* environment variables.

        Unset variables keep their defaults. ROTALOG_INTERVAL accepts unit
        suffixes interpreted according to ROTALOG_ROLLING.

        Raises:
            ConfigurationError: If the interval cannot be parsed.
        """
        env = os.environ if environ is None else environ
        rolling = (env.get(ENV_ROLLING) or "").strip().lower() or None
        raw_interval = (env.get(ENV_INTERVAL) or "").strip()

        return cls(
            level=(env.get(ENV_LEVEL) or INFO_FLAG).strip().lower(),
            log_file=(env.get(ENV_FILE) or "").strip() or None,
            rolling=rolling,
            interval=parse_interval(raw_interval, rolling) if raw_interval else 0,
        )

    def merged(self, overrides: Dict[str, Any]) -> LoggerSettings:
        """Return a copy with every non-None override applied."""
        known = {k: v for k, v in overrides.items() if v is not None and k in _FIELDS}
        return replace(self, **known)


def parse_interval(value: Any, rolling: Optional[str]) -> int:
    """
    Convert an interval such as "10K", "1MB", "30s" or "5m" to an integer.

    Suffixes are read as sizes for size rolling and as durations for time
    rolling; a bare number is taken as bytes or seconds.

    Raises:
        ConfigurationError: If the value is malformed or the unit unknown.
    """
    if isinstance(value, int):
        return value

    match = _INTERVAL_RE.match(str(value))
    if not match:
        raise ConfigurationError(f"invalid interval value: {value!r}")

    number, unit = int(match.group(1)), match.group(2).lower()
    units = _TIME_UNITS if rolling == TIME_FLAG else _SIZE_UNITS
    if unit not in units:
        raise ConfigurationError(f"unknown interval unit {unit!r} for {rolling or SIZE_FLAG} rolling")
    return number * units[unit]


def apply_settings(target: Any, settings: LoggerSettings) -> Any:
    """
    Configure a Logger from settings through its public API.

    Args:
        target: Logger instance to configure.
        settings: Values to apply.

    Returns:
        The same logger, for chaining.

    Raises:
        ConfigurationError: Propagated from the logger's validation.
    """
    target.set_level(settings.level)
    if settings.log_file:
        target.set_log_file(settings.log_file)
        if settings.rolling:
            target.set_rolling(settings.rolling, settings.interval)
    elif settings.rolling:
        raise ConfigurationError("please set log file first")

    logger.debug(f"Applied settings: {settings}")
    return target
