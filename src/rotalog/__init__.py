from __future__ import annotations

"""
rotalog: leveled logging to stdout or rolling files.

    import rotalog

    rotalog.log().set_level("debug").set_log_file("./tmp/app.log").set_rolling("size", 10 * rotalog.MB)
    rotalog.info("service started on port ", 8080)
    rotalog.infof("%d workers ready\\n", 4)
"""

import logging

from rotalog.core.caller import CallSite
from rotalog.core.default import (
    debug,
    debugf,
    error,
    errorf,
    fatal,
    fatalf,
    info,
    infof,
    log,
    set_default,
    warn,
    warnf,
)
from rotalog.core.logger import Logger
from rotalog.domain.config import LoggerSettings, apply_settings
from rotalog.domain.constants import (
    KB,
    MB,
    MIN_SIZE_INTERVAL,
    MIN_TIME_INTERVAL,
    MINUTE,
    SECOND,
    Level,
    Rolling,
)
from rotalog.domain.errors import ConfigurationError, RotalogError, TargetError
from rotalog.infra.logging import RotalogHandler

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CallSite",
    "ConfigurationError",
    "KB",
    "Level",
    "Logger",
    "LoggerSettings",
    "MB",
    "MIN_SIZE_INTERVAL",
    "MIN_TIME_INTERVAL",
    "MINUTE",
    "Rolling",
    "RotalogError",
    "RotalogHandler",
    "SECOND",
    "TargetError",
    "apply_settings",
    "debug",
    "debugf",
    "error",
    "errorf",
    "fatal",
    "fatalf",
    "info",
    "infof",
    "log",
    "set_default",
    "warn",
    "warnf",
]
