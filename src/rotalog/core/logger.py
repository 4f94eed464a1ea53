from __future__ import annotations

"""
Logger Facade.

Holds the configuration of one logger (threshold, file path, rolling
mode) and routes level-gated emit calls through the formatter, the
rotation policy and the target manager.

A single lock covers the lazy first open, the rotation check, the byte
counter update and the write, so concurrent writers can neither rotate
twice nor lose a rotation.
"""

import logging
import os
import sys
import threading
import time
from typing import Any, Callable, NoReturn, Optional, TextIO, Tuple

from rotalog.core.caller import CallSite, resolve_caller
from rotalog.core.formatter import print_notice, red, render_line, yellow
from rotalog.core.rotation import RotationPolicy
from rotalog.core.target import TargetManager
from rotalog.domain.constants import (
    DEFAULT_LEVEL,
    LEVEL_FLAGS,
    MIN_SIZE_INTERVAL,
    MIN_TIME_INTERVAL,
    ROLLING_FLAGS,
    Level,
    Rolling,
)
from rotalog.domain.errors import ConfigurationError, TargetError
from rotalog.infra.fs import has_separator, split_log_path

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class Logger:
    """
    Leveled logger writing to standard output or a (rolling) file.

    Configuration methods return the instance so they can be chained:

        Logger().set_level("debug").set_log_file("./tmp/app.log").set_rolling("size", 10 * KB)

    The file is opened lazily by the first write after any configuration
    change.
    """

    def __init__(
            self,
            level: Level = DEFAULT_LEVEL,
            *,
            clock: Optional[Clock] = None,
            stdout: Optional[TextIO] = None,
    ) -> None:
        """
        Args:
            level: Initial severity threshold.
            clock: Source of Unix timestamps; defaults to time.time.
            stdout: Stream used when no file is configured and for the
                logger's own notices; defaults to sys.stdout at write time.
        """
        self._level = level
        self._clock: Clock = clock or time.time
        self._lock = threading.Lock()
        self._target = TargetManager(stdout, self._clock)
        self._policy = RotationPolicy()
        self._initialized = False

    # -------------------------------------------------------------------------
    # CONFIGURATION API
    # -------------------------------------------------------------------------

    def set_level(self, flag: str) -> Logger:
        """
        Set the severity threshold from its name.

        Raises:
            ConfigurationError: If the name is not debug, info, warn or error.
        """
        level = LEVEL_FLAGS.get(flag)
        if level is None:
            raise ConfigurationError(f"log flag {flag} not support(debug,info,warn,error)")
        with self._lock:
            self._level = level
        return self

    def set_log_file(self, path: str) -> Logger:
        """
        Direct output to a file. The file itself is opened by the next write.

        Raises:
            ConfigurationError: If the directory or file name is empty, or
                the file name embeds a path separator.
        """
        directory, base, ext = split_log_path(path)
        if not directory or not base:
            raise ConfigurationError(f"invalid log file: {path!r}")
        if has_separator(base + ext) or base + ext in (".", ".."):
            raise ConfigurationError(f"invalid path: {path!r}")

        with self._lock:
            self._target.set_path(directory, base, ext)
            self._initialized = False
        logger.debug(f"Log file set to dir={directory} base={base} ext={ext}")
        return self

    def set_rolling(self, flag: str, interval: int) -> Logger:
        """
        Enable rotation of the log file.

        Args:
            flag: "time" or "size"; any other value disables rolling.
            interval: Seconds for time rolling, bytes for size rolling.

        Raises:
            ConfigurationError: If no log file is set, or a rolling mode is
                requested with a non-positive interval.
        """
        if not self._target.has_file:
            raise ConfigurationError("please set log file first")

        mode = ROLLING_FLAGS.get(flag, Rolling.NONE)
        if mode != Rolling.NONE and interval <= 0:
            raise ConfigurationError("invalid interval value")

        if mode == Rolling.TIME and interval < MIN_TIME_INTERVAL:
            print_notice("Warn", "time rolling interval too small", yellow, self._target.stdout, self._clock())
        elif mode == Rolling.SIZE and interval < MIN_SIZE_INTERVAL:
            print_notice("Warn", "size rolling interval too small", yellow, self._target.stdout, self._clock())

        with self._lock:
            self._policy.configure(mode, int(interval))
            self._initialized = False
        logger.debug(f"Rolling set to {mode.name.lower()} every {interval}")
        return self

    @property
    def level(self) -> Level:
        return self._level

    @property
    def rolling_mode(self) -> Rolling:
        return self._policy.mode

    @property
    def interval(self) -> int:
        return self._policy.interval

    @property
    def current_path(self) -> Optional[str]:
        """Path of the open log file, or None while writing to stdout."""
        return self._target.current_path

    def close(self) -> None:
        """Close the log file. The next write reopens a target."""
        with self._lock:
            self._target.close()
            self._initialized = False

    # -------------------------------------------------------------------------
    # EMIT API
    # -------------------------------------------------------------------------

    def debug(self, *args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
        if Level.DEBUG < self._level:
            return
        self._log(Level.DEBUG, _concat(args), True, callsite, stacklevel)

    def debugf(self, format: str, *args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
        if Level.DEBUG < self._level:
            return
        self._log(Level.DEBUG, _sprintf(format, args), False, callsite, stacklevel)

    def info(self, *args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
        if Level.INFO < self._level:
            return
        self._log(Level.INFO, _concat(args), True, callsite, stacklevel)

    def infof(self, format: str, *args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
        if Level.INFO < self._level:
            return
        self._log(Level.INFO, _sprintf(format, args), False, callsite, stacklevel)

    def warn(self, *args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
        if Level.WARN < self._level:
            return
        self._log(Level.WARN, _concat(args), True, callsite, stacklevel)

    def warnf(self, format: str, *args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
        if Level.WARN < self._level:
            return
        self._log(Level.WARN, _sprintf(format, args), False, callsite, stacklevel)

    def error(self, *args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
        if Level.ERROR < self._level:
            return
        self._log(Level.ERROR, _concat(args), True, callsite, stacklevel)

    def errorf(self, format: str, *args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
        if Level.ERROR < self._level:
            return
        self._log(Level.ERROR, _sprintf(format, args), False, callsite, stacklevel)

    def fatal(self, *args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> NoReturn:
        """Write at error severity regardless of the threshold, then exit with status 1."""
        try:
            self._log(Level.ERROR, _concat(args), True, callsite, stacklevel)
        finally:
            _terminate(1)

    def fatalf(self, format: str, *args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> NoReturn:
        """Formatted variant of fatal; no newline is appended."""
        try:
            self._log(Level.ERROR, _sprintf(format, args), False, callsite, stacklevel)
        finally:
            _terminate(1)

    # -------------------------------------------------------------------------
    # WRITE PATH
    # -------------------------------------------------------------------------

    def _log(
            self,
            level: Level,
            message: str,
            line_feed: bool,
            callsite: Optional[CallSite],
            stacklevel: int,
    ) -> None:
        site = callsite if callsite is not None else resolve_caller(stacklevel)
        now = self._clock()
        self._output(render_line(level, message, site, now, line_feed), now)

    def _output(self, line: str, now: float) -> None:
        with self._lock:
            try:
                if not self._initialized:
                    self._reopen(now)
                elif self._policy.should_rotate(now):
                    self._reopen(now)
                    logger.debug(f"Rotated log target to {self._target.current_path}")
            except TargetError as e:
                self._target_failed(e, now)
                raise
            self._policy.account(len(line.encode("utf-8")))
            self._target.write(line)

    def _reopen(self, now: float) -> None:
        self._target.open(self._policy.active)
        self._policy.reset(now)
        self._initialized = True

    def _target_failed(self, error: TargetError, now: float) -> None:
        """
        Report an unusable log target on stdout.

        The main thread gets the exception back. Any other thread would
        only lose itself to it, so the whole process is terminated.
        """
        print_notice("Error", str(error), red, self._target.stdout, now)
        if not _on_main_thread():
            logger.debug(f"Log target failed off the main thread: {error}")
            _terminate(1)


# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _concat(args: Tuple[Any, ...]) -> str:
    return "".join(str(a) for a in args)


def _sprintf(format: str, args: Tuple[Any, ...]) -> str:
    # A bare format string is used verbatim so literal '%' needs no escaping
    if not args:
        return format
    try:
        return format % args
    except (TypeError, ValueError):
        # Mismatched arguments are appended raw
        return f"{format} {args!r}"


def _terminate(status: int) -> NoReturn:
    """
    Terminate the whole process.

    On the main thread SystemExit unwinds normally; from a worker thread
    it would only end that thread, so the process is exited directly.
    """
    if _on_main_thread():
        raise SystemExit(status)
    sys.stdout.flush()
    os._exit(status)


def _on_main_thread() -> bool:
    return threading.current_thread() is threading.main_thread()
