from __future__ import annotations

"""
Output Target Manager.

Owns the stream log lines are written to: standard output when no file
is configured, otherwise an open file. Handles collision-free naming of
rolled files, directory creation, the handoff on rotation and the
best-effort reporting of write failures.
"""

import logging
import sys
import time
from typing import Callable, Optional, TextIO

from rotalog.core.formatter import blue, print_notice, red, yellow
from rotalog.domain.errors import TargetError
from rotalog.infra.fs import ensure_parent_dir, is_exist, join_log_path

logger = logging.getLogger(__name__)


class TargetManager:
    """
    Resolves, opens and replaces the output stream of a logger.

    Naming scheme when rolling is active: the first unused path among
    `<dir>/<base><ext>`, `<dir>/<base>_1<ext>`, `<dir>/<base>_2<ext>`, ...
    """

    def __init__(self, stdout: Optional[TextIO] = None, clock: Optional[Callable[[], float]] = None) -> None:
        self._stdout = stdout
        self._clock = clock or time.time
        self._stream: Optional[TextIO] = None
        self.directory = ""
        self.base = ""
        self.ext = ""
        self.current_path: Optional[str] = None

    # -------------------------------------------------------------------------
    # CONFIGURATION
    # -------------------------------------------------------------------------

    @property
    def stdout(self) -> TextIO:
        """Standard output, resolved late so redirections are honoured."""
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def has_file(self) -> bool:
        return bool(self.directory and self.base)

    def set_path(self, directory: str, base: str, ext: str) -> None:
        self.directory = directory
        self.base = base
        self.ext = ext

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    def resolve_path(self, rolling: bool) -> str:
        """
        Pick the file to open next.

        Args:
            rolling: Whether a rolling mode is active. Without rolling the
                configured path is reused even if it already exists.

        Returns:
            str: Path of the file to open.
        """
        path = join_log_path(self.directory, self.base, self.ext)
        if not rolling:
            return path

        counter = 1
        while is_exist(path):
            path = join_log_path(self.directory, self.base, self.ext, counter)
            counter += 1
        return path

    def open(self, rolling: bool) -> None:
        """
        Install a fresh target, closing the previous file if any.

        Raises:
            TargetError: If the directory or the file cannot be created.
        """
        self.close()
        if not self.has_file:
            self._stream = None
            self.current_path = None
            return

        path = self.resolve_path(rolling)
        self._stream = self._open_file(path)
        self.current_path = path
        logger.debug(f"Log target opened at {path}")

    def close(self) -> None:
        """Close the current file target. Standard output is never closed."""
        stream = self._stream
        self._stream = None
        self.current_path = None
        if stream is None:
            return
        try:
            stream.close()
        except OSError as e:
            logger.warning(f"Failed to close log target: {e}")

    def _open_file(self, path: str) -> TextIO:
        if is_exist(path):
            print_notice("Warn", "log file exist, append it", yellow, self.stdout, self._clock())
            mode = "a"
        else:
            try:
                ensure_parent_dir(path)
            except OSError as e:
                raise TargetError(f"initialize log file error: {e}") from e
            mode = "w"

        try:
            return open(path, mode, encoding="utf-8", newline="")
        except OSError as e:
            raise TargetError(f"initialize log file error: {e}") from e

    # -------------------------------------------------------------------------
    # OUTPUT
    # -------------------------------------------------------------------------

    def write(self, line: str) -> None:
        """
        Write one rendered line to the current target.

        Failures are reported on standard output together with the line
        that could not be written; nothing is raised to the caller.
        """
        stream = self._stream if self._stream is not None else self.stdout
        try:
            stream.write(line)
            stream.flush()
        except (OSError, ValueError) as e:
            logger.debug(f"Write to log target failed: {e}")
            now = self._clock()
            print_notice("Error", f"log output error {e}", red, self.stdout, now)
            print_notice("OutPut", line, blue, self.stdout, now)
