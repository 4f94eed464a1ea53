from __future__ import annotations

"""
Rotation Policy Engine.

Decides, on each write, whether the active file must be replaced. There
is no background timer: a threshold crossed while nothing is written is
only acted upon by the next write.

Size mode compares the counter against the interval before the current
line is added, so a file may overshoot the interval by up to one line
and the line that observes the overshoot lands in the new file.
"""

import logging

from rotalog.domain.constants import Rolling

logger = logging.getLogger(__name__)


class RotationPolicy:
    """
    Rolling state of a single logger.

    `state` holds the timestamp of the last rotation in time mode and the
    number of bytes written since the last rotation in size mode.
    """

    def __init__(self, mode: Rolling = Rolling.NONE, interval: int = 0) -> None:
        self.mode = mode
        self.interval = interval
        self.state = 0

    @property
    def active(self) -> bool:
        return self.mode != Rolling.NONE

    def configure(self, mode: Rolling, interval: int) -> None:
        self.mode = mode
        self.interval = interval
        self.state = 0

    def reset(self, now: float) -> None:
        """Restart the rolling window after a target has been (re)opened."""
        if self.mode == Rolling.TIME:
            self.state = int(now)
        elif self.mode == Rolling.SIZE:
            self.state = 0

    def should_rotate(self, now: float) -> bool:
        """Return True if the target must be rotated before the next write."""
        if self.mode == Rolling.TIME:
            due = int(now) >= self.state + self.interval
            if due:
                logger.debug(f"Time window elapsed (last={self.state}, interval={self.interval}s)")
            return due
        if self.mode == Rolling.SIZE:
            due = self.state > self.interval
            if due:
                logger.debug(f"Size threshold exceeded ({self.state} > {self.interval} bytes)")
            return due
        return False

    def account(self, nbytes: int) -> None:
        """Add a written line to the size counter. No-op outside size mode."""
        if self.mode == Rolling.SIZE:
            self.state += nbytes
