from __future__ import annotations

"""
Domain Constants.

Severity levels, rolling modes, the textual flags accepted by the
configuration API and the size/time units used for rolling intervals.
"""

from enum import IntEnum
from typing import Dict


class Level(IntEnum):
    """Message severity. Ordering is significant for threshold checks."""
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


class Rolling(IntEnum):
    """Rotation mode of the file target."""
    NONE = 0
    TIME = 1
    SIZE = 2


# -----------------------------------------------------------------------------
# CONFIGURATION FLAGS
# -----------------------------------------------------------------------------
DEBUG_FLAG = "debug"
INFO_FLAG = "info"
WARN_FLAG = "warn"
ERROR_FLAG = "error"

TIME_FLAG = "time"
SIZE_FLAG = "size"

LEVEL_FLAGS: Dict[str, Level] = {
    DEBUG_FLAG: Level.DEBUG,
    INFO_FLAG: Level.INFO,
    WARN_FLAG: Level.WARN,
    ERROR_FLAG: Level.ERROR,
}

ROLLING_FLAGS: Dict[str, Rolling] = {
    TIME_FLAG: Rolling.TIME,
    SIZE_FLAG: Rolling.SIZE,
}

# -----------------------------------------------------------------------------
# UNITS
# -----------------------------------------------------------------------------
KB = 1024
MB = KB * 1024
MIN_SIZE_INTERVAL = 10 * KB

SECOND = 1
MINUTE = 60 * SECOND
MIN_TIME_INTERVAL = 10 * SECOND

DEFAULT_LEVEL = Level.INFO
