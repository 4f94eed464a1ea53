from __future__ import annotations

"""
Process-Wide Default Logger.

A default-configured Logger (info level, stdout, no rolling) exists from
import time and backs the module-level emit functions. Code that wants
isolation should create its own Logger and pass it around; tests can
swap the default with set_default().
"""

import threading
from typing import Any, NoReturn, Optional

from rotalog.core.caller import CallSite
from rotalog.core.logger import Logger

_default = Logger()
_default_lock = threading.Lock()


def log() -> Logger:
    """Return the process-wide default logger."""
    return _default


def set_default(new: Logger) -> Logger:
    """
    Replace the process-wide default logger.

    Returns:
        Logger: The previous default, so callers can restore it.
    """
    global _default
    with _default_lock:
        previous = _default
        _default = new
    return previous

# -----------------------------------------------------------------------------
# MODULE-LEVEL EMIT FUNCTIONS
# -----------------------------------------------------------------------------

def debug(*args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
    _default.debug(*args, callsite=callsite, stacklevel=stacklevel + 1)


def debugf(format: str, *args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
    _default.debugf(format, *args, callsite=callsite, stacklevel=stacklevel + 1)


def info(*args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
    _default.info(*args, callsite=callsite, stacklevel=stacklevel + 1)


def infof(format: str, *args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
    _default.infof(format, *args, callsite=callsite, stacklevel=stacklevel + 1)


def warn(*args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
    _default.warn(*args, callsite=callsite, stacklevel=stacklevel + 1)


def warnf(format: str, *args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
    _default.warnf(format, *args, callsite=callsite, stacklevel=stacklevel + 1)


def error(*args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
    _default.error(*args, callsite=callsite, stacklevel=stacklevel + 1)


def errorf(format: str, *args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> None:
    _default.errorf(format, *args, callsite=callsite, stacklevel=stacklevel + 1)


def fatal(*args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> NoReturn:
    _default.fatal(*args, callsite=callsite, stacklevel=stacklevel + 1)


def fatalf(format: str, *args: Any, callsite: Optional[CallSite] = None, stacklevel: int = 1) -> NoReturn:
    _default.fatalf(format, *args, callsite=callsite, stacklevel=stacklevel + 1)
