from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Handler tagging lets the diagnostics setup tell its own handlers apart
from ones installed by the host application. RotalogHandler bridges the
stdlib `logging` module into a rotalog Logger so existing `logging`
call sites can share the same rolling files.
"""

import logging
from typing import Any, Optional

from rotalog.core.caller import CallSite
from rotalog.domain.constants import Level
from rotalog.infra.logging.config import DIAGNOSTICS_LOGGER, to_rotalog_level

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_rotalog_handler"


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """
    Mark a handler as managed by rotalog.

    Args:
        handler: The logging handler instance to tag.
    """
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """
    Verify if a handler was installed by rotalog.

    Args:
        handler: The handler to inspect.

    Returns:
        bool: True if the handler carries our internal tag.
    """
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


# ==============================================================================
# STDLIB BRIDGE
# ==============================================================================

class RotalogHandler(logging.Handler):
    """
    Forward stdlib log records to a rotalog Logger.

    Each record becomes one newline-terminated line at the mapped severity
    (DEBUG, INFO, WARNING, ERROR/CRITICAL), attributed to the record's own
    file and line. Records from rotalog's diagnostics are dropped so the
    logger never feeds into itself.
    """

    def __init__(self, target: Any = None, level: int = logging.NOTSET) -> None:
        """
        Args:
            target: rotalog Logger to write to; None means the process-wide
                default, looked up on each record.
            level: Handler threshold in stdlib terms.
        """
        super().__init__(level)
        self._target = target
        _tag_handler(self)

    @property
    def target(self) -> Any:
        if self._target is not None:
            return self._target
        from rotalog.core.default import log
        return log()

    def emit(self, record: logging.LogRecord) -> None:
        if _is_diagnostic(record):
            return
        try:
            message = self.format(record)
            site = CallSite(record.pathname, record.lineno)
            _EMITTERS[to_rotalog_level(record.levelno)](self.target, message, site)
        except Exception:
            self.handleError(record)


def _is_diagnostic(record: logging.LogRecord) -> bool:
    name: Optional[str] = record.name
    return bool(name) and (name == DIAGNOSTICS_LOGGER or name.startswith(DIAGNOSTICS_LOGGER + "."))


_EMITTERS = {
    Level.DEBUG: lambda t, m, s: t.debug(m, callsite=s),
    Level.INFO: lambda t, m, s: t.info(m, callsite=s),
    Level.WARN: lambda t, m, s: t.warn(m, callsite=s),
    Level.ERROR: lambda t, m, s: t.error(m, callsite=s),
}
