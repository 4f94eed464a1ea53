from __future__ import annotations

"""
Diagnostics Logging Orchestrator.

Maintains the idempotent lifecycle of rotalog's own diagnostic channel.
The library is silent by default (NullHandler on the "rotalog" logger);
configure_diagnostics attaches a tagged stderr handler on demand, for
example when the CLI runs with --debug.
"""

import logging
import sys

from rotalog.infra.logging.config import DIAGNOSTICS_LOGGER, _LEVEL_MAP, DiagnosticsConfig
from rotalog.infra.logging.handlers import _is_our_handler, _tag_handler

# Internal state flag for idempotency
_CONFIGURED_FLAG_ATTR: str = "_rotalog_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_diagnostics(cfg: DiagnosticsConfig, *, force: bool = False) -> logging.Logger:
    """
    Execute idempotent configuration of the "rotalog" diagnostics logger.

    Args:
        cfg: Structural configuration for the diagnostics channel.
        force: If True, bypass idempotency checks and re-initialize handlers.

    Returns:
        logging.Logger: The configured diagnostics logger.
    """
    diag = logging.getLogger(DIAGNOSTICS_LOGGER)

    already_configured = bool(getattr(diag, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return diag

    level_int = _parse_level(cfg.level)
    diag.setLevel(level_int)

    # Cleanup existing infrastructure to prevent handler leakage
    _remove_our_handlers(diag)

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level_int)
        sh.setFormatter(logging.Formatter(cfg.fmt))
        _tag_handler(sh)
        diag.addHandler(sh)

    setattr(diag, _CONFIGURED_FLAG_ATTR, True)
    return diag


def reset_diagnostics() -> None:
    """Detach rotalog-managed handlers and clear the configured flag."""
    diag = logging.getLogger(DIAGNOSTICS_LOGGER)
    _remove_our_handlers(diag)
    diag.setLevel(logging.NOTSET)
    if hasattr(diag, _CONFIGURED_FLAG_ATTR):
        delattr(diag, _CONFIGURED_FLAG_ATTR)


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named stdlib logger.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(target: logging.Logger) -> None:
    """Identify and detach all internally-managed handlers."""
    for h in list(target.handlers):
        if _is_our_handler(h):
            target.removeHandler(h)
            h.close()
