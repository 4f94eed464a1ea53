from __future__ import annotations

from .config import DiagnosticsConfig, to_rotalog_level
from .core import (
    _CONFIGURED_FLAG_ATTR,
    configure_diagnostics,
    get_logger,
    reset_diagnostics,
)
from .handlers import _HANDLER_TAG_ATTR, RotalogHandler

__all__ = [
    "DiagnosticsConfig",
    "RotalogHandler",
    "configure_diagnostics",
    "get_logger",
    "reset_diagnostics",
    "to_rotalog_level",
]
