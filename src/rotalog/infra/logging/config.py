from __future__ import annotations

"""
Diagnostics Configuration Models.

rotalog reports its own lifecycle (targets opened, rotations, settings
applied) through the stdlib `logging` module under the "rotalog" logger.
These models describe how that diagnostic channel is surfaced.
"""

import logging
from dataclasses import dataclass
from typing import Dict

from rotalog.domain.constants import Level

DIAGNOSTICS_LOGGER = "rotalog"

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Native logging levels folded onto rotalog severities (highest first)
_STDLIB_TO_LEVEL = (
    (logging.ERROR, Level.ERROR),
    (logging.WARNING, Level.WARN),
    (logging.INFO, Level.INFO),
)


@dataclass(frozen=True)
class DiagnosticsConfig:
    """
    Immutable description of the diagnostics channel.

    Attributes:
        level: Minimum severity of diagnostic records to surface.
        console: Attach a stderr stream handler.
        fmt: Record format of the stderr handler.
    """
    level: str = "WARNING"
    console: bool = True
    fmt: str = "rotalog | %(levelname)s | %(name)s | %(message)s"


def to_rotalog_level(levelno: int) -> Level:
    """Fold a stdlib numeric level onto the four rotalog severities."""
    for threshold, level in _STDLIB_TO_LEVEL:
        if levelno >= threshold:
            return level
    return Level.DEBUG
