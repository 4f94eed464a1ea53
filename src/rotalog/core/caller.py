from __future__ import annotations

"""
Call-Site Resolution.

Locates the file and line of the code that issued a logging call. Emit
methods accept an explicit CallSite so wrappers can thread their own
location through; otherwise the frame is looked up by depth, the same
way the stdlib `logging` module handles `stacklevel`.
"""

import os
import sys
from dataclasses import dataclass

UNKNOWN_FILE = "???"


@dataclass(frozen=True)
class CallSite:
    """Source location of a logging call."""
    file: str = UNKNOWN_FILE
    line: int = 0

    @property
    def base_name(self) -> str:
        """File name without its directory, as rendered in log lines."""
        return os.path.basename(self.file) or UNKNOWN_FILE


def resolve_caller(depth: int) -> CallSite:
    """
    Resolve the call site `depth` frames above the function calling this one.

    Args:
        depth: 0 returns the immediate caller of resolve_caller's caller.

    Returns:
        CallSite: The located frame, or an unknown site if the stack is
        shallower than requested.
    """
    try:
        frame = sys._getframe(depth + 2)
    except ValueError:
        return CallSite()
    return CallSite(frame.f_code.co_filename, frame.f_lineno)
