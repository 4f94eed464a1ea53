from __future__ import annotations

"""
Line Formatter.

Renders log lines in the form

    [<L>|<YYYY-MM-DD>|<HH:MM:SS>] <file>:<line> <message>

wrapped in an ANSI color sequence selected by level. Also renders the
logger's own notices (configuration warnings and write-failure reports),
which always go to standard output.
"""

import sys
import time
from typing import Callable, Dict, Optional, TextIO, Tuple

from rotalog.core.caller import CallSite
from rotalog.domain.constants import Level

ColorFn = Callable[[str], str]

_RESET = "\x1b[0m"

# -----------------------------------------------------------------------------
# COLORS
# -----------------------------------------------------------------------------

def _paint(code: int, s: str) -> str:
    return f"\x1b[{code};3m{s}{_RESET}"


def red(s: str) -> str:
    return _paint(31, s)


def green(s: str) -> str:
    return _paint(32, s)


def yellow(s: str) -> str:
    return _paint(33, s)


def blue(s: str) -> str:
    return _paint(36, s)


LEVEL_STYLES: Dict[Level, Tuple[str, ColorFn]] = {
    Level.ERROR: ("E", red),
    Level.WARN: ("W", yellow),
    Level.INFO: ("I", green),
    Level.DEBUG: ("D", blue),
}

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

def stamp(now: float) -> Tuple[str, str]:
    """Split a Unix timestamp into local (date, time) strings."""
    local = time.localtime(int(now))
    return time.strftime("%Y-%m-%d", local), time.strftime("%H:%M:%S", local)


def render_struct(prefix: str, body: str, color: ColorFn, now: float) -> str:
    """Assemble `[prefix|date|time]body` and apply the color."""
    day, clock = stamp(now)
    return color(f"[{prefix}|{day}|{clock}]{body}")


def render_line(
        level: Level,
        message: str,
        site: CallSite,
        now: float,
        line_feed: bool,
) -> str:
    """
    Render one complete log line.

    Args:
        level: Severity of the message.
        message: Already-substituted message text.
        site: Location of the logging call.
        now: Unix timestamp for the date/time fields.
        line_feed: Append a trailing newline after the color reset.

    Returns:
        str: The line exactly as it is written to the target.
    """
    prefix, color = LEVEL_STYLES[level]
    body = f" {site.base_name}:{site.line} {message}"
    line = render_struct(prefix, body, color, now)
    if line_feed:
        line += "\n"
    return line


def render_notice(prefix: str, message: str, color: ColorFn, now: Optional[float] = None) -> str:
    """Render an internal notice line (newline-terminated)."""
    if now is None:
        now = time.time()
    return render_struct(prefix, message, color, now) + "\n"


def print_notice(
        prefix: str,
        message: str,
        color: ColorFn,
        stream: Optional[TextIO] = None,
        now: Optional[float] = None,
) -> None:
    """Write an internal notice to standard output (or the given stream)."""
    out = stream if stream is not None else sys.stdout
    out.write(render_notice(prefix, message, color, now))
    out.flush()
