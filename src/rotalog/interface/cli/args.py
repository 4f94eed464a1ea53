from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the `rotalog` tool and translates the
parsed namespace into LoggerSettings overrides.
"""

import argparse
from typing import Any, Dict

from rotalog.domain.constants import LEVEL_FLAGS, ROLLING_FLAGS

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the rotalog CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="rotalog",
        description=(
            "Write a message, or every line read from stdin, through a "
            "leveled logger with optional rolling file output."
        ),
    )

    # --- Logger Configuration ---
    p.add_argument(
        "--level",
        choices=sorted(LEVEL_FLAGS),
        default=None,
        help="Threshold below which lines are dropped (default: info or $ROTALOG_LEVEL).",
    )
    p.add_argument(
        "-f", "--file",
        dest="log_file",
        default=None,
        help="Log file path. Output goes to stdout when omitted.",
    )
    p.add_argument(
        "--rolling",
        choices=sorted(ROLLING_FLAGS),
        default=None,
        help="Rotate the log file by elapsed time or written size.",
    )
    p.add_argument(
        "--interval",
        default=None,
        help="Rolling interval: seconds (30, 30s, 5m) or bytes (10240, 10K, 1M).",
    )

    # --- Emission ---
    p.add_argument(
        "-s", "--severity",
        choices=sorted(LEVEL_FLAGS),
        default="info",
        help="Severity of the emitted lines.",
    )
    p.add_argument(
        "message",
        nargs="*",
        help="Message to log. When absent, stdin is logged line by line.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Print rotalog's internal diagnostics to stderr.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into LoggerSettings overrides.

    Unset options map to None and leave the base settings untouched.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Settings overrides; the interval stays a raw string.
    """
    return {
        "level": args.level,
        "log_file": args.log_file,
        "rolling": args.rolling,
        "interval": args.interval,
    }
