from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Resolves settings (environment first, command-line options on top),
builds a Logger and feeds it either the positional message or stdin,
one log line per input line. Useful as a rolling `tee` for processes
that only write to stdout.
"""

import sys
from dataclasses import replace
from typing import Callable, List, Optional, TextIO

from rotalog.core.caller import CallSite
from rotalog.core.logger import Logger
from rotalog.domain.config import LoggerSettings, apply_settings, parse_interval
from rotalog.domain.errors import RotalogError
from rotalog.infra.logging import DiagnosticsConfig, configure_diagnostics, get_logger
from rotalog.interface.cli import args as cli_args

logger = get_logger(__name__)

ARGV_SOURCE = "<argv>"
STDIN_SOURCE = "<stdin>"

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        stdin: Input stream used when no message is given. Defaults to sys.stdin.

    Returns:
        int: Process exit code (0 success, 2 configuration error, 130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Diagnostics bootstrap
    if args.debug:
        configure_diagnostics(DiagnosticsConfig(level="DEBUG"), force=True)

    # 3. Settings resolution and logger construction
    try:
        settings = resolve_settings(args)
        target = apply_settings(Logger(), settings)
    except RotalogError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    logger.debug(f"CLI logger ready: {settings}")
    emit = _emitter(target, args.severity)

    # 4. Emission phase
    try:
        if args.message:
            emit(" ".join(args.message), callsite=CallSite(ARGV_SOURCE, 1))
        else:
            stream = stdin if stdin is not None else sys.stdin
            for lineno, raw in enumerate(stream, start=1):
                emit(raw.rstrip("\r\n"), callsite=CallSite(STDIN_SOURCE, lineno))
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    except RotalogError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    finally:
        target.close()

    return 0

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def resolve_settings(args) -> LoggerSettings:
    """
    Merge environment settings with command-line overrides.

    Raises:
        ConfigurationError: If the interval is malformed.
    """
    base = LoggerSettings.from_env()
    merged = base.merged(cli_args.args_to_overrides(args))
    return replace(merged, interval=parse_interval(merged.interval, merged.rolling))


def _emitter(target: Logger, severity: str) -> Callable[..., None]:
    return getattr(target, severity)
