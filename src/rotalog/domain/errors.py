from __future__ import annotations

"""
Error Taxonomy.

Configuration mistakes are detected eagerly and raised to the caller.
Left unhandled they terminate the process, which is the intended outcome
for a misconfigured logger. Runtime write failures never surface here.
"""


class RotalogError(Exception):
    """Base class for every error raised by rotalog."""


class ConfigurationError(RotalogError, ValueError):
    """Invalid level name, file path, rolling flag or interval."""


class TargetError(RotalogError, OSError):
    """The log directory or the log file could not be created or opened."""
