from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A controllable clock so time rolling is tested without sleeping.
3. Logger factories writing notices into an in-memory stdout.
"""

import io
import os
import sys
from typing import Callable, Generator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from rotalog.core.logger import Logger  # noqa: E402

# 2023-11-14 22:13:20 UTC
EPOCH = 1_700_000_000


class FakeClock:
    """Manually advanced replacement for time.time."""

    def __init__(self, start: float = EPOCH) -> None:
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def clock() -> FakeClock:
    """Provide a clock frozen at EPOCH until advanced."""
    return FakeClock()


@pytest.fixture
def stdout_buffer() -> io.StringIO:
    """In-memory stand-in for standard output."""
    return io.StringIO()


@pytest.fixture
def make_logger(clock: FakeClock, stdout_buffer: io.StringIO) -> Generator[Callable[..., Logger], None, None]:
    """
    Build loggers bound to the fake clock and buffer, closing them afterwards.

    Yields:
        Callable[..., Logger]: Factory accepting Logger keyword overrides.
    """
    created = []

    def factory(**kwargs) -> Logger:
        kwargs.setdefault("clock", clock)
        kwargs.setdefault("stdout", stdout_buffer)
        lg = Logger(**kwargs)
        created.append(lg)
        return lg

    yield factory

    for lg in created:
        lg.close()
