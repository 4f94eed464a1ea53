from __future__ import annotations

"""
Integration tests for concurrent writers sharing one Logger.

Verifies:
1. No line is lost or interleaved under contention.
2. Size rotation stays exact under contention: every closed file holds
   the same number of lines and only the last file may be short.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, List

from rotalog.core.caller import CallSite
from rotalog.core.logger import Logger
from rotalog.domain.constants import MIN_SIZE_INTERVAL

SITE = CallSite("worker.py", 1)
WORKERS = 8
PER_WORKER = 150


def _rolled_files(directory: Path) -> List[Path]:
    """Return app.log, app_1.log, app_2.log, ... in rotation order."""
    files = [directory / "app.log"]
    n = 1
    while (directory / f"app_{n}.log").exists():
        files.append(directory / f"app_{n}.log")
        n += 1
    return files


def test_parallel_writers_rotate_exactly(make_logger: Callable[..., Logger], tmp_path: Path) -> None:
    lg = make_logger().set_log_file(str(tmp_path / "app.log")).set_rolling("size", MIN_SIZE_INTERVAL)

    def work(worker: int) -> None:
        for i in range(PER_WORKER):
            lg.info(f"w{worker} n{i:04d} " + "p" * 80, callsite=SITE)

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        list(pool.map(work, range(WORKERS)))
    lg.close()

    files = _rolled_files(tmp_path)
    assert len(files) > 1
    assert len(files) == len(list(tmp_path.iterdir()))

    contents = [f.read_text(encoding="utf-8").splitlines(keepends=True) for f in files]
    all_lines = [line for chunk in contents for line in chunk]
    assert len(all_lines) == WORKERS * PER_WORKER
    assert all(line.endswith("\x1b[0m\n") for line in all_lines)

    line_bytes = len(all_lines[0].encode("utf-8"))
    per_file = MIN_SIZE_INTERVAL // line_bytes + 1
    for chunk in contents[:-1]:
        assert len(chunk) == per_file
    assert 0 < len(contents[-1]) <= per_file
