from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path decomposition, existence probing and directory creation used by
the target manager. Kept free of logger state so it can be exercised
directly in tests.
"""

import logging
import os
from typing import Tuple

logger = logging.getLogger(__name__)

# Both separators are rejected regardless of platform
_SEPARATORS: Tuple[str, ...] = ("/", "\\")
_DIR_MODE: int = 0o777

# -----------------------------------------------------------------------------
# PATH DECOMPOSITION
# -----------------------------------------------------------------------------

def split_log_path(path: str) -> Tuple[str, str, str]:
    """
    Decompose a log file path into directory, base name and extension.

    A bare file name resolves to the current directory.

    Args:
        path: Raw log file path as supplied by the caller.

    Returns:
        Tuple[str, str, str]: (directory, base name, extension). Any
        component may be empty; validation is the caller's concern.
    """
    raw = (path or "").strip()
    if not raw:
        return "", "", ""

    file_name = os.path.basename(raw)
    directory = os.path.dirname(raw) or ("." if file_name else "")
    base, ext = os.path.splitext(file_name)
    return directory, base, ext


def has_separator(name: str) -> bool:
    """Return True if a file name embeds a path separator."""
    return any(sep in name for sep in _SEPARATORS)


def join_log_path(directory: str, base: str, ext: str, counter: int = 0) -> str:
    """
    Assemble a log file path, optionally suffixed with a rotation counter.

    Args:
        directory: Parent directory.
        base: File name without extension.
        ext: Extension including the leading dot (may be empty).
        counter: Rotation suffix; 0 means no suffix.

    Returns:
        str: `<dir>/<base><ext>` or `<dir>/<base>_<counter><ext>`.
    """
    stem = os.path.join(directory, base)
    if counter > 0:
        return f"{stem}_{counter}{ext}"
    return f"{stem}{ext}"

# -----------------------------------------------------------------------------
# FILESYSTEM PROBES
# -----------------------------------------------------------------------------

def is_exist(path: str) -> bool:
    """
    Check whether a path exists.

    Errors other than "not found" (e.g. permission denied on a parent)
    are logged and reported as non-existent.
    """
    try:
        os.stat(path)
        return True
    except FileNotFoundError:
        return False
    except OSError as e:
        logger.warning(f"Unable to stat '{path}': {e}")
        return False


def ensure_parent_dir(path: str) -> None:
    """
    Create the parent directory hierarchy for a target file.

    Directories are created world-writable subject to the process umask.

    Args:
        path: Path to the target file.

    Raises:
        OSError: If the hierarchy cannot be created.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.isdir(parent):
        os.makedirs(parent, mode=_DIR_MODE, exist_ok=True)
        logger.debug(f"Created log directory {parent}")
