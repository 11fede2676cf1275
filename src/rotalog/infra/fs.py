from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Low-level file operations used by file-backed loggers: opening log files,
size introspection, numbered backup naming and the backup shifting step of
the rotation algorithm.
"""

import os
import sys
from typing import IO

from rotalog.domain.constants import BACKUP_SEPARATOR, LOG_FILE_ENCODING
from rotalog.errors import LogFileOpenError

# -----------------------------------------------------------------------------
# NAMING API
# -----------------------------------------------------------------------------

def backup_path(path: str, index: int) -> str:
    """
    Compute the name of the numbered backup for a primary log path.

    The suffix is inserted before the extension of the file's base name
    ('app.log' -> 'app_1.log'), or appended when there is none
    ('applog' -> 'applog_1'). Dots in directory names are not considered.

    Args:
        path: Primary log file path.
        index: Backup generation, 1 being the most recent.

    Returns:
        str: Path of the backup file.
    """
    suffix = f"{BACKUP_SEPARATOR}{index}"
    cut = max(path.rfind("/"), path.rfind("\\")) + 1
    dot = path.rfind(".", cut)
    if dot > cut:
        return f"{path[:dot]}{suffix}{path[dot:]}"
    return f"{path}{suffix}"

# -----------------------------------------------------------------------------
# FILE I/O API
# -----------------------------------------------------------------------------

def open_log_file(path: str, truncate: bool = False) -> IO[str]:
    """
    Open a log file for writing, creating it and its parent directory.

    Args:
        path: Target log file.
        truncate: Discard existing content instead of appending.

    Returns:
        IO[str]: Text handle owned by the caller.

    Raises:
        LogFileOpenError: If the file cannot be opened.
    """
    try:
        _ensure_parent_dir(path)
        return open(path, "w" if truncate else "a", encoding=LOG_FILE_ENCODING)
    except OSError as e:
        raise LogFileOpenError(path, e.strerror or str(e)) from e


def get_file_size(path: str) -> int:
    """
    Return the size of a file in bytes, or 0 if it cannot be determined.

    A failed stat is reported on stderr and never propagates.
    """
    try:
        return os.path.getsize(path)
    except OSError as e:
        sys.stderr.write(f"Error getting file size: {e}\n")
        return 0


def shift_backups(path: str, max_backup_count: int) -> None:
    """
    Move the primary file into the backup chain.

    Backups '_1'..'_{k-1}' move up one generation (the oldest, '_k', is
    overwritten) and the primary becomes '_1'.

    Args:
        path: Primary log file path.
        max_backup_count: Number of generations to keep (k >= 1).

    Raises:
        OSError: If a rename fails.
    """
    for i in range(max_backup_count, 1, -1):
        older = backup_path(path, i - 1)
        if os.path.exists(older):
            os.replace(older, backup_path(path, i))

    os.replace(path, backup_path(path, 1))

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _ensure_parent_dir(path: str) -> None:
    """Create the parent directory hierarchy of a target file."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
