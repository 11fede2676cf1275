from __future__ import annotations

"""
Domain Constants.

Centralizes the static values shared by the formatting, rotation and
interface layers: ANSI escape codes, timestamp layout and backup naming.
"""

from typing import Dict

# -----------------------------------------------------------------------------
# CONSOLE COLORS
# -----------------------------------------------------------------------------
COLOR_RESET = "\033[0m"

COLOR_CODES: Dict[str, str] = {
    "TRACE": "\033[36m",  # Cyan
    "DEBUG": "\033[34m",  # Blue
    "INFO": "\033[37m",   # White
    "WARN": "\033[33m",   # Yellow
    "ERROR": "\033[31m",  # Red
    "FATAL": "\033[35m",  # Magenta
}

# -----------------------------------------------------------------------------
# RECORD LAYOUT
# -----------------------------------------------------------------------------
TIMESTAMP_FORMAT = "%d-%m-%y %H:%M:%S"
LINE_TERMINATOR = "\n"

# -----------------------------------------------------------------------------
# FILE HANDLING
# -----------------------------------------------------------------------------
LOG_FILE_ENCODING = "utf-8"
BACKUP_SEPARATOR = "_"
