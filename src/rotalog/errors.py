from __future__ import annotations

"""
Exception hierarchy of the logging facility.
"""


class LoggerNotInitializedError(RuntimeError):
    """Raised when the global logger is accessed before initialization."""

    def __init__(self) -> None:
        super().__init__("Logger not initialized. Call rotalog.initialize().")


class LogFileOpenError(OSError):
    """Raised when a log file (initial or post-rotation) cannot be opened."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to open log file: {path} ({reason})")
        self.path = path


class PolicyFileError(ValueError):
    """Raised when a rotation policy file is missing or malformed."""
