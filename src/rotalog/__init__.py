from __future__ import annotations

"""
rotalog: leveled, thread-safe logging to a console stream or a rotating file.

Typical usage::

    import sys
    import rotalog

    rotalog.initialize(sys.stdout, rotalog.Severity.TRACE)
    rotalog.info("System ready")

Module-level helpers act on the global logger and raise
LoggerNotInitializedError until `initialize` has succeeded.
"""

from typing import Any

from rotalog.core.logger import Logger
from rotalog.core.registry import get_instance, initialize, is_initialized, shutdown
from rotalog.domain.records import CallSite, LogRecord
from rotalog.domain.settings import RotationPolicy
from rotalog.domain.severity import Severity, SeverityLike, parse_severity
from rotalog.errors import LogFileOpenError, LoggerNotInitializedError, PolicyFileError

__version__ = "1.0.0"

# -----------------------------------------------------------------------------
# CONFIGURATION FACADE
# -----------------------------------------------------------------------------

def configure(*args: Any, **kwargs: Any) -> bool:
    """Replace the global logger's rotation policy (see Logger.configure)."""
    return get_instance().configure(*args, **kwargs)


def get_min_severity() -> Severity:
    return get_instance().get_min_severity()


def set_min_severity(level: SeverityLike) -> None:
    get_instance().set_min_severity(level)


def is_color_enabled() -> bool:
    return get_instance().is_color_enabled()

# -----------------------------------------------------------------------------
# EMISSION FACADE
# -----------------------------------------------------------------------------

def trace(message: Any) -> None:
    get_instance().log(Severity.TRACE, message, stacklevel=2)


def debug(message: Any) -> None:
    get_instance().log(Severity.DEBUG, message, stacklevel=2)


def debugf(template: str, *args: Any, **kwargs: Any) -> None:
    """Format `template` with str.format and log it at DEBUG."""
    get_instance().logf(Severity.DEBUG, template, *args, stacklevel=2, **kwargs)


def logf(severity: Severity, template: str, *args: Any, **kwargs: Any) -> None:
    get_instance().logf(severity, template, *args, stacklevel=2, **kwargs)


def info(message: Any) -> None:
    get_instance().log(Severity.INFO, message, stacklevel=2)


def warn(message: Any) -> None:
    get_instance().log(Severity.WARN, message, stacklevel=2)


warning = warn


def error(message: Any) -> None:
    get_instance().log(Severity.ERROR, message, stacklevel=2)


def fatal(message: Any) -> None:
    get_instance().log(Severity.FATAL, message, stacklevel=2)


__all__ = [
    "CallSite",
    "LogFileOpenError",
    "LogRecord",
    "Logger",
    "LoggerNotInitializedError",
    "PolicyFileError",
    "RotationPolicy",
    "Severity",
    "configure",
    "debug",
    "debugf",
    "error",
    "fatal",
    "get_instance",
    "get_min_severity",
    "info",
    "initialize",
    "is_color_enabled",
    "is_initialized",
    "logf",
    "parse_severity",
    "set_min_severity",
    "shutdown",
    "trace",
    "warn",
    "warning",
]
