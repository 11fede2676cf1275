from __future__ import annotations

"""
Process-Wide Logger Registry.

Holds the single global Logger. Initialization is one-shot: the first
successful call constructs the instance under a lock, and every later call
only emits a diagnostic and returns the existing logger. There is no
teardown-and-reinit path.
"""

import atexit
import logging
import os
import sys
import threading
from typing import IO, Optional, Union

from rotalog.core.logger import Logger
from rotalog.domain.settings import RotationPolicy
from rotalog.domain.severity import Severity, SeverityLike
from rotalog.errors import LoggerNotInitializedError

logger = logging.getLogger(__name__)

_instance: Optional[Logger] = None
_init_lock = threading.Lock()

Target = Union[IO[str], str, "os.PathLike[str]"]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def initialize(
        destination: Target,
        min_severity: SeverityLike = Severity.INFO,
        policy: Optional[RotationPolicy] = None,
) -> Logger:
    """
    Construct the global logger exactly once.

    A path (str or os.PathLike) binds an owned file in append mode with
    colors disabled; any other object is treated as a borrowed text stream
    with colors enabled. `policy` only applies to file destinations.

    Args:
        destination: Log file path or writable text stream.
        min_severity: Initial filtering threshold.
        policy: Initial rotation policy for file destinations.

    Returns:
        Logger: The global instance (the pre-existing one on repeat calls).

    Raises:
        LogFileOpenError: If the log file cannot be opened. The registry
            stays uninitialized in that case.
    """
    global _instance

    with _init_lock:
        if _instance is not None:
            sys.stderr.write("WARNING: Logger already initialized\n")
            return _instance

        if isinstance(destination, (str, os.PathLike)):
            created = Logger.for_file(destination, min_severity, policy)
            atexit.register(created.close)
        else:
            created = Logger.for_stream(destination, min_severity)

        _instance = created
        logger.debug(f"Global logger initialized (file={created.path}, level={created.get_min_severity().name})")
        return created


def get_instance() -> Logger:
    """
    Return the global logger.

    Raises:
        LoggerNotInitializedError: If `initialize` has not succeeded yet.
    """
    current = _instance
    if current is None:
        raise LoggerNotInitializedError()
    return current


def is_initialized() -> bool:
    return _instance is not None


def shutdown() -> None:
    """Flush and close the global logger's owned file, if any."""
    current = _instance
    if current is not None:
        current.close()
