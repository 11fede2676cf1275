from __future__ import annotations

"""
Logger Core.

Implements the leveled, thread-safe emission path: threshold filtering,
rotation checks for owned files, record formatting and the synchronous
write. A Logger can be used directly as a caller-owned object or through
the process-wide registry in `rotalog.core.registry`.
"""

import os
import sys
import threading
from datetime import datetime
from typing import IO, Any, Optional, Union, overload

from rotalog.core.destination import Destination, FileDestination, StreamDestination
from rotalog.domain.records import CallSite, LogRecord, format_record
from rotalog.domain.settings import RotationPolicy
from rotalog.domain.severity import Severity, SeverityLike, parse_severity
from rotalog.infra.callsite import capture_call_site

PathLike = Union[str, "os.PathLike[str]"]


class Logger:
    """
    Writes leveled records to a console stream or a rotating file.

    Console-backed loggers colorize severity tags; file-backed loggers do
    not. Every public operation that touches the destination or the
    policy is serialized on a per-instance lock.
    """

    def __init__(
            self,
            destination: Destination,
            min_severity: SeverityLike = Severity.INFO,
            enable_colors: bool = False,
            policy: Optional[RotationPolicy] = None,
    ) -> None:
        self._destination = destination
        self._min_severity = parse_severity(min_severity)
        self._enable_colors = enable_colors
        self._policy = policy or RotationPolicy()
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # FACTORIES
    # -------------------------------------------------------------------------

    @classmethod
    def for_stream(cls, stream: IO[str], min_severity: SeverityLike = Severity.INFO) -> Logger:
        """Bind to a borrowed stream, with colors enabled."""
        return cls(StreamDestination(stream), min_severity, enable_colors=True)

    @classmethod
    def for_file(
            cls,
            path: PathLike,
            min_severity: SeverityLike = Severity.INFO,
            policy: Optional[RotationPolicy] = None,
    ) -> Logger:
        """
        Open (append mode) and own a log file, with colors disabled.

        Raises:
            LogFileOpenError: If the file cannot be opened.
        """
        policy = policy or RotationPolicy()
        destination = FileDestination(os.fspath(path), truncate=policy.clear_on_startup)
        return cls(destination, min_severity, enable_colors=False, policy=policy)

    # -------------------------------------------------------------------------
    # CONFIGURATION
    # -------------------------------------------------------------------------

    @overload
    def configure(self, policy: RotationPolicy, /) -> bool: ...

    @overload
    def configure(
            self,
            clear_on_startup: bool = False,
            enable_rotation: bool = False,
            max_file_size: int = 0,
            max_backup_count: int = 0,
    ) -> bool: ...

    def configure(self, *args: Any, **kwargs: Any) -> bool:
        """
        Replace the rotation policy wholesale.

        Accepts either a single RotationPolicy or the four policy fields.
        Console-backed loggers store the values without using them.

        Returns:
            bool: Always True.

        Raises:
            ValueError: If `max_file_size` or `max_backup_count` is negative.
        """
        if len(args) == 1 and not kwargs and isinstance(args[0], RotationPolicy):
            policy = args[0]
        else:
            policy = RotationPolicy(*args, **kwargs)

        with self._lock:
            self._policy = policy
        return True

    @property
    def policy(self) -> RotationPolicy:
        return self._policy

    @property
    def path(self) -> Optional[str]:
        """Primary log file path, or None when bound to a stream."""
        if isinstance(self._destination, FileDestination):
            return self._destination.path
        return None

    def get_min_severity(self) -> Severity:
        return self._min_severity

    def set_min_severity(self, level: SeverityLike) -> None:
        level = parse_severity(level)
        with self._lock:
            self._min_severity = level

    def is_color_enabled(self) -> bool:
        return self._enable_colors

    # -------------------------------------------------------------------------
    # EMISSION
    # -------------------------------------------------------------------------

    def log(
            self,
            severity: Severity,
            message: Any,
            call_site: Optional[CallSite] = None,
            *,
            stacklevel: int = 1,
    ) -> None:
        """
        Emit one record if `severity` passes the threshold.

        Args:
            severity: Level of the record.
            message: Message text (converted with str()).
            call_site: Explicit origin; captured from the stack when None.
            stacklevel: Frames above the caller of `log` to attribute the
                record to when capturing.

        Raises:
            LogFileOpenError: If rotation cannot reopen the log file.
        """
        if severity < self._min_severity:
            return

        if call_site is None:
            call_site = capture_call_site(stacklevel)

        with self._lock:
            destination = self._destination
            if isinstance(destination, FileDestination) and self._policy.enable_rotation:
                destination.rotate_if_needed(self._policy)

            record = LogRecord(
                severity=severity,
                message=str(message),
                call_site=call_site,
                timestamp=datetime.now(),
                thread_id=threading.get_ident(),
            )
            destination.write_line(format_record(record, self._enable_colors))

    def logf(
            self,
            severity: Severity,
            template: str,
            *args: Any,
            stacklevel: int = 1,
            **kwargs: Any,
    ) -> None:
        """
        Render `template` with str.format and emit it.

        The template is rendered before filtering, so an invalid template
        raises even when the record would be discarded.
        """
        message = template.format(*args, **kwargs)
        self.log(severity, message, stacklevel=stacklevel + 1)

    def trace(self, message: Any) -> None:
        self.log(Severity.TRACE, message, stacklevel=2)

    def debug(self, message: Any) -> None:
        self.log(Severity.DEBUG, message, stacklevel=2)

    def info(self, message: Any) -> None:
        self.log(Severity.INFO, message, stacklevel=2)

    def warn(self, message: Any) -> None:
        self.log(Severity.WARN, message, stacklevel=2)

    warning = warn

    def error(self, message: Any) -> None:
        self.log(Severity.ERROR, message, stacklevel=2)

    def fatal(self, message: Any) -> None:
        self.log(Severity.FATAL, message, stacklevel=2)

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Flush and close an owned file; borrowed streams are only flushed."""
        with self._lock:
            try:
                self._destination.close()
            except ValueError:
                # Borrowed stream already closed by its owner
                sys.stderr.write("WARNING: Log stream was closed before shutdown\n")
