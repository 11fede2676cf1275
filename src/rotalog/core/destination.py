from __future__ import annotations

"""
Output Destinations.

A logger writes to exactly one destination: either a file it opened and
owns, or a stream borrowed from the host (e.g. sys.stdout) that it must
never close. Rotation only exists for owned files.
"""

import logging
import sys
from typing import IO, Union

from rotalog.domain.constants import LINE_TERMINATOR
from rotalog.domain.settings import RotationPolicy
from rotalog.infra.fs import get_file_size, open_log_file, shift_backups

logger = logging.getLogger(__name__)


class StreamDestination:
    """Borrowed, externally owned text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self.stream = stream

    def write_line(self, line: str) -> None:
        self.stream.write(line + LINE_TERMINATOR)
        self.stream.flush()

    def close(self) -> None:
        # Not ours to close
        self.stream.flush()


class FileDestination:
    """
    Exclusively owned log file with size-based rotation.

    Attributes:
        path: Primary log file path.
    """

    def __init__(self, path: str, truncate: bool = False) -> None:
        self.path = path
        self._handle: IO[str] = open_log_file(path, truncate=truncate)
        self._warned_closed = False

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def write_line(self, line: str) -> None:
        """Append one line, or drop it once the file has been closed."""
        if self._handle.closed:
            self._warn_closed()
            return
        self._handle.write(line + LINE_TERMINATOR)
        self._handle.flush()

    def _warn_closed(self) -> None:
        if not self._warned_closed:
            self._warned_closed = True
            sys.stderr.write(f"WARNING: Log file '{self.path}' is closed; dropping records\n")

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.flush()
            self._handle.close()

    def rotate_if_needed(self, policy: RotationPolicy) -> bool:
        """
        Rotate the primary file once it reaches the policy's size threshold.

        Args:
            policy: Active rotation policy.

        Returns:
            bool: True if the file was rotated.

        Raises:
            LogFileOpenError: If the replacement file cannot be opened.
        """
        if self._handle.closed:
            return False

        self._handle.flush()
        size = get_file_size(self.path)
        if size < policy.max_file_size:
            return False

        self._handle.close()

        truncate = policy.max_backup_count <= 0
        if not truncate:
            try:
                shift_backups(self.path, policy.max_backup_count)
            except OSError as e:
                sys.stderr.write(f"WARNING: Log rotation failed for '{self.path}': {e}\n")
                self._handle = open_log_file(self.path)
                return False

        self._handle = open_log_file(self.path, truncate=truncate)
        logger.debug(
            f"Rotated {self.path} at {size} bytes "
            f"(keeping {max(policy.max_backup_count, 0)} backups)"
        )
        return True


Destination = Union[FileDestination, StreamDestination]
