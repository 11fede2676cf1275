from __future__ import annotations

"""
Log Record Data Models.

Defines the ephemeral structures built for every emitted message and the
pure functions that render them into a single output line.
"""

from dataclasses import dataclass
from datetime import datetime

from rotalog.domain.constants import COLOR_RESET, TIMESTAMP_FORMAT
from rotalog.domain.severity import Severity

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CallSite:
    """
    Location in calling code from which a record originated.

    Attributes:
        file_name: Path of the source file as reported by the interpreter.
        function: Qualified name of the calling function.
        line: 1-based line number.
        column: 1-based column number, 0 when unknown.
    """
    file_name: str
    function: str
    line: int
    column: int = 0

    @property
    def base_name(self) -> str:
        """Last path component, accepting both '/' and '\\' separators."""
        name = self.file_name
        cut = max(name.rfind("/"), name.rfind("\\"))
        return name[cut + 1:] if cut >= 0 else name


@dataclass(frozen=True)
class LogRecord:
    """
    A single message travelling through the emission path.

    Constructed, formatted, written and discarded within one call.
    """
    severity: Severity
    message: str
    call_site: CallSite
    timestamp: datetime
    thread_id: int

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

def format_timestamp(moment: datetime) -> str:
    """
    Render a timestamp as 'dd-mm-yy HH:MM:SS.mmm'.

    Args:
        moment: Local wall-clock time with microsecond resolution.

    Returns:
        str: Timestamp truncated to millisecond precision.
    """
    return f"{moment.strftime(TIMESTAMP_FORMAT)}.{moment.microsecond // 1000:03d}"


def format_record(record: LogRecord, use_colors: bool) -> str:
    """
    Render a record into one line, without the line terminator.

    Args:
        record: The record to render.
        use_colors: Wrap the severity tag in its ANSI color code.

    Returns:
        str: The formatted line.
    """
    tag = record.severity.tag
    if use_colors:
        tag = f"{record.severity.color}{tag}{COLOR_RESET}"

    site = record.call_site
    return (
        f"{tag}: {format_timestamp(record.timestamp)}"
        f" [Thread: {record.thread_id}]"
        f" {site.base_name} - `{site.function}` ({site.line}:{site.column})"
        f" : {record.message}"
    )
