from __future__ import annotations

"""
Unit tests for the Logger emission path.

Verifies:
1. Monotonic severity filtering and runtime threshold changes.
2. Line layout, colors and call-site attribution.
3. Formatted-message rendering and error propagation.
4. Policy replacement semantics.
"""

import io
import re
import sys
import threading
from unittest.mock import patch

import pytest

from rotalog.core.destination import StreamDestination
from rotalog.core.logger import Logger
from rotalog.domain.records import CallSite
from rotalog.domain.settings import RotationPolicy
from rotalog.domain.severity import Severity

_LINE_RE = re.compile(
    r"^\[(?P<tag>[A-Z ]{5})\]: "
    r"(?P<ts>\d{2}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}) "
    r"\[Thread: (?P<tid>\d+)\] "
    r"(?P<file>\S+) - `(?P<func>[^`]+)` \((?P<line>\d+):(?P<col>\d+)\) : (?P<msg>.*)$"
)


def _plain_logger(stream: io.StringIO, level: Severity = Severity.TRACE) -> Logger:
    """Stream-backed logger with colors off, for exact text matching."""
    return Logger(StreamDestination(stream), level, enable_colors=False)


def _lines(stream: io.StringIO) -> list:
    return stream.getvalue().splitlines()


@pytest.mark.parametrize("threshold", list(Severity))
def test_filtering_is_monotonic(stream: io.StringIO, threshold: Severity) -> None:
    """A record is written iff its severity is at or above the threshold."""
    logger = _plain_logger(stream, threshold)
    for severity in Severity:
        logger.log(severity, f"msg-{severity.name}")

    written = [_LINE_RE.match(line).group("msg") for line in _lines(stream)]
    assert written == [f"msg-{s.name}" for s in Severity if s >= threshold]


def test_filtered_record_does_no_work(stream: io.StringIO) -> None:
    logger = _plain_logger(stream, Severity.ERROR)
    with patch("rotalog.core.logger.capture_call_site") as capture, \
            patch("rotalog.core.logger.datetime") as clock:
        logger.info("dropped")
    capture.assert_not_called()
    clock.now.assert_not_called()
    assert stream.getvalue() == ""


def test_set_min_severity_applies_to_next_record(stream: io.StringIO) -> None:
    logger = _plain_logger(stream, Severity.ERROR)
    logger.warn("before")
    logger.set_min_severity(Severity.WARN)
    logger.warn("after")

    assert logger.get_min_severity() == Severity.WARN
    assert [_LINE_RE.match(line).group("msg") for line in _lines(stream)] == ["after"]


def test_set_min_severity_accepts_names(stream: io.StringIO) -> None:
    logger = _plain_logger(stream)
    logger.set_min_severity("fatal")
    assert logger.get_min_severity() == Severity.FATAL


def test_line_layout_and_call_site(stream: io.StringIO) -> None:
    logger = _plain_logger(stream)
    expected_line = sys._getframe().f_lineno + 1
    logger.error("System failure")

    match = _LINE_RE.match(_lines(stream)[0])
    assert match is not None
    assert match.group("tag") == "ERROR"
    assert match.group("file") == "test_logger.py"
    assert match.group("func") == "test_line_layout_and_call_site"
    assert int(match.group("line")) == expected_line
    assert int(match.group("tid")) == threading.get_ident()
    assert match.group("msg") == "System failure"


def test_explicit_call_site_is_used_verbatim(stream: io.StringIO) -> None:
    logger = _plain_logger(stream)
    logger.log(Severity.INFO, "hello", CallSite("C:\\src\\other_process.cpp", "run_this", 4, 5))
    assert "other_process.cpp - `run_this` (4:5) : hello" in stream.getvalue()


def test_stream_logger_uses_colors(stream: io.StringIO) -> None:
    logger = Logger.for_stream(stream, Severity.TRACE)
    assert logger.is_color_enabled() is True

    logger.trace("Starting application...")
    assert stream.getvalue().startswith("\033[36m[TRACE]\033[0m: ")


def test_each_record_ends_with_newline(stream: io.StringIO) -> None:
    logger = _plain_logger(stream)
    logger.info("one")
    logger.info("two")
    assert stream.getvalue().count("\n") == 2
    assert stream.getvalue().endswith("\n")


def test_warning_alias(stream: io.StringIO) -> None:
    logger = _plain_logger(stream)
    logger.warning("careful")
    assert _LINE_RE.match(_lines(stream)[0]).group("tag") == "WARN "


def test_logf_renders_template(stream: io.StringIO) -> None:
    logger = _plain_logger(stream)
    expected_line = sys._getframe().f_lineno + 1
    logger.logf(Severity.DEBUG, "Initializing system with value: {}", 42)

    match = _LINE_RE.match(_lines(stream)[0])
    assert match.group("msg") == "Initializing system with value: 42"
    assert int(match.group("line")) == expected_line


def test_logf_keyword_arguments(stream: io.StringIO) -> None:
    logger = _plain_logger(stream)
    logger.logf(Severity.INFO, "Thread iteration: {i}", i=3)
    assert _lines(stream)[0].endswith(": Thread iteration: 3")


@pytest.mark.parametrize("template, args, error", [
    ("{} and {}", (1,), IndexError),
    ("{missing}", (), KeyError),
    ("{:d}", ("text",), ValueError),
])
def test_logf_invalid_template_raises(stream: io.StringIO, template: str, args: tuple, error: type) -> None:
    logger = _plain_logger(stream, Severity.FATAL)
    # Raised even though the DEBUG record itself would be filtered out
    with pytest.raises(error):
        logger.logf(Severity.DEBUG, template, *args)
    assert stream.getvalue() == ""


def test_configure_replaces_policy_wholesale(stream: io.StringIO) -> None:
    logger = _plain_logger(stream)
    assert logger.configure(True, True, 512, 5) is True
    assert logger.policy == RotationPolicy(True, True, 512, 5)

    assert logger.configure(max_backup_count=2) is True
    assert logger.policy == RotationPolicy(max_backup_count=2)

    settings = RotationPolicy(enable_rotation=True, max_file_size=1024 * 1024, max_backup_count=5)
    assert logger.configure(settings) is True
    assert logger.policy is settings


def test_configure_on_stream_only_stores(stream: io.StringIO) -> None:
    logger = _plain_logger(stream)
    logger.configure(False, True, 1, 1)
    logger.info("still fine")
    assert logger.path is None
    assert len(_lines(stream)) == 1


def test_close_does_not_close_borrowed_stream(stream: io.StringIO) -> None:
    logger = _plain_logger(stream)
    logger.close()
    assert stream.closed is False


def test_configure_rejects_negative_values(stream: io.StringIO) -> None:
    logger = _plain_logger(stream)
    with pytest.raises(ValueError):
        logger.configure(False, True, -1, 2)
    with pytest.raises(ValueError):
        logger.configure(max_backup_count=-3)
    assert logger.policy == RotationPolicy()
