from __future__ import annotations

"""
Severity Domain Model.

Defines the ordered severity scale used for filtering, together with the
tag and color presentation of each level and the conversions from textual
names and standard-library logging levels.
"""

import logging
from enum import IntEnum
from typing import Dict, Union

from rotalog.domain.constants import COLOR_CODES


class Severity(IntEnum):
    """Total order of record importance, lowest first."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    @property
    def tag(self) -> str:
        """Fixed-width bracketed label, e.g. '[INFO ]'."""
        return f"[{self.name:<5}]"

    @property
    def color(self) -> str:
        """ANSI escape sequence associated with the level."""
        return COLOR_CODES[self.name]


# Accepted textual identifiers, including the stdlib spellings
_NAME_MAP: Dict[str, Severity] = {
    "TRACE": Severity.TRACE,
    "DEBUG": Severity.DEBUG,
    "INFO": Severity.INFO,
    "WARN": Severity.WARN,
    "WARNING": Severity.WARN,
    "ERROR": Severity.ERROR,
    "FATAL": Severity.FATAL,
    "CRITICAL": Severity.FATAL,
}

SeverityLike = Union[Severity, str]


def parse_severity(value: SeverityLike) -> Severity:
    """
    Resolve a severity from a member or a case-insensitive name.

    Args:
        value: A Severity member or one of its names ('warning' and
            'critical' are accepted as aliases).

    Returns:
        Severity: The matching member.

    Raises:
        ValueError: If the name is unknown.
    """
    if isinstance(value, Severity):
        return value
    key = str(value).strip().upper()
    try:
        return _NAME_MAP[key]
    except KeyError:
        raise ValueError(f"Unknown severity: {value!r}") from None


def from_stdlib_level(level: int) -> Severity:
    """Map a numeric stdlib logging level onto the closest severity."""
    if level >= logging.CRITICAL:
        return Severity.FATAL
    if level >= logging.ERROR:
        return Severity.ERROR
    if level >= logging.WARNING:
        return Severity.WARN
    if level >= logging.INFO:
        return Severity.INFO
    if level >= logging.DEBUG:
        return Severity.DEBUG
    return Severity.TRACE
