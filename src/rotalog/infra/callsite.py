from __future__ import annotations

"""
Call-Site Capture.

Resolves the file, function, line and column of the code that invoked a
logging entry point by walking the interpreter's frame stack.
"""

import itertools
import sys
from types import FrameType
from typing import Optional

from rotalog.domain.records import CallSite

_UNKNOWN = CallSite(file_name="<unknown>", function="<unknown>", line=0, column=0)


def capture_call_site(stacklevel: int = 1) -> CallSite:
    """
    Describe the frame `stacklevel` levels above the caller.

    With the default of 1, the result is the location that called the
    function which invoked `capture_call_site`.

    Args:
        stacklevel: Number of frames to skip above the immediate caller.

    Returns:
        CallSite: Location of the target frame, or a placeholder when the
        stack is shallower than requested.
    """
    frame: Optional[FrameType] = sys._getframe(1)
    for _ in range(stacklevel):
        if frame is None:
            break
        frame = frame.f_back

    if frame is None:
        return _UNKNOWN

    code = frame.f_code
    return CallSite(
        file_name=code.co_filename,
        function=getattr(code, "co_qualname", code.co_name),
        line=frame.f_lineno,
        column=_column_of(frame),
    )


def _column_of(frame: FrameType) -> int:
    """1-based column of the instruction executing in `frame`, 0 if unknown."""
    positions = getattr(frame.f_code, "co_positions", None)
    if positions is None or frame.f_lasti < 0:
        return 0
    try:
        _, _, col, _ = next(itertools.islice(positions(), frame.f_lasti // 2, None))
    except StopIteration:
        return 0
    return col + 1 if col is not None else 0
