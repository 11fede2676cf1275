from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Provides the handler that forwards standard-library records into the
global rotalog logger, and the tagging mechanism used to tell our own
handlers apart from handlers installed by the host application.
"""

import logging
from typing import Optional

from rotalog.core import registry
from rotalog.domain.records import CallSite
from rotalog.domain.severity import from_stdlib_level

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_rotalog_handler"

# Records of the package's own loggers are never forwarded back into it
_OWN_LOGGER_PREFIX: str = "rotalog"


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """
    Mark a handler as internally managed.

    Args:
        handler: The logging handler instance to tag.
    """
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """
    Verify if a handler was installed by this package.

    Args:
        handler: The handler to inspect.

    Returns:
        bool: True if the handler carries our internal tag.
    """
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


# ==============================================================================
# BRIDGE HANDLER
# ==============================================================================

class ForwardingHandler(logging.Handler):
    """
    Emit standard-library log records through the global rotalog logger.

    The record's own path, function and line are used as the call site,
    so the output points at the code that called `logging`, not at this
    handler. Severity filtering is left to the rotalog logger.
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        _tag_handler(self)

    def emit(self, record: logging.LogRecord) -> None:
        if record.name == _OWN_LOGGER_PREFIX or record.name.startswith(_OWN_LOGGER_PREFIX + "."):
            return
        try:
            target = registry.get_instance()
            message = self.format(record) if self.formatter else record.getMessage()
            site = CallSite(
                file_name=record.pathname,
                function=record.funcName or "<module>",
                line=record.lineno,
            )
            target.log(from_stdlib_level(record.levelno), message, site)
        except Exception:
            self.handleError(record)


def _create_stream_handler(level_int: int, fmt: str, stream: Optional[object] = None) -> logging.StreamHandler:
    """
    Build a tagged stderr handler for the package's own diagnostics.

    Args:
        level_int: Numeric logging level.
        fmt: Format string for the handler's formatter.
        stream: Target stream, stderr when None.

    Returns:
        logging.StreamHandler: Configured handler.
    """
    sh = logging.StreamHandler(stream)
    sh.setLevel(level_int)
    sh.setFormatter(logging.Formatter(fmt))
    _tag_handler(sh)
    return sh
