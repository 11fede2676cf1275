from __future__ import annotations

"""
Standard-Library Logging Integration.

Idempotent wiring between Python's `logging` module and rotalog: the
package's own diagnostic output (rotation events, policy loading) and the
bridge that routes third-party `logging` calls into the global logger.
"""

import logging
from typing import Optional

from rotalog.infra.logging.handlers import (
    ForwardingHandler,
    _create_stream_handler,
    _is_our_handler,
)

PACKAGE_LOGGER_NAME: str = "rotalog"
DIAGNOSTIC_FORMAT: str = "rotalog | %(levelname)s | %(name)s | %(message)s"

# Internal state flag for idempotency
_CONFIGURED_FLAG_ATTR: str = "_rotalog_diagnostics_configured"

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_diagnostics(level: str = "WARNING", *, force: bool = False) -> logging.Logger:
    """
    Route the package's internal diagnostics to stderr.

    Repeated calls are no-ops unless `force` is set, in which case our
    handler is replaced and the level updated.

    Args:
        level: Threshold name for internal messages.
        force: Re-install the handler even if already configured.

    Returns:
        logging.Logger: The package logger.
    """
    pkg_logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    already_configured = bool(getattr(pkg_logger, _CONFIGURED_FLAG_ATTR, False))
    if already_configured and not force:
        return pkg_logger

    level_int = _parse_level(level)
    pkg_logger.setLevel(level_int)
    _remove_our_handlers(pkg_logger, diagnostics_only=True)

    pkg_logger.addHandler(_create_stream_handler(level_int, DIAGNOSTIC_FORMAT))
    # Keep diagnostics out of the host application's root handlers
    pkg_logger.propagate = False

    setattr(pkg_logger, _CONFIGURED_FLAG_ATTR, True)
    return pkg_logger


def attach_stdlib_bridge(name: Optional[str] = None, level: int = logging.NOTSET) -> ForwardingHandler:
    """
    Forward records of a stdlib logger (root by default) to rotalog.

    Installing twice on the same logger returns the existing bridge.

    Args:
        name: Name of the stdlib logger to bridge.
        level: Handler level; rotalog still applies its own threshold.

    Returns:
        ForwardingHandler: The installed handler.
    """
    target = logging.getLogger(name)
    for h in target.handlers:
        if isinstance(h, ForwardingHandler):
            return h

    handler = ForwardingHandler(level)
    target.addHandler(handler)
    return handler


def detach_stdlib_bridge(name: Optional[str] = None) -> None:
    """Remove every bridge handler from a stdlib logger."""
    target = logging.getLogger(name)
    for h in list(target.handlers):
        if isinstance(h, ForwardingHandler):
            target.removeHandler(h)
            h.close()


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(target: logging.Logger, diagnostics_only: bool = False) -> None:
    """Detach internally-managed handlers, keeping bridges when asked to."""
    for h in list(target.handlers):
        if not _is_our_handler(h):
            continue
        if diagnostics_only and isinstance(h, ForwardingHandler):
            continue
        target.removeHandler(h)
        h.close()
