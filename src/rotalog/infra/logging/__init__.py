from __future__ import annotations

from .core import (
    attach_stdlib_bridge,
    configure_diagnostics,
    detach_stdlib_bridge,
)
from .handlers import ForwardingHandler

__all__ = [
    "ForwardingHandler",
    "attach_stdlib_bridge",
    "configure_diagnostics",
    "detach_stdlib_bridge",
]
