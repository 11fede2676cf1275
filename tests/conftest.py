from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the process-wide logger registry between tests.
"""

import io
import os
import sys
from typing import Generator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from rotalog.core import registry  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_registry() -> Generator[None, None, None]:
    """
    Release the global logger before and after each test.

    The registry has no public re-initialization path, so tests reach into
    its private slot to start from a clean process state.
    """
    registry._instance = None
    yield
    current = registry._instance
    registry._instance = None
    if current is not None:
        current.close()


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory text stream standing in for a console."""
    return io.StringIO()
