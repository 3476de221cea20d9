"""Shared test fixtures."""

from __future__ import annotations

import pytest
import structlog
from structlog.testing import LogCapture


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any structlog configuration a test installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def log_output() -> LogCapture:
    """Capture structlog events as dicts (``event``, ``log_level``, bound keys)."""
    capture = LogCapture()
    structlog.configure(processors=[capture])
    return capture

