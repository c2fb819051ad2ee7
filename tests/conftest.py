"""
Shared fixtures.
"""

import pytest

from sizemap_gen.utils.session_logger import SessionLogger


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Start every test with a fresh, silent session logger."""
    monkeypatch.setenv("SIZEMAP_DEBUG_LEVEL", "NONE")
    monkeypatch.setenv("SIZEMAP_LOG_TO_FILE", "false")
    SessionLogger.reset()
    yield
    SessionLogger.reset()
