"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from colorterm.logger import LoggerManager


@pytest.fixture(autouse=True)
def reset_loggers():
    """Drop cached loggers so each test gets handlers bound to its own streams."""
    LoggerManager.reset()
    yield
    LoggerManager.reset()
