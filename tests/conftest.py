"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from objectkit import Record, reset_settings


@pytest.fixture
def record():
    """Fresh empty Record."""
    return Record()


@pytest.fixture
def env_settings(monkeypatch):
    """Set OBJECTKIT_* variables for one test and reload the cached settings.

    Usage:
        env_settings(strict_slots=False)
    """

    def apply(**values):
        for key, value in values.items():
            monkeypatch.setenv(f"OBJECTKIT_{key.upper()}", str(value))
        reset_settings()

    reset_settings()
    yield apply
    reset_settings()
