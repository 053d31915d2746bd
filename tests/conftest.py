"""Pytest configuration and shared fixtures for fallible tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def calls() -> list[object]:
    """Recorder for callbacks that must (or must not) run."""
    return []
