"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from copymutate import set_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from COPYMUTATE_* variables and cached settings."""
    monkeypatch.delenv("COPYMUTATE_DEFAULT_STRATEGY", raising=False)
    monkeypatch.delenv("COPYMUTATE_WARN_ON_DISCARDED_RETURN", raising=False)
    monkeypatch.delenv("COPYMUTATE_WARN_ON_MISSING_RETURN", raising=False)
    set_settings(None)
    yield
    set_settings(None)

